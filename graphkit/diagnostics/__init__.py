"""Diagnostics and debugging utilities for graphkit."""

from .core import (
    assert_non_negative_weights,
    assert_square_matrix,
    assert_symmetric_weights,
    is_symmetric,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    reset_debug_from_env,
    set_debug_enabled,
)

__all__ = [
    "assert_non_negative_weights",
    "assert_square_matrix",
    "assert_symmetric_weights",
    "is_symmetric",
    "is_debug_enabled",
    "set_debug_enabled",
    "reset_debug_from_env",
    "debug_context",
]
