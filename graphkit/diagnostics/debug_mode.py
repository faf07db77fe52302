"""Debug mode management for graphkit.

Debug mode makes algorithms verify the preconditions they otherwise leave
to the caller: non-negative weights for Dijkstra, a square matrix for
incremental all-pairs updates, symmetric arcs for Prim.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "GRAPHKIT_DEBUG"
_TRUTHY = ("1", "true", "yes", "on")


def _flag_from_env() -> bool:
    return os.getenv(_DEBUG_ENV_VAR, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env()


def is_debug_enabled() -> bool:
    """
    Return whether graphkit debug mode is currently enabled.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable graphkit debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


def reset_debug_from_env() -> bool:
    """
    Re-read the GRAPHKIT_DEBUG environment variable.

    Returns
    -------
    bool
        The new debug state.
    """
    set_debug_enabled(_flag_from_env())
    return _debug_enabled


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    The previous state is restored on exit, also when an exception escapes.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode within the context.

    Example
    -------
    >>> with debug_context(True):
    ...     dijkstra(g, 0)  # raises ValueError on a negative weight
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
