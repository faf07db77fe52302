"""Logging utilities for graphkit.

Every module obtains its logger through :func:`get_logger` so that all
output lives under the ``graphkit`` namespace and can be tuned in one place.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached so repeated calls never stack handlers. The name
    should normally be ``__name__`` of the calling module.

    Args:
        name: Logger name (typically ``__name__``). If None, returns the
            package logger ``graphkit``.

    Returns:
        Configured logger instance.

    Example:
        >>> from graphkit.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("relaxing %d edges", 12)
    """
    if name is None:
        name = "graphkit"

    if name == "graphkit" or name.startswith("graphkit."):
        logger_name = name
    else:
        logger_name = f"graphkit.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for every graphkit logger.

    Args:
        level: Logging level (``logging.DEBUG``, ``logging.INFO``, ...) or
            its name as a string (``'DEBUG'``, ``'INFO'``, ...).

    Example:
        >>> import logging
        >>> from graphkit.logging import set_log_level
        >>> set_log_level(logging.DEBUG)
    """
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for graphkit.

    Replaces the handlers of all existing graphkit loggers. Loggers created
    afterwards pick up the new level.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default
            ``[LEVEL] name: message`` layout.
        stream: Output stream (default: ``sys.stderr``).

    Example:
        >>> import logging
        >>> from graphkit.logging import configure_logging
        >>> configure_logging(level=logging.DEBUG)
    """
    level = _coerce_level(level)

    if stream is None:
        stream = sys.stderr

    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level
