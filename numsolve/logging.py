"""Logging utilities for numsolve.

Every solver module logs through a cached, namespaced logger so that the
iteration trace of a single algorithm can be switched on without touching
the root logger.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

_ROOT = "numsolve"

# Settings applied to loggers created from now on
_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_DEFAULT_STREAM: Optional[TextIO] = None

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _make_handler(level: int) -> logging.Handler:
    stream = sys.stderr if _DEFAULT_STREAM is None else _DEFAULT_STREAM
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create the logger for a numsolve module.

    Args:
        name: Usually ``__name__`` of the calling module. Names outside the
            ``numsolve`` namespace are prefixed with ``numsolve.``. If None,
            the package logger is returned.

    Returns:
        A logger writing ``[LEVEL] name: message`` lines to stderr that does
        not propagate to the root logger.

    Example:
        >>> from numsolve.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("bracket narrowed to [%g, %g]", 0.0, 1.0)
    """
    if name is None:
        name = _ROOT
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"

    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL))
        logger.propagate = False

    _loggers[name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every numsolve logger and of loggers created later.

    Args:
        level: A ``logging`` level constant or its name (``"DEBUG"`` etc.).
    """
    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(_DEFAULT_LEVEL)
        for handler in logger.handlers:
            handler.setLevel(_DEFAULT_LEVEL)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Replace the handlers of all numsolve loggers.

    The settings also apply to loggers created after this call.

    Args:
        level: Logging level (default: WARNING).
        format_string: Record format. Defaults to
            ``[%(levelname)s] %(name)s: %(message)s``.
        stream: Output stream (default: sys.stderr).

    Example:
        >>> import logging
        >>> from numsolve.logging import configure_logging
        >>> configure_logging(level=logging.INFO)
    """
    global _DEFAULT_LEVEL, _DEFAULT_FORMAT, _DEFAULT_STREAM
    _DEFAULT_LEVEL = _coerce_level(level)
    _DEFAULT_FORMAT = format_string or "[%(levelname)s] %(name)s: %(message)s"
    _DEFAULT_STREAM = stream

    for logger in _loggers.values():
        logger.setLevel(_DEFAULT_LEVEL)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(_DEFAULT_LEVEL))


@contextmanager
def verbose_logging(logger: logging.Logger, enabled: bool = True) -> Iterator[None]:
    """Let INFO records of ``logger`` through for the duration of a block.

    The logger and its handlers are lowered to INFO where they sit above it,
    and their previous levels are restored on exit. Levels already at INFO
    or below are left alone. Does nothing when ``enabled`` is false.

    Example:
        >>> from numsolve.logging import get_logger, verbose_logging
        >>> logger = get_logger(__name__)
        >>> with verbose_logging(logger):
        ...     logger.info("shown with the default WARNING setup")
    """
    if not enabled:
        yield
        return

    saved = [(logger, logger.level)] + [(h, h.level) for h in logger.handlers]
    if logger.getEffectiveLevel() > logging.INFO:
        logger.setLevel(logging.INFO)
    for handler in logger.handlers:
        if handler.level > logging.INFO:
            handler.setLevel(logging.INFO)
    try:
        yield
    finally:
        for obj, level in saved:
            obj.setLevel(level)


__all__ = ["configure_logging", "get_logger", "set_log_level", "verbose_logging"]
