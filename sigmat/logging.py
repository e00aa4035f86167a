"""Logging utilities for sigmat.

All library modules obtain their logger through :func:`get_logger`, which
hands out cached ``sigmat.*`` loggers writing ``[LEVEL] name: message`` lines
to stderr. The initial level comes from the ``SIGMAT_LOG_LEVEL`` environment
variable (default WARNING).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO, Union

_LOG_LEVEL_ENV_VAR = "SIGMAT_LOG_LEVEL"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: Union[int, str, None]) -> int:
    """Map a level name or number to a logging level (WARNING if unknown)."""
    if level is None:
        return logging.WARNING
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        return resolved if isinstance(resolved, int) else logging.WARNING
    return int(level)


_default_level: int = _resolve_level(os.getenv(_LOG_LEVEL_ENV_VAR))
_default_stream: Optional[TextIO] = None
_default_format: str = _DEFAULT_FORMAT


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(_default_stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_default_format))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a ``sigmat`` logger.

    Args:
        name: Logger name, usually ``__name__``. Names outside the ``sigmat``
            namespace are nested under it. ``None`` returns the package logger.

    Returns:
        Cached logger instance with a single stderr handler.

    Example:
        >>> from sigmat.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("filtering %d columns", 4)
    """
    if name is None or name == "sigmat":
        logger_name = "sigmat"
    elif name.startswith("sigmat."):
        logger_name = name
    else:
        logger_name = f"sigmat.{name}"

    cached = _loggers.get(logger_name)
    if cached is not None:
        return cached

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_default_level)
        logger.addHandler(_make_handler(_default_level))
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: Union[int, str]) -> None:
    """Set the level of every sigmat logger, existing and future.

    Args:
        level: ``logging.DEBUG`` etc., or a level name such as ``"debug"``.
    """
    global _default_level
    _default_level = _resolve_level(level)

    for logger in _loggers.values():
        logger.setLevel(_default_level)
        for handler in logger.handlers:
            handler.setLevel(_default_level)


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Reconfigure level, format and output stream of all sigmat loggers.

    Existing handlers are replaced, so this is safe to call more than once
    (tests use it to capture output).

    Args:
        level: Logging level (default: WARNING).
        format_string: Record format. Defaults to ``[LEVEL] name: message``.
        stream: Output stream (default: ``sys.stderr``).
    """
    global _default_level, _default_stream, _default_format
    _default_level = _resolve_level(level)
    _default_stream = stream
    _default_format = format_string or _DEFAULT_FORMAT

    for logger in _loggers.values():
        logger.setLevel(_default_level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler(_default_level))
