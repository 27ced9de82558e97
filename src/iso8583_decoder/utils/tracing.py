"""Logging setup and decode tracing hooks.

The decoder never prints. Intermediate decode steps are reported through
module loggers at DEBUG level and, optionally, through a caller-supplied
trace callback that receives an event name and a data dict.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Optional

TraceHook = Callable[[str, dict[str, Any]], None]

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def emit(trace: Optional[TraceHook], event: str, **data: Any) -> None:
    """Send a trace event to ``trace`` if one is attached.

    Args:
        trace: Trace callback, or None
        event: Event name (``header``, ``bitmap``, ``field``, ...)
        **data: Event payload
    """
    if trace is not None:
        trace(event, data)


def setup_logging(level: str = "INFO", stream: Any = None) -> logging.Logger:
    """Configure the package logger with a single stream handler.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        stream: Output stream, defaults to stderr

    Returns:
        The ``iso8583_decoder`` package logger
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger("iso8583_decoder")
    logger.setLevel(numeric_level)

    # Avoid duplicate handlers
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(numeric_level)

    return logger
