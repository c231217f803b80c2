"""Logging setup for flowcase.

Modules log through stdlib loggers under the ``flowcase`` namespace
(``flowcase.chain``, ``flowcase.lift``). The library only attaches a
NullHandler; applications call configure_logging() or set up handlers
themselves.

Example:
    >>> from flowcase.observability import configure_logging
    >>> configure_logging("DEBUG")   # plus FLOWCASE_LOG_TRACE_STEPS=true for per-step records
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..foundation.config import get_settings

ROOT_LOGGER = "flowcase"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


class _FlowcaseHandler(logging.StreamHandler):
    """Marker subclass so configure_logging() can find its own handler."""


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the flowcase namespace: get_logger("chain") -> flowcase.chain."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(level: str | int | None = None, *, stream: TextIO | None = None) -> logging.Logger:
    """Send flowcase log records to a stream.

    Args:
        level: Level name or number. Defaults to settings.logging.level.
        stream: Output stream (default stderr).

    Returns:
        The configured ``flowcase`` logger.

    Calling it again replaces the handler installed by the previous call.
    """
    if level is None:
        level = get_settings().logging.level_no
    elif isinstance(level, str):
        name, level = level, logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    root = logging.getLogger(ROOT_LOGGER)
    for handler in [h for h in root.handlers if isinstance(h, _FlowcaseHandler)]:
        root.removeHandler(handler)

    handler = _FlowcaseHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
    return root
