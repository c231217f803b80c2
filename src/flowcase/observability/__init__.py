"""Logging helpers for the flowcase namespace."""

from .logging import ROOT_LOGGER, configure_logging, get_logger

__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
