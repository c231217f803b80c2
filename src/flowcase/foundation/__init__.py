"""Foundation - building blocks shared by the monads and pipeline packages.

Contains: error types and failure payloads, configuration.
"""

from __future__ import annotations

__all__ = [
    # Errors
    "ErrorCode", "FlowError", "SignatureMismatch", "UnwrapError", "classify_failure",
    "ErrorContext", "ErrorTrace", "context", "trace", "trace_from_exc",
    # Config
    "FlowcaseSettings", "LiftSettings", "LoggingSettings", "get_settings", "clear_settings_cache",
]


def __getattr__(name: str):
    """Lazy imports to avoid circular dependencies."""
    if name in ("ErrorCode", "FlowError", "SignatureMismatch", "UnwrapError", "classify_failure",
                "ErrorContext", "ErrorTrace", "context", "trace", "trace_from_exc"):
        from . import errors
        return getattr(errors, name)

    if name in ("FlowcaseSettings", "LiftSettings", "LoggingSettings", "get_settings", "clear_settings_cache"):
        from . import config
        return getattr(config, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
