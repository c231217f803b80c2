"""flowcase - composable error handling with Results and short-circuiting chains.

Mix functions that return plain values, return None, return ``(None, error)``
pairs, or raise, and compose them into one pipeline that stops at the first
failure.

Quick Start:
    >>> from flowcase import chain_head, chain_tail, lift, step
    >>>
    >>> chain_head(10, lift(lambda x: x + 1))
    Success(11)
    >>>
    >>> def boom(x):
    ...     raise ValueError("boom")
    >>> value, error = chain_head(10, lift(lambda x: x + 1), lift(boom))
    >>> (value, repr(error))
    (None, "ValueError('boom')")

Result pairs:
    >>> def find(user_id):
    ...     return (None, {"type": "not-found"}) if user_id < 0 else {"id": user_id}
    >>> chain_head(-1, find, lambda user: user["id"])
    Failure({'type': 'not-found'})

Binding conventions:
    >>> chain_head(8, step(pow, 2))   # pow(8, 2)
    Success(64)
    >>> chain_tail(8, step(pow, 2))   # pow(2, 8)
    Success(256)

Only lifted steps capture exceptions. A plain step that raises aborts the
whole chain with that exception, and so does calling a lifted step with
arguments its signature cannot accept (SignatureMismatch).
"""

from __future__ import annotations

__version__ = "0.1.0"

# Errors
from .foundation.errors import (
    ErrorCode,
    ErrorContext,
    ErrorTrace,
    FlowError,
    SignatureMismatch,
    UnwrapError,
    classify_failure,
    trace_from_exc,
)

# Config
from .foundation.config import FlowcaseSettings, clear_settings_cache, get_settings

# Results
from .monads import (
    NIL_RETURNED,
    Failure,
    Result,
    Success,
    failure,
    is_success,
    lift,
    normalize,
    success,
    try_call,
    wrap,
)

# Chains
from .pipeline import (
    FLOW_VALUE,
    Binding,
    Chain,
    Step,
    StepKind,
    chain_head,
    chain_tail,
    inspect_step,
    run_chain,
    step,
    substitute,
)

# Logging
from .observability import configure_logging, get_logger

__all__ = [
    "__version__",
    # Results
    "Result", "Success", "Failure", "success", "failure", "is_success",
    "normalize", "NIL_RETURNED",
    "lift", "wrap", "try_call",
    # Chains
    "chain_head", "chain_tail", "run_chain", "Chain", "Step", "StepKind", "Binding", "step",
    "inspect_step", "FLOW_VALUE", "substitute",
    # Errors
    "ErrorCode", "FlowError", "SignatureMismatch", "UnwrapError", "classify_failure",
    "ErrorContext", "ErrorTrace", "trace_from_exc",
    # Config
    "FlowcaseSettings", "get_settings", "clear_settings_cache",
    # Logging
    "configure_logging", "get_logger",
]
