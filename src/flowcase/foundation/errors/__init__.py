"""Error handling for flowcase.

- ErrorCode: failure taxonomy (nil result, explicit failure, captured condition, ...)
- FlowError/SignatureMismatch/UnwrapError: exceptions raised by the library
- ErrorTrace/ErrorContext: structured Failure payloads with provenance
"""

from .errors import ErrorCode, FlowError, SignatureMismatch, UnwrapError, classify_failure
from .types import ErrorContext, ErrorTrace, context, trace, trace_from_exc

__all__ = [
    # Exceptions & taxonomy
    "ErrorCode", "FlowError", "SignatureMismatch", "UnwrapError", "classify_failure",
    # Payloads
    "ErrorContext", "ErrorTrace", "context", "trace", "trace_from_exc",
]
