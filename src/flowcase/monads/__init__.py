"""Result type, normalization and lifting.

Example:
    >>> from flowcase.monads import Success, lift, normalize
    >>>
    >>> normalize((None, "not found"))
    Failure('not found')
    >>>
    >>> parse = lift(int, lambda exc: f"bad number: {exc}")
    >>> parse("42")
    Success(42)
    >>> parse("x").error
    "bad number: invalid literal for int() with base 10: 'x'"
"""

from .lift import lift, try_call, wrap
from .normalize import NIL_RETURNED, normalize
from .result import Failure, Result, Success, failure, is_success, success

__all__ = [
    # Core type
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "is_success",
    # Normalization
    "normalize",
    "NIL_RETURNED",
    # Lifting
    "lift",
    "wrap",
    "try_call",
]
