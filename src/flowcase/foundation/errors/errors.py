"""Exceptions raised by flowcase and the failure taxonomy.

Only two conditions ever escape a lifted call: SignatureMismatch (the caller
invoked the callable with arguments it cannot accept) and non-Exception
BaseExceptions. Everything else a lifted callable raises becomes a Failure.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...monads.result import Result


class ErrorCode(StrEnum):
    """How a value or condition was classified by the engine.

    Only the first three ever end up inside a Failure; the last two describe
    conditions that terminate a chain abnormally.
    """
    NIL_RESULT = "NIL_RESULT"
    EXPLICIT_FAILURE = "EXPLICIT_FAILURE"
    CAPTURED_CONDITION = "CAPTURED_CONDITION"
    FATAL_CONDITION = "FATAL_CONDITION"
    UNLIFTED_THROW = "UNLIFTED_THROW"


class FlowError(Exception):
    """Base for exceptions raised by flowcase itself."""


class SignatureMismatch(FlowError, TypeError):
    """Callable invoked with arguments its signature cannot bind.

    This is a programmer error, so lift() never turns it into a Failure.
    Subclasses TypeError so code catching the builtin arity error keeps working.
    """

    __slots__ = ("fn_name", "reason")

    def __init__(self, fn_name: str, reason: str) -> None:
        self.fn_name = fn_name
        self.reason = reason
        super().__init__(f"{fn_name}(): {reason}")


class UnwrapError(FlowError, RuntimeError):
    """unwrap() called on the wrong variant."""


def classify_failure(result: Result[object, object]) -> ErrorCode | None:
    """Best-effort classification of a Failure's payload. None for Success.

    A "Nil returned" string is reported as NIL_RESULT, exceptions and traces
    built from exceptions as CAPTURED_CONDITION, anything else as
    EXPLICIT_FAILURE.
    """
    from ...monads.normalize import NIL_RETURNED
    from .types import ErrorTrace

    if result.is_success():
        return None
    error = result.error
    if isinstance(error, str) and error == NIL_RETURNED:
        return ErrorCode.NIL_RESULT
    if isinstance(error, BaseException):
        return ErrorCode.CAPTURED_CONDITION
    if isinstance(error, ErrorTrace) and error.exception_type:
        return ErrorCode.CAPTURED_CONDITION
    return ErrorCode.EXPLICIT_FAILURE
