"""Structured error payloads for Failure values.

Failures carry arbitrary data, but exceptions make poor payloads once they
leave the frame that raised them. ErrorTrace is a frozen pydantic model
capturing what matters (message, exception type, traceback) plus the chain
operations a failure passed through.
"""

from __future__ import annotations

import traceback
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ErrorContext(BaseModel):
    """Chain operation a failure passed through."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    operation: Annotated[str, Field(min_length=1)]
    location: str = Field(default="", repr=False)
    metadata: dict[str, Any] = Field(default_factory=dict, repr=False)

    def __str__(self) -> str:
        loc = f" at {self.location}" if self.location else ""
        meta = f" ({', '.join(f'{k}={v}' for k, v in self.metadata.items())})" if self.metadata else ""
        return f"{self.operation}{loc}{meta}"

    def __hash__(self) -> int:
        return hash((self.operation, self.location, tuple(sorted(self.metadata.items()))))


class ErrorTrace(BaseModel):
    """Failure payload built from a captured exception or by hand."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    message: Annotated[str, Field(min_length=1)]
    contexts: tuple[ErrorContext, ...] = ()
    error_code: str | None = None
    exception_type: str | None = None
    recoverable: bool = True
    details: str | None = Field(default=None, repr=False)

    @computed_field
    @property
    def depth(self) -> int:
        return len(self.contexts)

    @computed_field
    @property
    def root_operation(self) -> str | None:
        """Operation where the failure was first recorded."""
        return self.contexts[0].operation if self.contexts else None

    def __hash__(self) -> int:
        return hash((self.message, self.error_code, self.exception_type, self.contexts))

    def with_operation(self, operation: str, location: str = "", **metadata: Any) -> ErrorTrace:
        """New trace with one more operation on the context stack."""
        return self.model_copy(update={"contexts": (*self.contexts, context(operation, location, **metadata))})

    def format(self, *, include_details: bool = False) -> str:
        """Message with exception type and code, then one context per line."""
        head = self.message
        if self.exception_type:
            head += f" ({self.exception_type})"
        if self.error_code:
            head += f" [{self.error_code}]"
        lines = [head]
        if self.contexts:
            lines.append("Context trace:")
            lines.extend(f"  - {ctx}" for ctx in self.contexts)
        if include_details and self.details:
            lines.extend(["Details:", self.details.rstrip()])
        return "\n".join(lines)

    __str__ = format


def context(operation: str, location: str = "", **metadata: Any) -> ErrorContext:
    return ErrorContext(operation=operation, location=location, metadata=metadata)


def trace(message: str, *, code: str | None = None, recoverable: bool = True) -> ErrorTrace:
    """Hand-built failure payload, for steps that fail without an exception."""
    return ErrorTrace(message=message, error_code=code, recoverable=recoverable)


def trace_from_exc(exc: BaseException, *, operation: str = "", code: str | None = None) -> ErrorTrace:
    """Build an ErrorTrace from a caught exception.

    Usable directly as lift()'s error_fn:

        >>> parse = lift(int, trace_from_exc)
        >>> parse("x").error.exception_type
        'ValueError'
    """
    t = ErrorTrace(
        message=str(exc) or type(exc).__name__,
        error_code=code,
        exception_type=type(exc).__name__,
        details="".join(traceback.format_exception(exc)),
    )
    return t.with_operation(operation) if operation else t
