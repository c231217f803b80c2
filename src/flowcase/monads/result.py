"""Success/Failure result type.

A closed two-variant union. Besides the usual railway combinators it supports
two-slot destructuring, so code written against the ``(value, error)`` pair
convention keeps working:

    >>> value, error = Success(11)
    >>> (value, error)
    (11, None)
    >>> value, error = Failure("boom")
    >>> (value, error)
    (None, 'boom')
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

from ..foundation.errors import UnwrapError

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")
F = TypeVar("F")

_SUCCESS = True
_FAILURE = False


class Result(Generic[T, E]):
    """Discriminated union of Success(value) and Failure(error).

    Immutable; every combinator returns a new Result. The payload of either
    variant is opaque: None is a legal Success value when a producer builds the
    Result itself (only normalize() treats a bare None as failure).

    Examples:
        >>> Success(5).map(lambda x: x * 2)
        Success(10)
        >>> Failure("bad").map(lambda x: x * 2)
        Failure('bad')
        >>> Success(5).flat_map(lambda x: Failure("neg") if x < 0 else Success(x))
        Success(5)
    """

    __slots__ = ("_payload", "_ok")
    __match_args__ = ("value", "error")

    def __init__(self, payload: T | E, ok: bool) -> None:
        """Private constructor. Use Success() or Failure()."""
        object.__setattr__(self, "_payload", payload)
        object.__setattr__(self, "_ok", ok)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ─── Variant Checks ──────────────────────────────────────────────

    def is_success(self) -> bool:
        return self._ok

    def is_failure(self) -> bool:
        return not self._ok

    # ─── Slot Access ─────────────────────────────────────────────────

    @property
    def value(self) -> T | None:
        """Success value, or None on Failure."""
        return self._payload if self._ok else None  # type: ignore[return-value]

    @property
    def error(self) -> E | None:
        """Failure payload, or None on Success."""
        return None if self._ok else self._payload  # type: ignore[return-value]

    def to_tuple(self) -> tuple[T | None, E | None]:
        """The (value, error) pair view."""
        return (self._payload, None) if self._ok else (None, self._payload)  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T | E | None]:
        """Always yields two slots, enabling ``value, error = result``."""
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index: int) -> T | E | None:
        if index in (0, -2):
            return self.value
        if index in (1, -1):
            return self.error
        raise IndexError(f"Result index out of range: {index}")

    # ─── Extraction ──────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Success value. Raises UnwrapError on Failure."""
        if self._ok:
            return self._payload  # type: ignore[return-value]
        raise UnwrapError(f"unwrap() on Failure: {self._payload!r}")

    def unwrap_err(self) -> E:
        """Failure payload. Raises UnwrapError on Success."""
        if not self._ok:
            return self._payload  # type: ignore[return-value]
        raise UnwrapError(f"unwrap_err() on Success: {self._payload!r}")

    def unwrap_or(self, default: T) -> T:
        return self._payload if self._ok else default  # type: ignore[return-value]

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        return self._payload if self._ok else f(self._payload)  # type: ignore[return-value,arg-type]

    # ─── Combinators ─────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to a Success value; Failures pass through."""
        return Result(f(self._payload), _SUCCESS) if self._ok else self  # type: ignore[arg-type,return-value]

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to a Failure payload; Successes pass through."""
        return self if self._ok else Result(f(self._payload), _FAILURE)  # type: ignore[arg-type,return-value]

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind: f must itself return a Result."""
        return f(self._payload) if self._ok else self  # type: ignore[arg-type,return-value]

    and_then = flat_map

    def or_else(self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from a Failure by computing a new Result from its payload."""
        return self if self._ok else f(self._payload)  # type: ignore[arg-type,return-value]

    def match(self, *, success: Callable[[T], U], failure: Callable[[E], U]) -> U:
        """Exhaustive case analysis."""
        return success(self._payload) if self._ok else failure(self._payload)  # type: ignore[arg-type]

    # ─── Dunder Methods ──────────────────────────────────────────────

    __bool__ = lambda self: self._ok  # noqa: E731
    __hash__ = lambda self: hash((self._ok, self._payload))  # noqa: E731
    __repr__ = lambda self: f"{'Success' if self._ok else 'Failure'}({self._payload!r})"  # noqa: E731
    __str__ = __repr__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._ok == other._ok and self._payload == other._payload


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def Success(value: T) -> Result[T, E]:  # noqa: N802
    """Construct the success variant."""
    return Result(value, _SUCCESS)


def Failure(error: E) -> Result[T, E]:  # noqa: N802
    """Construct the failure variant."""
    return Result(error, _FAILURE)


success = Success
failure = Failure


def is_success(result: Result[T, E]) -> bool:
    """Functional form of Result.is_success()."""
    return result.is_success()
