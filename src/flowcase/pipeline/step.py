"""Chain steps and argument-binding conventions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Callable, Mapping


class Binding(StrEnum):
    """Where the current value goes when a transform step is invoked.

    HEAD: ``fn(current, *args, **kwargs)``
    TAIL: ``fn(*args, current, **kwargs)``
    """
    HEAD = "head"
    TAIL = "tail"


class StepKind(StrEnum):
    TRANSFORM = "transform"
    INSPECT = "inspect"


@dataclass(frozen=True, slots=True)
class Step:
    """One chain element: a callable plus arguments fixed at definition time.

    The current value is not stored here; the chain supplies it at invocation
    time according to its Binding.
    """

    fn: Callable[..., Any]
    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)
    kind: StepKind = StepKind.TRANSFORM

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", StepKind(self.kind))

    @property
    def name(self) -> str:
        return getattr(self.fn, "__qualname__", None) or getattr(self.fn, "__name__", None) or repr(self.fn)

    def invoke(self, value: Any, binding: Binding | str) -> Any:
        """Call fn with value placed per binding. Returns the raw outcome."""
        if Binding(binding) == Binding.HEAD:
            return self.fn(value, *self.args, **self.kwargs)
        return self.fn(*self.args, value, **self.kwargs)

    def __repr__(self) -> str:
        extra = [repr(a) for a in self.args] + [f"{k}={v!r}" for k, v in self.kwargs.items()]
        suffix = f", {', '.join(extra)}" if extra else ""
        return f"Step[{self.kind}]({self.name}{suffix})"


def step(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Step:
    """Transform step with fixed extra arguments.

    Example:
        >>> chain_head(10, step(operator.sub, 3)).unwrap()   # 10 - 3
        7
        >>> chain_tail(10, step(operator.sub, 3)).unwrap()   # 3 - 10
        -7
    """
    if not callable(fn):
        raise TypeError(f"step() needs a callable, got {type(fn).__name__}")
    return Step(fn, args, dict(kwargs))


def as_step(obj: Step | Callable[..., Any]) -> Step:
    """Coerce a chain argument into a Step. Bare callables take no extra args."""
    if isinstance(obj, Step):
        return obj
    if callable(obj):
        return Step(obj)
    raise TypeError(f"chain steps must be callables or Step instances, got {type(obj).__name__}: {obj!r}")
