"""Inspect steps: observe the flowing value without changing it.

The simplest form passes the current value to the effect:

    >>> chain_head(10, inspect_step(seen.append), inc)
    Success(11)

With extra arguments, the value only appears where FLOW_VALUE is written,
anywhere inside nested lists, tuples, sets and dict values:

    >>> chain_head(10, inspect_step(log.info, "value=%s", FLOW_VALUE), inc)
    >>> chain_head(10, inspect_step(state.update, {"last": FLOW_VALUE}))

The effect's return value is discarded and the step always yields the value it
received. An exception raised by the effect is not captured: it propagates out
of the chain like any unlifted step.
"""

from __future__ import annotations

from typing import Any, Callable

from .step import Step, StepKind


class _FlowValue:
    """Placeholder type. Use the FLOW_VALUE singleton."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "FLOW_VALUE"

    def __reduce__(self) -> str:
        return "FLOW_VALUE"


FLOW_VALUE = _FlowValue()


def substitute(template: Any, value: Any) -> Any:
    """Copy of template with every FLOW_VALUE replaced by value.

    Recurses through lists, tuples (namedtuples keep their type), sets,
    frozensets and dict values. Other objects are returned untouched.
    """
    if template is FLOW_VALUE:
        return value
    match template:
        case list():
            return [substitute(item, value) for item in template]
        case tuple() if hasattr(template, "_fields"):
            return type(template)(*(substitute(item, value) for item in template))
        case tuple():
            return tuple(substitute(item, value) for item in template)
        case dict():
            return {k: substitute(v, value) for k, v in template.items()}
        case set() | frozenset():
            return type(template)(substitute(item, value) for item in template)
        case _:
            return template


def inspect_step(effect: Callable[..., Any], *args: Any, **kwargs: Any) -> Step:
    """Side-effect-only step. See the module docstring for argument handling."""
    if not callable(effect):
        raise TypeError(f"inspect_step() needs a callable, got {type(effect).__name__}")
    return Step(effect, args, dict(kwargs), StepKind.INSPECT)


def run_effect(step: Step, value: Any) -> None:
    """Execute an inspect step against value, discarding its return."""
    if not step.args and not step.kwargs:
        step.fn(value)
        return
    step.fn(*substitute(step.args, value), **substitute(dict(step.kwargs), value))
