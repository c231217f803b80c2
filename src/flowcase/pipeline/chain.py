"""Short-circuiting sequential composition.

A chain threads a seed through steps, railway style. The seed and every step's
return are normalized, so steps may return plain values, None,
``(None, error)`` pairs or Results. The first Failure stops the chain: no
later step body runs and that Failure is the chain's result.

    >>> chain_head(10, lift(lambda x: x + 1))
    Success(11)
    >>> chain_head((None, {"type": "planned"}), lambda x: x + 1)
    Failure({'type': 'planned'})

Chains do not catch exceptions. Only steps wrapped with lift() turn raised
exceptions into Failures; an exception escaping a plain step (or an inspect
effect) propagates out of the whole chain. Lift any step that can raise unless
that is what you want.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from ..foundation.config import get_settings
from ..monads import Result, lift as lift_fn, normalize
from ..monads.lift import ErrorFn
from .effects import inspect_step, run_effect
from .step import Binding, Step, StepKind, as_step, step

logger = logging.getLogger("flowcase.chain")

StepLike = Step | Callable[..., Any]


def run_chain(seed: Any, steps: Iterable[StepLike], binding: Binding | str = Binding.HEAD) -> Result[Any, Any]:
    """Evaluate steps left to right starting from normalize(seed).

    Args:
        seed: Initial value (or Result, or result pair).
        steps: Callables or Step instances.
        binding: Where the current value goes in each transform call.

    Returns:
        The Result of the last executed step, or the first Failure.

    Raises:
        TypeError: If a step is neither callable nor a Step (checked before
            anything runs).
        ValueError: If binding is not a Binding value.
        Whatever an unlifted step or inspect effect raises.
    """
    binding = Binding(binding)
    plan = [as_step(s) for s in steps]
    traced = get_settings().trace_steps
    total = len(plan)
    current = normalize(seed)

    for index, s in enumerate(plan, 1):
        if current.is_failure():
            if traced:
                logger.debug("%s chain failed before step %d/%d, skipping %d: %r",
                             binding, index, total, total - index + 1, current.error)
            break
        if traced:
            logger.debug("%s chain step %d/%d: %r", binding, index, total, s)
        if s.kind == StepKind.INSPECT:
            run_effect(s, current.value)
            continue
        current = normalize(s.invoke(current.value, binding))

    return current


def chain_head(seed: Any, *steps: StepLike) -> Result[Any, Any]:
    """Thread seed through steps, passing the current value as first argument."""
    return run_chain(seed, steps, Binding.HEAD)


def chain_tail(seed: Any, *steps: StepLike) -> Result[Any, Any]:
    """Thread seed through steps, passing the current value as last argument."""
    return run_chain(seed, steps, Binding.TAIL)


@dataclass(frozen=True, slots=True)
class Chain:
    """Reusable, immutable chain definition.

    Every builder method returns a new Chain, so partial chains can be shared
    and extended independently.

    Example:
        >>> parse = (
        ...     Chain.head()
        ...     .lift(json.loads)
        ...     .then(dict.get, "order")
        ...     .inspect(log.debug, "order: %s", FLOW_VALUE)
        ...     .lift(Order.model_validate)
        ... )
        >>> order, error = parse(payload)

        >>> split = Chain.head() >> str.strip >> step(str.split, ",")
    """

    binding: Binding = Binding.HEAD
    steps: tuple[Step, ...] = ()

    @classmethod
    def head(cls, *steps: StepLike) -> Chain:
        return cls(Binding.HEAD, tuple(as_step(s) for s in steps))

    @classmethod
    def tail(cls, *steps: StepLike) -> Chain:
        return cls(Binding.TAIL, tuple(as_step(s) for s in steps))

    def _append(self, *new: Step) -> Chain:
        return Chain(self.binding, (*self.steps, *new))

    def then(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Chain:
        """Append a transform step."""
        return self._append(step(fn, *args, **kwargs))

    def lift(self, fn: Callable[..., Any], *args: Any, error_fn: ErrorFn | None = None, **kwargs: Any) -> Chain:
        """Append a transform step whose exceptions become Failures."""
        if not callable(fn):
            raise TypeError(f"Chain.lift() needs a callable, got {type(fn).__name__}")
        return self.then(lift_fn(fn, error_fn), *args, **kwargs)

    def inspect(self, effect: Callable[..., Any], *args: Any, **kwargs: Any) -> Chain:
        """Append an inspect step."""
        return self._append(inspect_step(effect, *args, **kwargs))

    def run(self, seed: Any) -> Result[Any, Any]:
        return run_chain(seed, self.steps, self.binding)

    def __call__(self, seed: Any) -> Result[Any, Any]:
        return run_chain(seed, self.steps, self.binding)

    def __rshift__(self, other: Chain | StepLike) -> Chain:
        """``chain >> fn`` appends a step; ``chain >> other_chain`` appends its steps.

        Steps taken from another chain run under this chain's binding.
        """
        if isinstance(other, Chain):
            return self._append(*other.steps)
        return self._append(as_step(other))
