"""Sequential composition of Result-producing steps.

Two binding conventions decide where the flowing value goes:

    >>> chain_head(10, step(operator.truediv, 2))   # truediv(10, 2)
    Success(5.0)
    >>> chain_tail(10, step(operator.truediv, 2))   # truediv(2, 10)
    Success(0.2)

Inspect steps observe the value without changing it:

    >>> chain_head(10, inspect_step(print, "value:", FLOW_VALUE), lambda x: x + 1)
    value: 10
    Success(11)
"""

from .chain import Chain, StepLike, chain_head, chain_tail, run_chain
from .effects import FLOW_VALUE, inspect_step, substitute
from .step import Binding, Step, StepKind, as_step, step

__all__ = [
    # Chains
    "chain_head", "chain_tail", "run_chain", "Chain",
    # Steps
    "Step", "StepKind", "StepLike", "Binding", "step", "as_step",
    # Inspect
    "inspect_step", "FLOW_VALUE", "substitute",
]
