"""
Sort strategies.

A strategy is a generator function taking the live BarModel and yielding
SortStep values. It only reads the model: swaps and finalizations are
applied by the animator, which resumes the generator only after the
previous step has been carried out.

    from bubble_bars.strategies import get_strategy
    steps = get_strategy("bubble")(model)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterator, Optional

from bubble_bars.errors import UnknownStrategyError
from bubble_bars.model import BarModel


class StepKind(Enum):
    COMPARE = "compare"      # compared, no swap needed
    SWAP = "swap"            # compared, a and b must trade places
    ADVANCE = "advance"      # move the cursor, nothing to show
    FINALIZE = "finalize"    # `index` will never move again
    DONE = "done"


@dataclass(frozen=True)
class SortStep:
    kind: StepKind
    outer: int = 0
    inner: int = 0
    a: Optional[int] = None
    b: Optional[int] = None
    index: Optional[int] = None


Strategy = Callable[[BarModel], Iterator[SortStep]]


# ============================================================================
# Bubble Sort
# ============================================================================
def bubble_sort(model: BarModel) -> Iterator[SortStep]:
    """Classic bubble sort, one adjacent comparison per step.

    Every pass ends by finalizing the last unsorted slot. The final pass
    is empty and finalizes slot 0, so each index is finalized exactly once.
    """
    n = len(model)
    for i in range(n):
        for j in range(n - 1 - i):
            kind = StepKind.SWAP if model[j] > model[j + 1] else StepKind.COMPARE
            yield SortStep(kind, outer=i, inner=j, a=j, b=j + 1)
            yield SortStep(StepKind.ADVANCE, outer=i, inner=j + 1)
        yield SortStep(StepKind.FINALIZE, outer=i, inner=n - 1 - i, index=n - 1 - i)
    yield SortStep(StepKind.DONE, outer=max(n - 1, 0), inner=0)


# ============================================================================
# Registry
# ============================================================================
STRATEGIES: Dict[str, Strategy] = {
    "bubble": bubble_sort,
}


def get_strategy(key: str) -> Strategy:
    try:
        return STRATEGIES[key]
    except KeyError:
        raise UnknownStrategyError(key) from None
