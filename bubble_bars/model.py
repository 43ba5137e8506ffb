import random
from typing import Iterable, Optional, Tuple

from bubble_bars.errors import ConfigError, OutOfRangeError


# ============================================================================
# Bar Data
# ============================================================================
class BarModel:
    """Values being sorted plus the per-position "finalized" flags.

    The only mutators are swap_adjacent() and mark_finalized(); the
    animator is the one caller of either.
    """

    def __init__(self, values: Iterable[int]):
        self._values = [int(v) for v in values]
        for v in self._values:
            if v < 1:
                raise ConfigError(f"bar values must be positive, got {v}")
        self._finalized = [False] * len(self._values)

    @classmethod
    def random(cls, count: int, low: int, high: int, rng: Optional[random.Random] = None) -> "BarModel":
        """Fill `count` bars with integers drawn uniformly from [low, high]."""
        if count < 0:
            raise ConfigError(f"bar count must not be negative, got {count}")
        rng = rng or random.Random()
        return cls(rng.randint(low, high) for _ in range(count))

    def __len__(self):
        return len(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __repr__(self):
        return f"BarModel(values={self._values!r}, finalized={self._finalized!r})"

    @property
    def values(self) -> Tuple[int, ...]:
        return tuple(self._values)

    @property
    def finalized(self) -> Tuple[bool, ...]:
        return tuple(self._finalized)

    @property
    def finalize_count(self) -> int:
        return sum(self._finalized)

    @property
    def all_finalized(self) -> bool:
        return all(self._finalized)

    def is_sorted(self) -> bool:
        """Check if values are non-decreasing"""
        for i in range(len(self._values) - 1):
            if self._values[i] > self._values[i + 1]:
                return False
        return True

    def swap_adjacent(self, j: int) -> None:
        if not 0 <= j < len(self._values) - 1:
            raise OutOfRangeError(f"cannot swap positions {j} and {j + 1} of {len(self._values)} bars")
        self._values[j], self._values[j + 1] = self._values[j + 1], self._values[j]

    def mark_finalized(self, k: int) -> None:
        """Flag position k as settled. Repeat calls are no-ops."""
        if not 0 <= k < len(self._values):
            raise OutOfRangeError(f"cannot finalize position {k} of {len(self._values)} bars")
        self._finalized[k] = True
