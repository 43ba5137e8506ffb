"""
bubble_bars
-----------
Animated bubble sort over a handful of bars.

    from bubble_bars import BarModel, SortAnimator
"""

from bubble_bars.animator import Phase, Snapshot, SortAnimator, SystemClock
from bubble_bars.config import DEFAULT_CONFIG, VisualizerConfig
from bubble_bars.errors import BubbleBarsError, ConfigError, OutOfRangeError, UnknownStrategyError
from bubble_bars.model import BarModel
from bubble_bars.strategies import STRATEGIES, SortStep, StepKind, bubble_sort, get_strategy

__version__ = "0.1.0"

__all__ = [
    "BarModel",
    "SortAnimator",
    "Phase",
    "Snapshot",
    "SystemClock",
    "VisualizerConfig",
    "DEFAULT_CONFIG",
    "SortStep",
    "StepKind",
    "STRATEGIES",
    "bubble_sort",
    "get_strategy",
    "BubbleBarsError",
    "ConfigError",
    "OutOfRangeError",
    "UnknownStrategyError",
]
