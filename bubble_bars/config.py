from dataclasses import dataclass, replace
from typing import Optional, Tuple

from bubble_bars.errors import ConfigError

Color = Tuple[int, int, int]

# ============================================================================
# Constants
# ============================================================================
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 960
NUM_BARS = 10
FPS = 144

VALUE_MIN = 1
VALUE_MAX = 100

STEP_DELAY = 0.25     # pause after every comparison / finalization
SWAP_DURATION = 0.5   # swap animation length

# Colors
BG_COLOR = (127, 127, 127)
BAR_COLOR = (255, 255, 255)
COMPARE_COLOR = (255, 255, 0)
SWAP_COLOR = (255, 0, 0)
DONE_COLOR = (0, 255, 0)
OUTLINE_COLOR = (0, 0, 0)


@dataclass(frozen=True)
class VisualizerConfig:
    width: int = WINDOW_WIDTH
    height: int = WINDOW_HEIGHT
    bar_count: int = NUM_BARS
    min_value: int = VALUE_MIN
    max_value: int = VALUE_MAX
    step_delay: float = STEP_DELAY
    swap_duration: float = SWAP_DURATION
    fps: int = FPS
    margin_ratio: float = 0.1
    outline_thickness: int = 2
    background_color: Color = BG_COLOR
    bar_color: Color = BAR_COLOR
    compare_color: Color = COMPARE_COLOR
    swap_color: Color = SWAP_COLOR
    done_color: Color = DONE_COLOR
    outline_color: Color = OUTLINE_COLOR
    sound: bool = True
    seed: Optional[int] = None

    def validate(self) -> "VisualizerConfig":
        """Raise ConfigError on settings the visualizer cannot run with."""
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"window size must be positive, got {self.width}x{self.height}")
        if self.bar_count < 0:
            raise ConfigError(f"bar count must not be negative, got {self.bar_count}")
        if self.min_value < 1:
            raise ConfigError(f"values must be positive, got minimum {self.min_value}")
        if self.min_value > self.max_value:
            raise ConfigError(f"empty value range {self.min_value}..{self.max_value}")
        if self.step_delay < 0 or self.swap_duration < 0:
            raise ConfigError("durations must not be negative")
        if self.fps <= 0:
            raise ConfigError(f"fps must be positive, got {self.fps}")
        if not 0 <= self.margin_ratio < 0.5:
            raise ConfigError(f"margin ratio must be in [0, 0.5), got {self.margin_ratio}")
        return self

    def with_overrides(self, **changes) -> "VisualizerConfig":
        """Copy with the non-None entries of `changes` applied, then validated."""
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **changes).validate()


DEFAULT_CONFIG = VisualizerConfig()
