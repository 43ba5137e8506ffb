from dataclasses import dataclass
from typing import List

import pygame

from bubble_bars.animator import Snapshot
from bubble_bars.config import Color, VisualizerConfig


@dataclass(frozen=True)
class BarRect:
    index: int
    left: float
    top: float
    width: float
    height: float
    color: Color

    @property
    def center_x(self) -> float:
        return self.left + self.width / 2

    def to_rect(self) -> pygame.Rect:
        return pygame.Rect(round(self.left), round(self.top), round(self.width), round(self.height))


# ============================================================================
# Layout
# ============================================================================
def bar_color(snapshot: Snapshot, index: int, config: VisualizerConfig) -> Color:
    """Finalized beats swapping beats comparing beats the plain bar color."""
    if snapshot.finalized[index]:
        return config.done_color
    if snapshot.is_active(index):
        return config.swap_color if snapshot.swapping else config.compare_color
    return config.bar_color


def layout_bars(snapshot: Snapshot, width: float, height: float, config: VisualizerConfig) -> List[BarRect]:
    n = len(snapshot.values)
    if n == 0:
        return []

    slot_width = width / n
    margin = width * config.margin_ratio / n
    bar_width = slot_width - 2 * margin
    # recomputed every frame, never cached
    max_value = max(snapshot.values)

    bars = []
    for i, value in enumerate(snapshot.values):
        bar_height = max(0.0, value / max_value * height - 2 * margin)

        center_x = i * slot_width + slot_width / 2
        if i == snapshot.compare_a and snapshot.x_a is not None:
            center_x = snapshot.x_a * slot_width
        elif i == snapshot.compare_b and snapshot.x_b is not None:
            center_x = snapshot.x_b * slot_width

        bars.append(BarRect(
            index=i,
            left=center_x - bar_width / 2,
            top=height - bar_height,
            width=bar_width,
            height=bar_height,
            color=bar_color(snapshot, i, config),
        ))
    return bars


# ============================================================================
# Drawing
# ============================================================================
def draw_bars(surface, bars: List[BarRect], config: VisualizerConfig) -> None:
    for bar in bars:
        rect = bar.to_rect()
        pygame.draw.rect(surface, bar.color, rect)
        if config.outline_thickness > 0:
            pygame.draw.rect(surface, config.outline_color, rect, config.outline_thickness)


def render(surface, snapshot: Snapshot, config: VisualizerConfig) -> List[BarRect]:
    """Clear `surface` and draw every bar against its current size."""
    width, height = surface.get_size()
    surface.fill(config.background_color)
    bars = layout_bars(snapshot, width, height, config)
    draw_bars(surface, bars, config)
    return bars
