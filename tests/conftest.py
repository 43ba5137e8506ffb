"""
Shared fixtures. pygame runs headless for the whole session.
"""
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from bubble_bars.config import VisualizerConfig


class FakeClock:
    """Advances `tick` seconds per now() call and exactly the requested amount per sleep()."""

    def __init__(self, tick=0.1):
        self.t = 0.0
        self.tick = tick
        self.slept = []

    def now(self):
        self.t += self.tick
        return self.t

    def sleep(self, seconds):
        self.slept.append(seconds)
        self.t += seconds


@pytest.fixture
def make_clock():
    return FakeClock


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def config():
    return VisualizerConfig(step_delay=0.25, swap_duration=0.5, sound=False)
