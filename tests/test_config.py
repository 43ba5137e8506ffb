import dataclasses

import pytest

from bubble_bars.config import DEFAULT_CONFIG, VisualizerConfig
from bubble_bars.errors import ConfigError


class TestVisualizerConfig:

    def test_defaults(self):
        assert DEFAULT_CONFIG.bar_count == 10
        assert (DEFAULT_CONFIG.min_value, DEFAULT_CONFIG.max_value) == (1, 100)
        assert DEFAULT_CONFIG.step_delay == 0.25
        assert DEFAULT_CONFIG.swap_duration == 0.5
        assert DEFAULT_CONFIG.validate() is DEFAULT_CONFIG

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.bar_count = 3

    @pytest.mark.parametrize("changes", [
        {"bar_count": -1},
        {"min_value": 0},
        {"min_value": 50, "max_value": 10},
        {"step_delay": -0.1},
        {"swap_duration": -1},
        {"fps": 0},
        {"width": 0},
        {"margin_ratio": 0.5},
    ])
    def test_invalid(self, changes):
        with pytest.raises(ConfigError):
            VisualizerConfig(**changes).validate()

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            VisualizerConfig(fps=-5).validate()

    def test_with_overrides_skips_none(self):
        config = DEFAULT_CONFIG.with_overrides(bar_count=4, seed=None, fps=None)
        assert config.bar_count == 4
        assert config.fps == DEFAULT_CONFIG.fps
        assert DEFAULT_CONFIG.bar_count == 10

    def test_with_overrides_validates(self):
        with pytest.raises(ConfigError):
            DEFAULT_CONFIG.with_overrides(swap_duration=-2)
