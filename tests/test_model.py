import random

import pytest

from bubble_bars.errors import ConfigError, OutOfRangeError
from bubble_bars.model import BarModel


class TestBarModel:

    def test_lengths_match(self):
        model = BarModel([5, 3, 9])
        assert len(model) == 3
        assert model.values == (5, 3, 9)
        assert model.finalized == (False, False, False)

    def test_swap_adjacent(self):
        model = BarModel([5, 3, 9])
        model.swap_adjacent(1)
        assert model.values == (5, 9, 3)

    @pytest.mark.parametrize("j", [-1, 2, 3])
    def test_swap_out_of_range(self, j):
        model = BarModel([5, 3, 9])
        with pytest.raises(OutOfRangeError):
            model.swap_adjacent(j)
        assert model.values == (5, 3, 9)

    def test_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            BarModel([1]).swap_adjacent(0)

    def test_mark_finalized_idempotent(self):
        model = BarModel([1, 2])
        model.mark_finalized(1)
        model.mark_finalized(1)
        assert model.finalized == (False, True)
        assert model.finalize_count == 1
        assert not model.all_finalized

    @pytest.mark.parametrize("k", [-1, 2])
    def test_mark_finalized_out_of_range(self, k):
        with pytest.raises(OutOfRangeError):
            BarModel([1, 2]).mark_finalized(k)

    def test_values_are_read_only_copies(self):
        model = BarModel([2, 1])
        values = model.values
        model.swap_adjacent(0)
        assert values == (2, 1)
        assert model.values == (1, 2)

    def test_rejects_non_positive(self):
        with pytest.raises(ConfigError):
            BarModel([3, 0, 1])

    def test_is_sorted(self):
        assert BarModel([]).is_sorted()
        assert BarModel([1, 1, 2]).is_sorted()
        assert not BarModel([2, 1]).is_sorted()


class TestRandomBars:

    def test_count_and_range(self):
        model = BarModel.random(50, 1, 100, random.Random(3))
        assert len(model) == 50
        assert all(1 <= v <= 100 for v in model.values)

    def test_seed_is_reproducible(self):
        a = BarModel.random(10, 1, 100, random.Random(42))
        b = BarModel.random(10, 1, 100, random.Random(42))
        assert a.values == b.values

    def test_negative_count(self):
        with pytest.raises(ConfigError):
            BarModel.random(-1, 1, 100)
