"""Tests for summary statistics and nearest-rank percentiles."""

import math

import numpy as np
import pytest

from distlab.exceptions import InsufficientDataError
from distlab.math.statistics import PERCENTILES, SummaryStats, nearest_rank


class TestNearestRank:
    def test_index_is_floor_of_n_times_p(self):
        arr = np.arange(10)
        assert nearest_rank(arr, 0.25) == 2
        assert nearest_rank(arr, 0.5) == 5
        assert nearest_rank(arr, 0.99) == 9

    def test_p_of_one_is_clamped(self):
        assert nearest_rank(np.array([1, 2, 3]), 1.0) == 3


class TestSummaryStats:
    def test_one_to_hundred(self):
        stats = SummaryStats.from_values(list(range(100, 0, -1)))
        assert stats.count == 100
        assert stats.mean == pytest.approx(50.5)
        assert stats.minimum == 1
        assert stats.maximum == 100
        assert stats.range == 99
        assert stats.median == 51
        assert stats.std == pytest.approx(math.sqrt((100**2 - 1) / 12))
        assert stats.percentiles[0.25] == 26
        assert stats.percentiles[0.9] == 91
        assert stats.percentiles[0.99] == 100

    def test_default_percentiles_present(self):
        stats = SummaryStats.from_values([5, 1, 3])
        assert set(stats.percentiles) == set(PERCENTILES)

    def test_single_value(self):
        stats = SummaryStats.from_values([7])
        assert stats.median == 7
        assert stats.std == 0.0
        assert stats.range == 0

    def test_empty_raises(self):
        with pytest.raises(InsufficientDataError):
            SummaryStats.from_values([])

    def test_numpy_input(self):
        stats = SummaryStats.from_values(np.array([2, 4, 4, 4, 5, 5, 7, 9]))
        assert stats.mean == pytest.approx(5.0)
        assert stats.std == pytest.approx(2.0)
