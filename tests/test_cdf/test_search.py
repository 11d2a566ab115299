"""Tests for the cumulative table binary search."""

from __future__ import annotations

import bisect
import itertools

import numpy as np
import pytest

from stairs.cdf.search import exact_equal, search_cdf, tolerance_equal


class TestSearchCdfInteger:
    """Exact-equality search over integer tables."""

    @pytest.mark.parametrize(
        ("num", "expected"),
        [(1, 0), (2, 1), (3, 1), (4, 2), (7, 2), (8, 2)],
    )
    def test_stairs_table(self, num: int, expected: int) -> None:
        """Bands of [1, 3, 8] are (0, 1], (1, 3], (3, 8]."""
        assert search_cdf([1, 3, 8], num) == expected

    def test_single_entry(self) -> None:
        for num in (1, 5, 10):
            assert search_cdf([10], num) == 0

    def test_below_first_entry_returns_first(self) -> None:
        assert search_cdf([5, 6, 7], 0) == 0

    def test_above_total_returns_last(self) -> None:
        assert search_cdf([1, 3, 8], 100) == 2

    def test_empty_table_raises(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            search_cdf([], 1)

    def test_accepts_numpy_array(self) -> None:
        table = np.array([2, 4, 9, 10], dtype=np.int64)
        assert search_cdf(table, 5) == 2

    def test_matches_bisect_left(self) -> None:
        """Every target in every random table matches the stdlib lower bound."""
        rng = np.random.default_rng(2024)
        for _ in range(200):
            weights = rng.integers(1, 20, size=int(rng.integers(1, 30)))
            table = list(itertools.accumulate(int(w) for w in weights))
            for num in range(1, table[-1] + 1):
                assert search_cdf(table, num, exact_equal) == bisect.bisect_left(table, num)


class TestSearchCdfFloat:
    """Epsilon-tolerant search over float tables."""

    def test_rounding_undershoot_resolves_to_its_own_band(self) -> None:
        """Ten additions of 0.1 land just below 1.0 but still count as 1.0."""
        table = list(itertools.accumulate([0.1] * 10 + [1.0]))
        assert table[9] != 1.0
        assert abs(table[9] - 1.0) < 1e-5

        assert search_cdf(table, 1.0, tolerance_equal(1e-5)) == 9
        # Without the tolerance the boundary slips into the next band.
        assert search_cdf(table, 1.0, exact_equal) == 10

    def test_rounding_overshoot(self) -> None:
        table = list(itertools.accumulate([0.1, 0.2, 0.4]))
        assert table[1] == pytest.approx(0.3)
        assert search_cdf(table, 0.3, tolerance_equal(1e-5)) == 1

    def test_interior_values(self) -> None:
        table = [1.5, 3.83, 9.7299]
        equal = tolerance_equal(1e-5)
        assert search_cdf(table, 1.0, equal) == 0
        assert search_cdf(table, 1.6, equal) == 1
        assert search_cdf(table, 3.83, equal) == 1
        assert search_cdf(table, 3.84, equal) == 2
        assert search_cdf(table, 9.7299, equal) == 2

    def test_tolerance_equal(self) -> None:
        equal = tolerance_equal(0.01)
        assert equal(1.0, 1.005)
        assert equal(1.005, 1.0)
        assert not equal(1.0, 1.02)
