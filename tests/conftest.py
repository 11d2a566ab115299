"""Shared pytest fixtures for stairs tests.

Provides the weighted collections used across test modules.
"""

from __future__ import annotations

import pytest

from stairs.cdf.types import WeightedItem, WeightedItemFloat


@pytest.fixture
def stair_items() -> list[WeightedItem]:
    """Weights [1, 2, 5] at indices [0, 1, 2]; cumulative table [1, 3, 8]."""
    return [WeightedItem(1, 0), WeightedItem(2, 1), WeightedItem(5, 2)]


@pytest.fixture
def float_items() -> list[WeightedItemFloat]:
    """Float weights [1.5, 2.33, 5.8999] at indices [0, 1, 2]."""
    return [
        WeightedItemFloat(1.5, 0),
        WeightedItemFloat(2.33, 1),
        WeightedItemFloat(5.8999, 2),
    ]
