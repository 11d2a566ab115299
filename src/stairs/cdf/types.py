"""Data types for the cumulative distribution subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True, slots=True)
class WeightedItem:
    """An integer-weighted item.

    Attributes:
        weight: Relative importance of the item; must be positive.
        index: Label of the item in the caller's collection. Need not be
            unique, contiguous or ordered.
    """

    weight: int
    index: int


@dataclass(frozen=True, slots=True)
class WeightedItemFloat:
    """A float-weighted item.

    Attributes:
        weight: Relative importance of the item; must be positive and finite.
        index: Label of the item in the caller's collection.
    """

    weight: float
    index: int


@dataclass(frozen=True, slots=True)
class CumulativeTable:
    """Sorted, prefix-summed lookup table produced by the CDF builder.

    Both arrays are read-only and have one entry per item, ordered by
    ascending original weight.

    Attributes:
        cumulative: Running sum of the sorted weights. The last entry is
            the total weight.
        indices: Item index stored at each position.
        kind: Name of the numeric kind the table was built for.
    """

    cumulative: np.ndarray
    indices: np.ndarray
    kind: str

    @property
    def total(self) -> Any:
        """Total weight (the last cumulative entry)."""
        return self.cumulative[-1]

    def __len__(self) -> int:
        return len(self.cumulative)
