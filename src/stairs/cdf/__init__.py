"""Cumulative distribution subsystem for stairs.

Builds sorted, prefix-summed tables from weighted items and searches them
for the item whose band contains a drawn value.
"""

from stairs.cdf.builder import build_cdf
from stairs.cdf.numeric import FloatKind, IntegerKind, NumericKind
from stairs.cdf.search import exact_equal, search_cdf, tolerance_equal
from stairs.cdf.types import CumulativeTable, WeightedItem, WeightedItemFloat

__all__ = [
    "CumulativeTable",
    "FloatKind",
    "IntegerKind",
    "NumericKind",
    "WeightedItem",
    "WeightedItemFloat",
    "build_cdf",
    "exact_equal",
    "search_cdf",
    "tolerance_equal",
]
