"""stairs: weighted random index selection over a cumulative table.

Build a sampler once from ``(weight, index)`` pairs, then call it to draw
indices with probability proportional to weight at O(log n) per draw::

    from stairs import build_int_distribution

    draw = build_int_distribution([(1, 0), (2, 1), (5, 2)])
    index = draw()
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("stairs")
except PackageNotFoundError:
    __version__ = "0.0.0"

from stairs.cdf.types import CumulativeTable, WeightedItem, WeightedItemFloat
from stairs.config import StairsConfig, default_config, resolve_config
from stairs.entropy import (
    RandomSource,
    ScriptedSource,
    SystemRandomSource,
    TimeSeededSource,
    available_random_sources,
)
from stairs.exceptions import (
    ConfigValidationError,
    DuplicateIndexError,
    EmptyInputError,
    NonPositiveWeightError,
    StairsError,
    WeightOverflowError,
    WeightTypeError,
)
from stairs.sampler import (
    FloatSampler,
    IntegerSampler,
    WeightedSampler,
    build_distribution,
    build_float_distribution,
    build_int_distribution,
)

__all__ = [
    "ConfigValidationError",
    "CumulativeTable",
    "DuplicateIndexError",
    "EmptyInputError",
    "FloatSampler",
    "IntegerSampler",
    "NonPositiveWeightError",
    "RandomSource",
    "ScriptedSource",
    "StairsConfig",
    "StairsError",
    "SystemRandomSource",
    "TimeSeededSource",
    "WeightOverflowError",
    "WeightTypeError",
    "WeightedItem",
    "WeightedItemFloat",
    "WeightedSampler",
    "__version__",
    "available_random_sources",
    "build_distribution",
    "build_float_distribution",
    "build_int_distribution",
    "default_config",
    "resolve_config",
]
