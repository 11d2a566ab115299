"""Numeric kinds for cumulative tables.

A NumericKind bundles everything that differs between integer and float
weights: weight type checking, the positivity test, the equality predicate
used by the search, the array dtype, and how a target value is drawn from
a random source. The builder and the search are written once against
this interface.
"""

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import numpy as np

from stairs.cdf.search import exact_equal, tolerance_equal
from stairs.exceptions import WeightTypeError

if TYPE_CHECKING:
    from stairs.entropy.base import RandomSource

_INT64_MAX = int(np.iinfo(np.int64).max)


class NumericKind(ABC):
    """Abstract numeric kind used by the CDF builder and search."""

    name: str = ""

    @abstractmethod
    def coerce(self, weight: Any) -> Any:
        """Return *weight* as this kind's native number.

        Raises:
            WeightTypeError: If *weight* is not acceptable for this kind.
        """

    @abstractmethod
    def is_positive(self, weight: Any) -> bool:
        """Whether *weight* occupies a non-degenerate band on the cumulative axis."""

    @abstractmethod
    def equals(self, a: Any, b: Any) -> bool:
        """Equality predicate used when searching the cumulative table."""

    @abstractmethod
    def to_array(self, values: Sequence[Any]) -> np.ndarray:
        """Pack cumulative values into a numpy array."""

    @abstractmethod
    def draw(self, source: RandomSource, total: Any) -> Any:
        """Draw a target value on the cumulative axis for a table of *total* weight."""


class IntegerKind(NumericKind):
    """Integer weights, exact equality, draws uniform over ``{1, ..., total}``."""

    name = "int"

    def coerce(self, weight: Any) -> int:
        if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
            raise WeightTypeError(
                f"Integer weights must be integral, got {type(weight).__name__}: {weight!r}"
            )
        return int(weight)

    def is_positive(self, weight: int) -> bool:
        return weight > 0

    def equals(self, a: Any, b: Any) -> bool:
        return exact_equal(a, b)

    def to_array(self, values: Sequence[int]) -> np.ndarray:
        # Totals past int64 keep Python ints in an object array.
        if values and values[-1] > _INT64_MAX:
            return np.array(values, dtype=object)
        return np.array(values, dtype=np.int64)

    def draw(self, source: RandomSource, total: Any) -> int:
        return source.uniform_int(1, int(total))


class FloatKind(NumericKind):
    """Float weights with epsilon-tolerant equality.

    Draws ``u * (total - floor) + floor`` with ``u`` uniform in ``[0, 1)``.
    The default floor of 1.0 leaves cumulative mass below 1.0 undrawable;
    a floor of 0.0 makes draw frequencies exactly proportional to weight.
    When the total weight does not exceed the floor, 0.0 is used instead
    so that every draw still lands inside the table.

    Args:
        epsilon: Absolute tolerance for :meth:`equals`.
        draw_floor: Lower bound of drawn values.
    """

    name = "float"

    def __init__(self, epsilon: float = 1e-5, draw_floor: float = 1.0) -> None:
        self.epsilon = epsilon
        self.draw_floor = draw_floor
        self._equal = tolerance_equal(epsilon)

    def coerce(self, weight: Any) -> float:
        if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
            raise WeightTypeError(
                f"Float weights must be real numbers, got {type(weight).__name__}: {weight!r}"
            )
        return float(weight)

    def is_positive(self, weight: float) -> bool:
        return math.isfinite(weight) and weight > 0.0

    def equals(self, a: Any, b: Any) -> bool:
        return self._equal(a, b)

    def to_array(self, values: Sequence[float]) -> np.ndarray:
        return np.array(values, dtype=np.float64)

    def draw(self, source: RandomSource, total: Any) -> float:
        total = float(total)
        floor = self.draw_floor if total > self.draw_floor else 0.0
        return source.uniform_float() * (total - floor) + floor
