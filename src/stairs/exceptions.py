"""Exception hierarchy for stairs.

All exceptions derive from StairsError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
StairsError is a ValueError so callers already guarding on ValueError keep
working.
"""

from __future__ import annotations

from typing import Any


class StairsError(ValueError):
    """Base exception for all stairs errors."""


class EmptyInputError(StairsError):
    """The weighted collection has zero items.

    Raised at build time; a distribution cannot be built from nothing.
    """


class NonPositiveWeightError(StairsError):
    """At least one weight is zero, negative or not finite.

    Weights are checked after sorting, so the reported weight is the
    smallest one present. Callers should only rely on "some entry failed",
    not on which entry is blamed.

    Attributes:
        weight: The offending weight.
    """

    def __init__(self, message: str, weight: Any = None) -> None:
        super().__init__(message)
        self.weight = weight


class WeightTypeError(StairsError, TypeError):
    """An item's weight or index has the wrong type.

    Integer samplers accept integral weights only; float samplers accept
    any real number. Booleans are rejected by both. Indices must be
    integers.
    """


class DuplicateIndexError(StairsError):
    """Two items carry the same index label.

    Only raised when ``reject_duplicate_indices`` is enabled; by default
    duplicate indices are accepted and their weight mass accumulates.

    Attributes:
        index: The repeated index label.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class ConfigValidationError(StairsError):
    """Configuration field validation failed.

    Raised when overrides name unknown fields or carry values that fail
    type or range validation.
    """


class WeightOverflowError(StairsError):
    """The running weight total is no longer a finite positive number.

    Only float tables can hit this: finite weights near the float64 maximum
    sum to ``inf``, and an infinite total would send every draw to the last
    band.

    Attributes:
        total: The non-finite running total.
    """

    def __init__(self, message: str, total: Any = None) -> None:
        super().__init__(message)
        self.total = total
