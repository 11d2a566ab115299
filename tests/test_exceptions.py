"""Tests for the stairs exception hierarchy."""

from __future__ import annotations

import pytest

from stairs.exceptions import (
    ConfigValidationError,
    DuplicateIndexError,
    EmptyInputError,
    NonPositiveWeightError,
    StairsError,
    WeightOverflowError,
    WeightTypeError,
)


@pytest.mark.parametrize(
    "exc_cls",
    [
        ConfigValidationError,
        DuplicateIndexError,
        EmptyInputError,
        NonPositiveWeightError,
        WeightOverflowError,
        WeightTypeError,
    ],
)
def test_all_derive_from_stairs_error(exc_cls: type[Exception]) -> None:
    assert issubclass(exc_cls, StairsError)
    assert issubclass(exc_cls, ValueError)


def test_weight_type_error_is_type_error() -> None:
    assert issubclass(WeightTypeError, TypeError)


def test_attributes() -> None:
    assert NonPositiveWeightError("bad", weight=-2).weight == -2
    assert DuplicateIndexError("dup", index=4).index == 4
    assert WeightOverflowError("big", total=float("inf")).total == float("inf")
    assert str(EmptyInputError("empty")) == "empty"
