"""CDF builder.

Turns a weighted collection into a CumulativeTable:
copy -> sort ascending by weight -> validate -> prefix-sum.

The caller's collection is only read. Sorting and accumulation happen on a
private copy, so the same list can be passed to the builder any number of
times.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Iterable
from typing import Any

import numpy as np

from stairs.cdf.numeric import NumericKind
from stairs.cdf.types import CumulativeTable, WeightedItem, WeightedItemFloat
from stairs.exceptions import (
    DuplicateIndexError,
    EmptyInputError,
    NonPositiveWeightError,
    WeightOverflowError,
    WeightTypeError,
)

logger = logging.getLogger("stairs")

_INT64_MIN = int(np.iinfo(np.int64).min)
_INT64_MAX = int(np.iinfo(np.int64).max)


def unpack_item(item: Any) -> tuple[Any, int]:
    """Split a weighted item or ``(weight, index)`` pair."""
    if isinstance(item, (WeightedItem, WeightedItemFloat)):
        weight, index = item.weight, item.index
    else:
        try:
            weight, index = item
        except (TypeError, ValueError) as exc:
            raise WeightTypeError(
                f"Expected a weighted item or a (weight, index) pair, got {item!r}"
            ) from exc
    try:
        return weight, operator.index(index)
    except TypeError as exc:
        raise WeightTypeError(f"Item index must be an integer, got {index!r}") from exc


def _check_duplicates(indices: Iterable[int]) -> None:
    seen: set[int] = set()
    for index in indices:
        if index in seen:
            raise DuplicateIndexError(f"Index {index} appears more than once", index=index)
        seen.add(index)


def _index_array(indices: list[int]) -> np.ndarray:
    # Same rule as IntegerKind.to_array: int64 when every label fits, else an
    # object array of Python ints. np.array would pick object silently.
    if min(indices) < _INT64_MIN or max(indices) > _INT64_MAX:
        return np.array(indices, dtype=object)
    return np.array(indices, dtype=np.int64)


def build_cdf(
    items: Iterable[Any],
    kind: NumericKind,
    *,
    reject_duplicate_indices: bool = False,
) -> CumulativeTable:
    """Build a cumulative table from weighted items.

    Args:
        items: ``WeightedItem``/``WeightedItemFloat`` instances or
            ``(weight, index)`` pairs. Left untouched.
        kind: Numeric kind deciding weight types and arithmetic.
        reject_duplicate_indices: Raise instead of accepting repeated
            index labels. Accepted duplicates share probability mass.

    Returns:
        A CumulativeTable with read-only arrays sorted by ascending weight.

    Raises:
        EmptyInputError: If *items* is empty.
        WeightTypeError: If a weight or index has the wrong type.
        NonPositiveWeightError: If any weight is not strictly positive.
        WeightOverflowError: If the weight total overflows to a non-finite
            value.
        DuplicateIndexError: If duplicates are rejected and one is found.
    """
    pairs = []
    for item in items:
        weight, index = unpack_item(item)
        pairs.append((kind.coerce(weight), index))

    if not pairs:
        raise EmptyInputError("Weighted collection must contain at least one item")

    pairs.sort(key=lambda pair: pair[0])

    # After sorting the first weight is the smallest, so one check rejects
    # any zero or negative weight. Non-finite floats are caught in the walk.
    first_weight = pairs[0][0]
    if not kind.is_positive(first_weight):
        raise NonPositiveWeightError(
            f"All items must have a positive weight, got {first_weight!r}",
            weight=first_weight,
        )

    cumulative = [first_weight]
    for weight, _ in pairs[1:]:
        if not kind.is_positive(weight):
            raise NonPositiveWeightError(
                f"All items must have a positive weight, got {weight!r}",
                weight=weight,
            )
        running_total = cumulative[-1] + weight
        if not kind.is_positive(running_total):
            raise WeightOverflowError(
                f"Cumulative weight is not finite after adding {weight!r}",
                total=running_total,
            )
        cumulative.append(running_total)

    indices = [index for _, index in pairs]
    if reject_duplicate_indices:
        _check_duplicates(indices)

    cumulative_array = kind.to_array(cumulative)
    index_array = _index_array(indices)
    cumulative_array.setflags(write=False)
    index_array.setflags(write=False)

    logger.debug(
        "Built %s cumulative table: items=%d total=%s",
        kind.name,
        len(pairs),
        cumulative[-1],
    )
    return CumulativeTable(cumulative=cumulative_array, indices=index_array, kind=kind.name)
