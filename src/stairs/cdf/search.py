"""Binary search over a cumulative table.

One search serves both numeric kinds; only the equality predicate differs.
Exact equality is correct for integer tables. Float tables need a tolerance
because a prefix sum built by repeated addition can land a few ulps either
side of the value a caller would compute by hand.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any


def exact_equal(a: Any, b: Any) -> bool:
    """Exact equality predicate."""
    return bool(a == b)


def tolerance_equal(epsilon: float) -> Callable[[Any, Any], bool]:
    """Return a predicate treating values within *epsilon* of each other as equal."""

    def equal(a: Any, b: Any) -> bool:
        return abs(a - b) <= epsilon

    return equal


def search_cdf(
    cumulative: Sequence[Any],
    num: Any,
    equals: Callable[[Any, Any], bool] = exact_equal,
) -> int:
    """Return the first position whose cumulative value reaches *num*.

    A value reaches *num* when it is greater than *num* or ``equals`` it.
    The result is the position satisfying
    ``cumulative[pos - 1] < num <= cumulative[pos]`` (up to ``equals``), with
    position 0 and the last position as the boundary cases. If no value
    reaches *num* the last position is returned.

    Args:
        cumulative: Non-empty, non-decreasing cumulative weights.
        num: Target value on the cumulative axis.
        equals: Equality predicate for the numeric kind.

    Returns:
        An array position (not an item index).

    Raises:
        ValueError: If *cumulative* is empty.
    """
    if len(cumulative) == 0:
        raise ValueError("Cannot search an empty cumulative table")

    left = 0
    right = len(cumulative) - 1

    # The answer always lies within [left, right].
    while left < right:
        middle = (left + right) // 2
        value = cumulative[middle]
        if value > num or equals(value, num):
            right = middle
        else:
            left = middle + 1

    return left
