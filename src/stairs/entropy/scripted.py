"""Scripted random source for tests.

Replays a fixed cycle of unit values so that tests can place a draw at an
exact point on the cumulative axis.
"""

from __future__ import annotations

from collections.abc import Iterable

from stairs.entropy.base import RandomSource
from stairs.entropy.registry import register_random_source


@register_random_source("scripted")
class ScriptedSource(RandomSource):
    """Random source that cycles through caller-supplied values in ``[0, 1)``.

    ``uniform_float()`` returns the next value as is. ``uniform_int(low, high)``
    maps it onto the ``high - low + 1`` equal buckets of the range, so a
    value of ``k / n`` lands on ``low + k`` for an ``n``-wide range.

    Args:
        values: Unit values to replay, each in ``[0, 1)``. Defaults to ``(0.5,)``.

    Raises:
        ValueError: If *values* is empty or a value lies outside ``[0, 1)``.
    """

    def __init__(self, values: Iterable[float] = (0.5,)) -> None:
        self._values = tuple(float(v) for v in values)
        if not self._values:
            raise ValueError("ScriptedSource needs at least one value")
        for value in self._values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Scripted values must lie in [0, 1), got {value!r}")
        self._position = 0
        self.call_count = 0

    @property
    def name(self) -> str:
        """Return ``'scripted'``."""
        return "scripted"

    def _next(self) -> float:
        value = self._values[self._position]
        self._position = (self._position + 1) % len(self._values)
        self.call_count += 1
        return value

    def uniform_int(self, low: int, high: int) -> int:
        width = high - low + 1
        return min(low + int(self._next() * width), high)

    def uniform_float(self) -> float:
        return self._next()

    def close(self) -> None:
        """No-op, no resources to release."""
