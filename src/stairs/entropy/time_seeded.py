"""Clock-seeded pseudo-random source.

The default source for every sampler. Each instance owns its own numpy
``Generator`` seeded once, at construction, from ``time.time_ns()``, so
two samplers built in the same process draw different sequences. Passing
an explicit seed makes the sequence reproducible.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import numpy as np

from stairs.entropy.base import RandomSource
from stairs.entropy.registry import register_random_source

if TYPE_CHECKING:
    from stairs.config import StairsConfig

_INT64_MAX = int(np.iinfo(np.int64).max)


@register_random_source("time_seeded")
class TimeSeededSource(RandomSource):
    """numpy ``default_rng`` wrapper seeded from a nanosecond clock.

    Args:
        seed: Optional seed. ``None`` seeds from ``time.time_ns()``.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.time_ns()
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @classmethod
    def from_config(cls, config: StairsConfig) -> TimeSeededSource:
        return cls(seed=config.seed)

    @property
    def name(self) -> str:
        """Return ``'time_seeded'``."""
        return "time_seeded"

    @property
    def seed(self) -> int:
        """The seed the generator was created with."""
        return self._seed

    def uniform_int(self, low: int, high: int) -> int:
        """Return an int in ``[low, high]``.

        Ranges wider than int64 are drawn by rejection sampling over raw
        generator bytes.
        """
        span = high - low
        if -_INT64_MAX - 1 <= low and high <= _INT64_MAX:
            return int(self._rng.integers(low, high, endpoint=True))

        bits = (span + 1).bit_length()
        while True:
            value = int.from_bytes(self._rng.bytes((bits + 7) // 8), "little") >> (-bits % 8)
            if value <= span:
                return low + value

    def uniform_float(self) -> float:
        return float(self._rng.random())

    def close(self) -> None:
        """No-op, no resources to release."""

    def health_check(self) -> dict[str, object]:
        return {"source": self.name, "healthy": True, "seed": self._seed}
