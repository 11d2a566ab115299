"""System random source using the OS CSPRNG.

Draws through ``random.SystemRandom`` (``os.urandom()`` underneath). It is
always available and unpredictable, but cannot be seeded, so sequences
are never reproducible.
"""

from __future__ import annotations

import random

from stairs.entropy.base import RandomSource
from stairs.entropy.registry import register_random_source


@register_random_source("system")
class SystemRandomSource(RandomSource):
    """``random.SystemRandom`` wrapper. ``config.seed`` is ignored."""

    def __init__(self) -> None:
        self._rng = random.SystemRandom()

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    def uniform_int(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

    def uniform_float(self) -> float:
        return self._rng.random()

    def close(self) -> None:
        """No-op, no resources to release."""
