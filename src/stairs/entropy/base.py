"""Abstract base class for all random sources.

Every random source used to draw from a cumulative table implements this
interface. Subclasses must implement ``name``, ``uniform_int()``,
``uniform_float()`` and ``close()``. The ABC provides ``health_check()``
and a ``from_config()`` constructor hook used by the sampler factories.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from stairs.config import StairsConfig


class RandomSource(ABC):
    """Abstract base for all random sources.

    A source is owned by exactly one sampler and is not thread-safe unless
    an implementation says otherwise.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g., ``'time_seeded'``, ``'system'``)."""

    @abstractmethod
    def uniform_int(self, low: int, high: int) -> int:
        """Return an integer uniformly distributed over ``[low, high]`` inclusive.

        Args:
            low: Smallest value that may be returned.
            high: Largest value that may be returned (``high >= low``).

        Returns:
            An ``int`` in ``[low, high]``.
        """

    @abstractmethod
    def uniform_float(self) -> float:
        """Return a float uniformly distributed over ``[0, 1)``."""

    @abstractmethod
    def close(self) -> None:
        """Release resources held by the source."""

    @classmethod
    def from_config(cls, config: StairsConfig) -> RandomSource:
        """Construct the source from configuration.

        The default ignores *config*. Seedable sources override this to
        pick up ``config.seed``.
        """
        return cls()

    def health_check(self) -> dict[str, Any]:
        """Return a status dictionary for this source.

        Returns:
            Dictionary with at least ``'source'`` and ``'healthy'`` keys.
        """
        return {"source": self.name, "healthy": True}
