"""Weighted samplers, the draw side of stairs.

A sampler is built once from a weighted collection and then drawn from
many times::

    items -> config -> CDF builder -> random source -> sampler()
                                                     -> draw value
                                                     -> binary search
                                                     -> item index

Building validates everything up front. A sampler that was built cannot
fail when drawn from. The sampler object is itself the zero-argument draw
function.
"""

from __future__ import annotations

import logging
import numbers
import time
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from stairs.cdf.builder import build_cdf, unpack_item
from stairs.cdf.numeric import FloatKind, IntegerKind, NumericKind
from stairs.cdf.search import search_cdf
from stairs.cdf.types import WeightedItemFloat
from stairs.config import StairsConfig, resolve_config
from stairs.entropy.registry import create_random_source
from stairs.logging.logger import DrawLogger
from stairs.logging.types import DrawRecord

if TYPE_CHECKING:
    from types import TracebackType

    from stairs.cdf.types import CumulativeTable
    from stairs.entropy.base import RandomSource

logger = logging.getLogger("stairs")


class WeightedSampler(ABC):
    """Draws item indices with probability proportional to item weight.

    The caller's collection is copied before it is sorted and accumulated;
    it is never reordered or modified.

    Not thread-safe: each draw advances the private random source. Use one
    sampler per thread or guard calls with a lock.

    Args:
        items: ``(weight, index)`` pairs or weighted item instances.
        source: Random source to draw with. Built from
            ``config.random_source_type`` when omitted.
        config: Base configuration. Field defaults when omitted; pass
            ``StairsConfig()`` to pick up ``STAIRS_*`` variables.
        **overrides: Config fields to override for this sampler only.

    Raises:
        EmptyInputError: If *items* is empty.
        NonPositiveWeightError: If any weight is not strictly positive.
        WeightTypeError: If a weight or index has the wrong type.
        DuplicateIndexError: If duplicate rejection is enabled and triggered.
        ConfigValidationError: If an override is invalid.
    """

    def __init__(
        self,
        items: Iterable[Any],
        *,
        source: RandomSource | None = None,
        config: StairsConfig | None = None,
        **overrides: Any,
    ) -> None:
        self._config = resolve_config(config, overrides)
        self._kind = self._make_kind(self._config)
        self._table = build_cdf(
            items,
            self._kind,
            reject_duplicate_indices=self._config.reject_duplicate_indices,
        )

        # Plain lists keep the per-draw search in native Python numbers.
        self._cumulative = self._table.cumulative.tolist()
        self._indices = self._table.indices.tolist()
        self._total = self._cumulative[-1]

        self._source = source if source is not None else create_random_source(self._config)
        self._logger = DrawLogger(self._config)

        logger.debug(
            "%s ready: items=%d total=%s source=%s",
            type(self).__name__,
            len(self._table),
            self._total,
            self._source.name,
        )

    @staticmethod
    @abstractmethod
    def _make_kind(config: StairsConfig) -> NumericKind:
        """Return the numeric kind this sampler draws with."""

    def draw(self) -> int:
        """Draw one item index.

        Returns:
            The ``index`` of the selected item, never its table position.
        """
        num = self._kind.draw(self._source, self._total)
        position = search_cdf(self._cumulative, num, self._kind.equals)
        index: int = self._indices[position]

        if self._logger.enabled:
            self._logger.log_draw(
                DrawRecord(
                    timestamp_ns=time.time_ns(),
                    sampler_kind=self._kind.name,
                    source_name=self._source.name,
                    drawn_value=num,
                    total_weight=self._total,
                    position=position,
                    index=index,
                )
            )
        return index

    __call__ = draw

    def draw_many(self, n: int) -> list[int]:
        """Draw *n* independent indices (with replacement).

        Raises:
            ValueError: If *n* is negative.
        """
        if n < 0:
            raise ValueError(f"Number of draws must be non-negative, got {n}")
        return [self.draw() for _ in range(n)]

    @property
    def table(self) -> CumulativeTable:
        """The sorted, prefix-summed table drawn from."""
        return self._table

    @property
    def total_weight(self) -> Any:
        """Sum of all item weights."""
        return self._total

    @property
    def source(self) -> RandomSource:
        """The random source this sampler draws with."""
        return self._source

    @property
    def config(self) -> StairsConfig:
        """The resolved configuration of this sampler."""
        return self._config

    @property
    def draw_logger(self) -> DrawLogger:
        """The diagnostic logger for this sampler."""
        return self._logger

    def close(self) -> None:
        """Release the random source."""
        self._source.close()

    def __enter__(self) -> WeightedSampler:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(items={len(self._table)}, "
            f"total_weight={self._total!r}, source={self._source.name!r})"
        )


class IntegerSampler(WeightedSampler):
    """Sampler over integer weights.

    Each draw picks ``num`` uniformly from ``{1, ..., total_weight}`` and
    returns the item whose cumulative band ``(previous, cumulative]``
    contains it.
    """

    @staticmethod
    def _make_kind(config: StairsConfig) -> NumericKind:
        return IntegerKind()


class FloatSampler(WeightedSampler):
    """Sampler over float weights.

    Each draw picks ``num = u * (total - floor) + floor`` with ``u`` in
    ``[0, 1)`` and ``floor = config.float_draw_floor`` (1.0 by default).
    Cumulative values within ``config.float_epsilon`` of ``num`` count as
    equal to it during the search.
    """

    @staticmethod
    def _make_kind(config: StairsConfig) -> NumericKind:
        return FloatKind(epsilon=config.float_epsilon, draw_floor=config.float_draw_floor)


def build_int_distribution(
    items: Iterable[Any],
    *,
    source: RandomSource | None = None,
    config: StairsConfig | None = None,
    **overrides: Any,
) -> IntegerSampler:
    """Build an :class:`IntegerSampler`. See :class:`WeightedSampler` for arguments."""
    return IntegerSampler(items, source=source, config=config, **overrides)


def build_float_distribution(
    items: Iterable[Any],
    *,
    source: RandomSource | None = None,
    config: StairsConfig | None = None,
    **overrides: Any,
) -> FloatSampler:
    """Build a :class:`FloatSampler`. See :class:`WeightedSampler` for arguments."""
    return FloatSampler(items, source=source, config=config, **overrides)


def _is_integral_item(item: Any) -> bool:
    if isinstance(item, WeightedItemFloat):
        return False
    weight, _ = unpack_item(item)
    return isinstance(weight, numbers.Integral) and not isinstance(weight, bool)


def build_distribution(
    items: Iterable[Any],
    *,
    source: RandomSource | None = None,
    config: StairsConfig | None = None,
    **overrides: Any,
) -> WeightedSampler:
    """Build a sampler, choosing the numeric kind from the weights.

    An :class:`IntegerSampler` is built when every weight is integral and
    no item is a ``WeightedItemFloat``; otherwise a :class:`FloatSampler`.
    """
    items = list(items)
    if all(_is_integral_item(item) for item in items):
        return IntegerSampler(items, source=source, config=config, **overrides)
    return FloatSampler(items, source=source, config=config, **overrides)
