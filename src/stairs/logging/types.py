"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DrawRecord:
    """Immutable record of a single draw.

    Attributes:
        timestamp_ns: Wall-clock time of the draw (nanoseconds since epoch).
        sampler_kind: ``'int'`` or ``'float'``.
        source_name: Name of the random source that produced the value.
        drawn_value: Target value on the cumulative axis.
        total_weight: Total weight of the table.
        position: Table position found by the search.
        index: Item index returned to the caller.
    """

    timestamp_ns: int
    sampler_kind: str
    source_name: str
    drawn_value: float
    total_weight: float
    position: int
    index: int
