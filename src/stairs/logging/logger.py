"""Diagnostic logger for per-draw events.

Uses the standard ``logging`` module with the ``"stairs"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for checking empirical frequencies after the
fact.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from stairs.config import StairsConfig
    from stairs.logging.types import DrawRecord

logger = logging.getLogger("stairs")


class DrawLogger:
    """Per-draw diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per draw with the drawn value, position
        and returned index.

        ``"full"``: Full JSON dump of all record fields.
    """

    def __init__(self, config: StairsConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[DrawRecord] = []

    @property
    def enabled(self) -> bool:
        """Whether :meth:`log_draw` does anything at all."""
        return self._diagnostic_mode or self._log_level != "none"

    def log_draw(self, record: DrawRecord) -> None:
        """Log a single draw.

        Args:
            record: Immutable record of the draw.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "draw kind=%s value=%s total=%s position=%d index=%d source=%s",
                record.sampler_kind,
                record.drawn_value,
                record.total_weight,
                record.position,
                record.index,
                record.source_name,
            )
        elif self._log_level == "full":
            logger.info("draw_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[DrawRecord]:
        """Return all stored records (empty unless ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with draw count, mean drawn value, and per-index
            counts and frequencies, or an empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        counts = Counter(r.index for r in self._records)
        return {
            "total_draws": n,
            "mean_value": sum(r.drawn_value for r in self._records) / n,
            "index_counts": dict(sorted(counts.items())),
            "index_frequencies": {index: count / n for index, count in sorted(counts.items())},
        }
