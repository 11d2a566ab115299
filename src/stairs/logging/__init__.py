"""Diagnostic logging subsystem for stairs.

Provides immutable per-draw records and a configurable logger that
supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from stairs.logging.logger import DrawLogger
from stairs.logging.types import DrawRecord

__all__ = [
    "DrawLogger",
    "DrawRecord",
]
