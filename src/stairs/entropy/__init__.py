"""Random source subsystem for stairs.

Re-exports the ABC, the source factory, and all built-in source
implementations for convenient access::

    from stairs.entropy import RandomSource, create_random_source
    from stairs.entropy import TimeSeededSource, SystemRandomSource
"""

from stairs.entropy.base import RandomSource
from stairs.entropy.registry import (
    available_random_sources,
    create_random_source,
    register_random_source,
)
from stairs.entropy.scripted import ScriptedSource
from stairs.entropy.system import SystemRandomSource
from stairs.entropy.time_seeded import TimeSeededSource

__all__ = [
    "RandomSource",
    "ScriptedSource",
    "SystemRandomSource",
    "TimeSeededSource",
    "available_random_sources",
    "create_random_source",
    "register_random_source",
]
