"""Name -> class mapping for random sources.

Samplers that are not handed a source build one from
``config.random_source_type``. Built-in sources add themselves here with
``@register_random_source`` when their module is imported.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stairs.exceptions import ConfigValidationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from stairs.config import StairsConfig
    from stairs.entropy.base import RandomSource

logger = logging.getLogger("stairs")

_SOURCES: dict[str, type[RandomSource]] = {}


def register_random_source(name: str) -> Callable[[type[RandomSource]], type[RandomSource]]:
    """Class decorator making a source selectable as ``random_source_type=name``.

    Re-registering the same class is a no-op.

    Raises:
        ValueError: If *name* is already taken by a different class.
    """

    def decorator(source_cls: type[RandomSource]) -> type[RandomSource]:
        existing = _SOURCES.get(name)
        if existing is not None and existing is not source_cls:
            raise ValueError(
                f"Random source name {name!r} is already used by {existing.__qualname__}"
            )
        _SOURCES[name] = source_cls
        return source_cls

    return decorator


def available_random_sources() -> list[str]:
    """Sorted names accepted by ``random_source_type``."""
    return sorted(_SOURCES)


def create_random_source(config: StairsConfig) -> RandomSource:
    """Instantiate the source named by ``config.random_source_type``.

    The source is built with its ``from_config`` hook, so seedable sources
    pick up ``config.seed``.

    Raises:
        ConfigValidationError: If no source is registered under that name.
    """
    source_cls = _SOURCES.get(config.random_source_type)
    if source_cls is None:
        raise ConfigValidationError(
            f"Unknown random source: {config.random_source_type!r}. "
            f"Available: {', '.join(available_random_sources())}"
        )
    source = source_cls.from_config(config)
    logger.debug("Created random source %r", source.name)
    return source
