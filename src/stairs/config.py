"""Configuration system for stairs.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (STAIRS_*) -> .env file -> field defaults.

Environment and .env loading only happen when a caller constructs
StairsConfig() itself. Samplers built without a config start from the code
defaults alone (see default_config()).

Per-build overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from stairs.exceptions import ConfigValidationError

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class StairsConfig(BaseSettings):
    """Configuration for stairs samplers.

    Resolution order: init kwargs -> env vars (STAIRS_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="STAIRS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Random source ---

    random_source_type: str = Field(
        default="time_seeded",
        description="Registered random source used when none is injected",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for seedable sources (None = seed from the clock)",
    )

    # --- Float sampling ---

    float_epsilon: float = Field(
        default=1e-5,
        ge=0.0,
        description="Tolerance for equality between float cumulative weights",
    )
    float_draw_floor: float = Field(
        default=1.0,
        ge=0.0,
        description="Lower bound of float draws; 0.0 draws over the full [0, total) range",
    )

    # --- Validation ---

    reject_duplicate_indices: bool = Field(
        default=False,
        description="Raise DuplicateIndexError when two items share an index",
    )

    # --- Logging ---

    log_level: Literal["none", "summary", "full"] = Field(
        default="none",
        description="Per-draw logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all draw records in memory for analysis",
    )


# Populate _ALL_FIELDS now that the class is defined.
_ALL_FIELDS = frozenset(StairsConfig.model_fields.keys())


def default_config() -> StairsConfig:
    """Return a config holding the field defaults only.

    ``model_validate`` skips the settings sources, so neither ``STAIRS_*``
    variables nor a ``.env`` file are read.
    """
    return StairsConfig.model_validate({})


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Reject override keys that do not name a config field.

    Args:
        overrides: Mapping of field name to override value.

    Raises:
        ConfigValidationError: If any key is not a known field.
    """
    for key in overrides:
        if key not in _ALL_FIELDS:
            available = ", ".join(sorted(_ALL_FIELDS))
            raise ConfigValidationError(
                f"Unknown config field: '{key}' (available: {available})"
            )


def resolve_config(
    defaults: StairsConfig | None,
    overrides: dict[str, Any] | None,
) -> StairsConfig:
    """Create a new config instance merging defaults with overrides.

    Args:
        defaults: The base configuration. ``None`` uses ``default_config()``;
            pass ``StairsConfig()`` to read the environment.
        overrides: Field overrides for a single build.

    Returns:
        A StairsConfig with overrides applied. The defaults instance is
        returned unchanged when there is nothing to override.

    Raises:
        ConfigValidationError: If a key is unknown or a value fails validation.
    """
    if defaults is None:
        defaults = default_config()
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_copy(update=...) skips validation; model_validate runs it.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return StairsConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid config override: {exc}") from exc
