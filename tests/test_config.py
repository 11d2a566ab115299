"""Tests for stairs.config.

Covers:
- Default values
- Environment variable loading (monkeypatch)
- resolve_config merge logic
- Unknown override keys and invalid values raise ConfigValidationError
"""

from __future__ import annotations

import pytest

from stairs.config import StairsConfig, default_config, resolve_config, validate_overrides
from stairs.exceptions import ConfigValidationError, StairsError


class TestStairsConfigDefaults:
    def test_defaults(self) -> None:
        cfg = StairsConfig()
        assert cfg.random_source_type == "time_seeded"
        assert cfg.seed is None
        assert cfg.float_epsilon == 1e-5
        assert cfg.float_draw_floor == 1.0
        assert cfg.reject_duplicate_indices is False
        assert cfg.log_level == "none"
        assert cfg.diagnostic_mode is False


class TestEnvironmentLoading:
    def test_env_overrides_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STAIRS_FLOAT_EPSILON", "0.001")
        monkeypatch.setenv("STAIRS_SEED", "99")
        monkeypatch.setenv("STAIRS_REJECT_DUPLICATE_INDICES", "true")
        cfg = StairsConfig()
        assert cfg.float_epsilon == 0.001
        assert cfg.seed == 99
        assert cfg.reject_duplicate_indices is True

    def test_init_kwargs_beat_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STAIRS_LOG_LEVEL", "full")
        assert StairsConfig(log_level="summary").log_level == "summary"

    def test_unprefixed_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEED", "5")
        assert StairsConfig().seed is None

    def test_default_config_ignores_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STAIRS_SEED", "99")
        monkeypatch.setenv("STAIRS_FLOAT_EPSILON", "0.5")
        cfg = default_config()
        assert cfg.seed is None
        assert cfg.float_epsilon == 1e-5


class TestResolveConfig:
    def test_no_overrides_returns_defaults(self) -> None:
        defaults = StairsConfig()
        assert resolve_config(defaults, None) is defaults
        assert resolve_config(defaults, {}) is defaults

    def test_none_defaults_uses_field_defaults(self) -> None:
        resolved = resolve_config(None, None)
        assert isinstance(resolved, StairsConfig)
        assert resolved.seed is None

    def test_none_defaults_ignores_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STAIRS_SEED", "99")
        monkeypatch.setenv("STAIRS_LOG_LEVEL", "full")
        assert resolve_config(None, None).seed is None
        resolved = resolve_config(None, {"float_draw_floor": 0.0})
        assert resolved.seed is None
        assert resolved.log_level == "none"

    def test_explicit_config_keeps_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STAIRS_SEED", "99")
        resolved = resolve_config(StairsConfig(), {"float_draw_floor": 0.0})
        assert resolved.seed == 99

    def test_overrides_applied(self) -> None:
        defaults = StairsConfig()
        resolved = resolve_config(defaults, {"seed": 7, "float_draw_floor": 0.0})
        assert resolved.seed == 7
        assert resolved.float_draw_floor == 0.0
        # Defaults are not mutated.
        assert defaults.seed is None
        assert defaults.float_draw_floor == 1.0

    def test_values_are_coerced(self) -> None:
        resolved = resolve_config(StairsConfig(), {"seed": "12"})
        assert resolved.seed == 12

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(ConfigValidationError, match="no_such_field"):
            resolve_config(StairsConfig(), {"no_such_field": 1})

    def test_negative_epsilon_raises(self) -> None:
        with pytest.raises(ConfigValidationError):
            resolve_config(StairsConfig(), {"float_epsilon": -1.0})

    def test_unknown_log_level_raises(self) -> None:
        with pytest.raises(ConfigValidationError):
            resolve_config(StairsConfig(), {"log_level": "verbose"})

    def test_config_error_is_stairs_error(self) -> None:
        with pytest.raises(StairsError):
            validate_overrides({"bogus": True})
