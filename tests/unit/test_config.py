"""Unit tests for configuration management."""

import pytest
from dataclasses import fields
from pathlib import Path

from finplan_app.config.defaults import get_default_config
from finplan_app.config.loader import ConfigLoader, Settings
from finplan_app.config.validation import ConfigValidator
from finplan_app.errors import ConfigurationError, InvalidConfigError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.fetcher.min_interval_seconds == 12.0
        assert config.fetcher.max_points == 30
        assert config.fetcher.outputsize == "compact"
        assert config.analysis.periods_per_year == 12
        assert [f.name for f in fields(config.analysis)] == ["periods_per_year"]
        assert config.forecast.horizon_days == 30
        assert [i.symbol for i in config.instruments] == ["SPY", "JNJ", "AAPL"]


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)

    def test_bundled_config_is_valid(self) -> None:
        """Test that the shipped planner.yaml validates."""
        config = ConfigLoader.create().merge_config()
        assert ConfigValidator.validate_config(config) == []
        assert config["fetcher"]["min_interval_seconds"] == 12.0

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """Test config merging with defaults only."""
        config = ConfigLoader.create(tmp_path).merge_config()

        assert config["fetcher"]["max_points"] == 30
        assert config["instruments"][2]["symbol"] == "AAPL"

    def test_file_overrides(self, tmp_path: Path) -> None:
        """Test planner.yaml overrides defaults."""
        (tmp_path / "planner.yaml").write_text(
            "fetcher:\n  min_interval_seconds: 1.5\nforecast:\n  horizon_days: 10\n"
        )

        config = ConfigLoader.create(tmp_path).build_config()

        assert config.fetcher.min_interval_seconds == 1.5
        assert config.fetcher.max_points == 30
        assert config.forecast.horizon_days == 10

    def test_explicit_overrides_win(self, tmp_path: Path) -> None:
        """Test explicit overrides take precedence over the file."""
        (tmp_path / "planner.yaml").write_text("fetcher:\n  max_points: 20\n")

        config = ConfigLoader.create(tmp_path).build_config({"fetcher": {"max_points": 5}})

        assert config.fetcher.max_points == 5

    def test_empty_file(self, tmp_path: Path) -> None:
        (tmp_path / "planner.yaml").write_text("")

        config = ConfigLoader.create(tmp_path).build_config()

        assert config == get_default_config()

    def test_invalid_file_values_rejected(self, tmp_path: Path) -> None:
        """Test invalid planner.yaml values fail at load time."""
        (tmp_path / "planner.yaml").write_text(
            "fetcher:\n  max_points: 0\n  min_interval_seconds: -1\n"
        )

        with pytest.raises(InvalidConfigError) as exc_info:
            ConfigLoader.create(tmp_path).build_config()

        error = exc_info.value
        assert isinstance(error, ConfigurationError)
        assert error.category == "configuration"
        assert len(error.errors) == 2
        assert "max_points" in error.setting
        assert "min_interval_seconds" in error.setting
        assert "planner.yaml" in str(error)

    @pytest.mark.parametrize("overrides", [
        {"analysis": {"periods_per_year": 0}},
        {"forecast": {"horizon_days": -5}},
        {"instruments": [{"symbol": "SPY", "risk_level": "Low"}]},
        {"instruments": ["SPY", "JNJ", "AAPL"]},
    ])
    def test_invalid_overrides_rejected(self, tmp_path: Path, overrides) -> None:
        with pytest.raises(InvalidConfigError):
            ConfigLoader.create(tmp_path).build_config(overrides)


class TestSettings:
    """Test suite for process settings."""

    def test_api_key_from_environment(self, tmp_path: Path) -> None:
        settings = Settings.load(tmp_path, environ={"ALPHA_VANTAGE_API_KEY": "k123"})

        assert settings.api_key == "k123"
        assert settings.has_api_key is True

    def test_missing_api_key_is_not_an_error(self, tmp_path: Path) -> None:
        settings = Settings.load(tmp_path, environ={})

        assert settings.api_key is None
        assert settings.has_api_key is False

    def test_custom_key_setting(self, tmp_path: Path) -> None:
        settings = Settings.load(
            tmp_path,
            environ={"MY_KEY": "abc"},
            overrides={"fetcher": {"api_key_env": "MY_KEY"}},
        )

        assert settings.api_key == "abc"

    def test_invalid_config_fails_before_any_fetch(self, tmp_path: Path) -> None:
        (tmp_path / "planner.yaml").write_text("fetcher:\n  max_points: 0\n")

        with pytest.raises(InvalidConfigError) as exc_info:
            Settings.load(tmp_path, environ={"ALPHA_VANTAGE_API_KEY": "k"})

        assert exc_info.value.setting == "max_points"


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_fetcher_params(self) -> None:
        errors = ConfigValidator.validate_fetcher_params({
            "min_interval_seconds": 12.0,
            "max_points": 30,
            "timeout_seconds": 10,
            "base_url": "https://www.alphavantage.co/query",
        })
        assert errors == []

    @pytest.mark.parametrize("field, value", [
        ("min_interval_seconds", -1),
        ("max_points", 0),
        ("max_points", 2.5),
        ("timeout_seconds", 0),
        ("base_url", "ftp://example.com"),
    ])
    def test_invalid_fetcher_params(self, field, value) -> None:
        errors = ConfigValidator.validate_fetcher_params({field: value})

        assert len(errors) == 1
        assert errors[0].field == field

    def test_invalid_horizon(self) -> None:
        errors = ConfigValidator.validate_forecast_params({"horizon_days": -3})

        assert errors[0].field == "horizon_days"

    def test_invalid_instruments(self) -> None:
        errors = ConfigValidator.validate_instruments([
            {"symbol": "SPY", "risk_level": "Low"},
            {"symbol": "", "risk_level": "Extreme"},
        ])

        failed = {error.field for error in errors}
        assert failed == {"instruments", "instruments[1].symbol", "instruments[1].risk_level"}
