"""Configuration loader with file overrides and environment credentials."""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

import structlog
import yaml

from ..errors import InvalidConfigError
from .defaults import (
    AllocationParams,
    AnalysisParams,
    DefaultConfig,
    FetcherParams,
    ForecastParams,
    InstrumentParams,
    get_default_config,
)
from .validation import ConfigValidator

CONFIG_FILENAME = "planner.yaml"

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 2-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from planner.yaml, empty when the file is absent."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f)

        return file_config or {}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 2-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. planner.yaml in the config directory
        3. Built-in defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Merge configuration, validate it and rebuild the typed parameter tree.

        Raises:
            InvalidConfigError: One or more merged values failed validation
        """
        merged = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(self._dataclass_to_dict(merged))
        if errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            logger.error("Configuration validation failed", errors=error_msgs)
            raise InvalidConfigError(
                f"Invalid configuration in {self.config_dir / CONFIG_FILENAME}: "
                + "; ".join(error_msgs),
                errors=error_msgs,
                setting=", ".join(err.field for err in errors),
            )

        instruments = tuple(
            item if isinstance(item, InstrumentParams) else _from_dict(InstrumentParams, item)
            for item in merged.get("instruments", ())
        )

        return DefaultConfig(
            fetcher=_from_dict(FetcherParams, merged.get("fetcher", {})),
            analysis=_from_dict(AnalysisParams, merged.get("analysis", {})),
            forecast=_from_dict(ForecastParams, merged.get("forecast", {})),
            allocation=_from_dict(AllocationParams, merged.get("allocation", {})),
            instruments=instruments or self.defaults.instruments,
        )

    def _dataclass_to_dict(self, obj: Any) -> Any:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                result[field_name] = self._dataclass_to_dict(getattr(obj, field_name))
            return result
        if isinstance(obj, dict):
            return {key: self._dataclass_to_dict(value) for key, value in obj.items()}
        if isinstance(obj, (tuple, list)):
            return [self._dataclass_to_dict(item) for item in obj]
        return obj

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def _from_dict(cls: type, values: Mapping[str, Any]) -> Any:
    """Instantiate a parameter dataclass, ignoring keys it does not declare."""
    known = {f.name for f in fields(cls)}
    return cls(**{key: value for key, value in values.items() if key in known})


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once at start-up."""

    config: DefaultConfig
    api_key: Optional[str] = None

    @property
    def has_api_key(self) -> bool:
        """True when a non-blank provider credential is configured."""
        return bool(self.api_key and self.api_key.strip())

    @classmethod
    def load(
        cls,
        config_dir: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
        overrides: Optional[dict[str, Any]] = None,
    ) -> "Settings":
        """
        Load settings from the config directory and the environment.

        A missing credential is not an error here; fetchers report it as a
        ConfigurationError when they are asked to make a call.

        Args:
            config_dir: Directory holding planner.yaml
            environ: Environment mapping, defaults to os.environ
            overrides: Explicit configuration overrides

        Returns:
            Immutable Settings instance

        Raises:
            InvalidConfigError: planner.yaml or overrides hold invalid values
        """
        config = ConfigLoader.create(config_dir).build_config(overrides)
        env = os.environ if environ is None else environ
        api_key = env.get(config.fetcher.api_key_env) or None
        return cls(config=config, api_key=api_key)
