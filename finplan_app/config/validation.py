"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

VALID_RISK_LEVELS = ("Low", "Medium", "High")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_fetcher_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate fetcher parameters."""
        errors = []

        # Validate min_interval_seconds
        if "min_interval_seconds" in params:
            value = params["min_interval_seconds"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                errors.append(ValidationError(
                    field="min_interval_seconds",
                    message="Must be a non-negative number",
                    value=value
                ))

        # Validate max_points
        if "max_points" in params:
            value = params["max_points"]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                errors.append(ValidationError(
                    field="max_points",
                    message="Must be a positive integer",
                    value=value
                ))

        # Validate timeout_seconds
        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                errors.append(ValidationError(
                    field="timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        # Validate base_url
        if "base_url" in params:
            value = params["base_url"]
            if not isinstance(value, str) or not value.startswith(("http://", "https://")):
                errors.append(ValidationError(
                    field="base_url",
                    message="Must be an http(s) URL",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_analysis_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate analysis parameters."""
        errors = []

        if "periods_per_year" in params:
            value = params["periods_per_year"]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                errors.append(ValidationError(
                    field="periods_per_year",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_forecast_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate forecast parameters."""
        errors = []

        if "horizon_days" in params:
            value = params["horizon_days"]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                errors.append(ValidationError(
                    field="horizon_days",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_instruments(instruments: list[dict[str, Any]]) -> list[ValidationError]:
        """Validate the tracked instrument list."""
        errors = []

        if len(instruments) != 3:
            errors.append(ValidationError(
                field="instruments",
                message="Exactly 3 instruments are required",
                value=len(instruments)
            ))

        for i, instrument in enumerate(instruments):
            if not isinstance(instrument, dict):
                errors.append(ValidationError(
                    field=f"instruments[{i}]",
                    message="Must be a mapping with symbol and risk_level",
                    value=instrument
                ))
                continue
            if not instrument.get("symbol"):
                errors.append(ValidationError(
                    field=f"instruments[{i}].symbol",
                    message="Must be a non-empty string",
                    value=instrument.get("symbol")
                ))
            if instrument.get("risk_level") not in VALID_RISK_LEVELS:
                errors.append(ValidationError(
                    field=f"instruments[{i}].risk_level",
                    message=f"Must be one of {', '.join(VALID_RISK_LEVELS)}",
                    value=instrument.get("risk_level")
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "fetcher" in config:
            errors.extend(ConfigValidator.validate_fetcher_params(config["fetcher"]))

        if "analysis" in config:
            errors.extend(ConfigValidator.validate_analysis_params(config["analysis"]))

        if "forecast" in config:
            errors.extend(ConfigValidator.validate_forecast_params(config["forecast"]))

        if "instruments" in config:
            errors.extend(ConfigValidator.validate_instruments(config["instruments"]))

        return errors
