"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class ConfigValidator:
    """Validates configuration parameters.

    Validation is advisory: it flags bad config files, while the numeric
    core still clamps whatever it is handed.
    """

    @staticmethod
    def validate_indicator_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate indicator periods."""
        errors = []

        for name in ("ema_period", "rsi_period"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_signal_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate RSI crossover filters."""
        errors = []

        for name in ("rsi_overbought", "rsi_oversold"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 100:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a number between 0 and 100",
                        value=value
                    ))

        if not errors and "rsi_overbought" in params and "rsi_oversold" in params:
            if params["rsi_oversold"] >= params["rsi_overbought"]:
                errors.append(ValidationError(
                    field="rsi_oversold",
                    message="Must be below rsi_overbought",
                    value=params["rsi_oversold"]
                ))

        return errors

    @staticmethod
    def validate_rolling_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rolling strategy parameters."""
        errors = []

        if "initial_capital" in params:
            value = params["initial_capital"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="initial_capital",
                    message="Must be a positive number",
                    value=value
                ))

        if "profit_target_pct" in params and not _is_number(params["profit_target_pct"]):
            errors.append(ValidationError(
                field="profit_target_pct",
                message="Must be a number",
                value=params["profit_target_pct"]
            ))

        if "leverage" in params:
            value = params["leverage"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="leverage",
                    message="Must be a positive number",
                    value=value
                ))

        if "steps" in params and not _is_positive_int(params["steps"]):
            errors.append(ValidationError(
                field="steps",
                message="Must be a positive integer",
                value=params["steps"]
            ))

        if "initial_risk_pct" in params:
            value = params["initial_risk_pct"]
            if not _is_number(value) or value <= 0 or value > 1:
                errors.append(ValidationError(
                    field="initial_risk_pct",
                    message="Must be a positive number between 0 and 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_refresh_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate refresh cadence."""
        errors = []

        for name in ("indicator_refresh_seconds", "price_refresh_seconds", "kline_limit"):
            if name in params and not _is_positive_int(params[name]):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "indicators" in config:
            errors.extend(ConfigValidator.validate_indicator_params(config["indicators"]))

        if "signals" in config:
            errors.extend(ConfigValidator.validate_signal_params(config["signals"]))

        if "rolling" in config:
            errors.extend(ConfigValidator.validate_rolling_params(config["rolling"]))

        if "refresh" in config:
            errors.extend(ConfigValidator.validate_refresh_params(config["refresh"]))

        return errors
