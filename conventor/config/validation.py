"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def _validate_suits(
        field: str, value: Any, allowed: tuple[str, ...]
    ) -> list[ValidationError]:
        if not isinstance(value, (list, tuple)) or not value:
            return [ValidationError(
                field=field,
                message="Must be a non-empty list of suits",
                value=value
            )]

        if any(suit not in allowed for suit in value):
            return [ValidationError(
                field=field,
                message=f"Suits must be drawn from {', '.join(allowed)}",
                value=value
            )]

        if len(set(value)) != len(value):
            return [ValidationError(
                field=field,
                message="Suits must not repeat",
                value=value
            )]

        return []

    @staticmethod
    def validate_expansion_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate expansion parameters."""
        errors = []

        if "major_suits" in params:
            errors.extend(ConfigValidator._validate_suits(
                "major_suits", params["major_suits"], ("H", "S")
            ))

        if "minor_suits" in params:
            errors.extend(ConfigValidator._validate_suits(
                "minor_suits", params["minor_suits"], ("C", "D")
            ))

        if "any_suits" in params:
            errors.extend(ConfigValidator._validate_suits(
                "any_suits", params["any_suits"], ("C", "D", "H", "S")
            ))

        if "relay_alertable" in params:
            value = params["relay_alertable"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="relay_alertable",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_prune_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate pruning parameters."""
        errors = []

        for field in ("prune_illegal", "prune_empty"):
            if field in params and not isinstance(params[field], bool):
                errors.append(ValidationError(
                    field=field,
                    message="Must be a boolean",
                    value=params[field]
                ))

        return errors

    @staticmethod
    def validate_render_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rendering parameters."""
        errors = []

        if "suit_symbols" in params:
            value = params["suit_symbols"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="suit_symbols",
                    message="Must be a boolean",
                    value=value
                ))

        if "sequence_separator" in params:
            value = params["sequence_separator"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="sequence_separator",
                    message="Must be a non-empty string",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "expansion" in config:
            errors.extend(ConfigValidator.validate_expansion_params(config["expansion"]))

        if "prune" in config:
            errors.extend(ConfigValidator.validate_prune_params(config["prune"]))

        if "render" in config:
            errors.extend(ConfigValidator.validate_render_params(config["render"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
