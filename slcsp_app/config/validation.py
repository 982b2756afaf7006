"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

VALID_DESTINATIONS = ("stdout", "file")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
MAX_DECIMAL_PLACES = 10

_KNOWN_FIELDS = {
    "sources": {"plans_path", "zips_path", "targets_path", "delimiter", "encoding"},
    "rates": {"metal_level", "decimal_places"},
    "output": {"strict_legacy_format", "header", "destination", "output_path", "create_dirs"},
    "resolution": {"workers"},
    "logging": {"level", "format_json", "include_timestamp"},
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_source_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate input source parameters."""
        errors = []

        for name in ("plans_path", "zips_path", "targets_path"):
            if name in params and not _is_non_empty_str(params[name]):
                errors.append(ValidationError(
                    field=f"sources.{name}",
                    message="Must be a non-empty path",
                    value=params[name]
                ))

        if "delimiter" in params:
            value = params["delimiter"]
            if not isinstance(value, str) or len(value) != 1:
                errors.append(ValidationError(
                    field="sources.delimiter",
                    message="Must be a single character",
                    value=value
                ))

        if "encoding" in params:
            value = params["encoding"]
            if not _is_non_empty_str(value):
                errors.append(ValidationError(
                    field="sources.encoding",
                    message="Must be a non-empty encoding name",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_rate_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rate selection parameters."""
        errors = []

        if "metal_level" in params and not _is_non_empty_str(params["metal_level"]):
            errors.append(ValidationError(
                field="rates.metal_level",
                message="Must be a non-empty string",
                value=params["metal_level"]
            ))

        if "decimal_places" in params:
            value = params["decimal_places"]
            if not _is_int(value) or not 0 <= value <= MAX_DECIMAL_PLACES:
                errors.append(ValidationError(
                    field="rates.decimal_places",
                    message=f"Must be a non-negative integer no greater than {MAX_DECIMAL_PLACES}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_output_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate output parameters."""
        errors = []

        for name in ("strict_legacy_format", "create_dirs"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=f"output.{name}",
                    message="Must be a boolean",
                    value=params[name]
                ))

        if "header" in params and not isinstance(params["header"], str):
            errors.append(ValidationError(
                field="output.header",
                message="Must be a string",
                value=params["header"]
            ))

        destination = params.get("destination", "stdout")
        if destination not in VALID_DESTINATIONS:
            errors.append(ValidationError(
                field="output.destination",
                message=f"Must be one of {', '.join(VALID_DESTINATIONS)}",
                value=destination
            ))

        output_path = params.get("output_path")
        if output_path is not None and not _is_non_empty_str(output_path):
            errors.append(ValidationError(
                field="output.output_path",
                message="Must be a non-empty path",
                value=output_path
            ))
        elif destination == "file" and output_path is None:
            errors.append(ValidationError(
                field="output.output_path",
                message="Required when destination is 'file'",
                value=output_path
            ))

        return errors

    @staticmethod
    def validate_resolution_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate resolution parameters."""
        errors = []

        if "workers" in params:
            value = params["workers"]
            if not _is_int(value) or value < 1:
                errors.append(ValidationError(
                    field="resolution.workers",
                    message="Must be a positive integer",
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
                    field="logging.level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        for name in ("format_json", "include_timestamp"):
            if name in params and not isinstance(params[name], bool):
                errors.append(ValidationError(
                    field=f"logging.{name}",
                    message="Must be a boolean",
                    value=params[name]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, value in config.items():
            if section not in _KNOWN_FIELDS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=value
                ))
            elif not isinstance(value, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=value
                ))
            else:
                for key in value:
                    if key not in _KNOWN_FIELDS[section]:
                        errors.append(ValidationError(
                            field=f"{section}.{key}",
                            message="Unknown configuration field",
                            value=value[key]
                        ))

        if errors:
            return errors

        if "sources" in config:
            errors.extend(ConfigValidator.validate_source_params(config["sources"]))

        if "rates" in config:
            errors.extend(ConfigValidator.validate_rate_params(config["rates"]))

        if "output" in config:
            errors.extend(ConfigValidator.validate_output_params(config["output"]))

        if "resolution" in config:
            errors.extend(ConfigValidator.validate_resolution_params(config["resolution"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
