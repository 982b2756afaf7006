"""Configuration loader with 3-tier parameter precedence."""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import (
    AppConfig,
    LoggingParams,
    OutputParams,
    RateParams,
    ResolutionParams,
    SourceParams,
    get_default_config,
)
from .validation import ConfigValidator

CONFIG_FILENAME = "slcsp.yaml"
CONFIG_DIR_ENV = "SLCSP_CONFIG_DIR"

_SECTIONS = {
    "sources": SourceParams,
    "rates": RateParams,
    "output": OutputParams,
    "resolution": ResolutionParams,
    "logging": LoggingParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: AppConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            env_dir = os.environ.get(CONFIG_DIR_ENV)
            if env_dir:
                config_dir = Path(env_dir)
            else:
                config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    @property
    def base_dir(self) -> Path:
        """Directory relative source and output paths are resolved against."""
        return self.config_dir.resolve().parent

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML config file, if present."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            return {}

        try:
            with open(config_file, encoding="utf-8") as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Cannot read configuration file {config_file}: {e}",
                context={"config_file": str(config_file)}
            ) from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping",
                context={"config_file": str(config_file)}
            )
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. In-process overrides (highest priority)
        2. YAML config file
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> AppConfig:
        """Merge, validate and build the typed configuration."""
        merged = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            details = "; ".join(f"{err.field}: {err.message} (got: {err.value!r})" for err in errors)
            raise ConfigurationError(f"Invalid configuration: {details}", errors=errors)

        config = self._build(merged)
        return self._resolve_paths(config)

    def _build(self, merged: dict[str, Any]) -> AppConfig:
        sections = {}
        for name, params_cls in _SECTIONS.items():
            known = {f.name for f in fields(params_cls)}
            values = merged.get(name, {})
            sections[name] = params_cls(**{k: v for k, v in values.items() if k in known})
        return AppConfig(**sections)

    def _resolve_paths(self, config: AppConfig) -> AppConfig:
        """Anchor relative source and output paths at the project base dir."""
        src = config.sources
        sources = SourceParams(
            plans_path=self._anchor(src.plans_path),
            zips_path=self._anchor(src.zips_path),
            targets_path=self._anchor(src.targets_path),
            delimiter=src.delimiter,
            encoding=src.encoding,
        )

        out = config.output
        output = OutputParams(
            strict_legacy_format=out.strict_legacy_format,
            header=out.header,
            destination=out.destination,
            output_path=self._anchor(out.output_path) if out.output_path else None,
            create_dirs=out.create_dirs,
        )

        return AppConfig(
            sources=sources,
            rates=config.rates,
            output=output,
            resolution=config.resolution,
            logging=config.logging,
        )

    def _anchor(self, path: str) -> str:
        p = Path(path)
        if p.is_absolute():
            return str(p)
        return str(self.base_dir / p)

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def load_config(
    config_dir: Optional[Path] = None,
    overrides: Optional[dict[str, Any]] = None
) -> AppConfig:
    """Load the validated application configuration."""
    return ConfigLoader.create(config_dir).load(overrides)
