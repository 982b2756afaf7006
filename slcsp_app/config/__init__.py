"""
Configuration management.

Frozen dataclass defaults, optionally overridden by a YAML file and then by
in-process overrides.
"""

from .defaults import AppConfig, get_default_config
from .loader import ConfigLoader, load_config
from .validation import ConfigValidator, ValidationError

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationError",
    "get_default_config",
    "load_config",
]
