"""Configuration management for barrelify."""

from __future__ import annotations

from .exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    handle_config_error,
    log_config_error,
)
from .loader import JsonConfigLoader, load_exclude_config
from .models import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_OUTPUT_FILE,
    BaseConfig,
    ExcludeConfig,
    GeneratorSettings,
)

__all__ = [
    # Exception classes
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "handle_config_error",
    "log_config_error",
    # Loading
    "JsonConfigLoader",
    "load_exclude_config",
    # Models
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_OUTPUT_FILE",
    "BaseConfig",
    "ExcludeConfig",
    "GeneratorSettings",
]
