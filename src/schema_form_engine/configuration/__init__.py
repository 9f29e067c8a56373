"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import DEFAULT_LOG_LEVEL, ConfigurationError, load_configuration
from .runtime_settings import Configuration, LoggingSettings, SourceConfig

__all__ = [
    "Configuration",
    "LoggingSettings",
    "SourceConfig",
    "ConfigurationError",
    "DEFAULT_LOG_LEVEL",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
