"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import Configuration, LoggingSettings, SourceConfig

DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema = _parse_source_section(parsed.get("schema"), "schema", path.parent)
    prefill_section = parsed.get("prefill")
    prefill = (
        None
        if prefill_section is None
        else _parse_source_section(prefill_section, "prefill", path.parent)
    )
    logging_settings = _parse_logging_section(parsed.get("logging"))

    return Configuration(path=path, schema=schema, prefill=prefill, logging=logging_settings)


def _parse_source_section(value: Any, section_name: str, base_path: Path) -> SourceConfig:
    section = _require_mapping(value, section_name)
    inline = section.get("inline")
    path_value = section.get("path")
    if inline and path_value:
        raise ConfigurationError(f"{section_name} must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError(f"{section_name}.inline must be a string.")
        if not inline.strip():
            raise ConfigurationError(f"{section_name}.inline cannot be empty.")
        return SourceConfig(inline=inline, path=None)
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError(f"{section_name}.path must be a string.")
        source_path = _resolve_path(base_path, path_value)
        if not source_path.exists():
            raise ConfigurationError(f"{section_name} file not found: {source_path}")
        return SourceConfig(inline=None, path=source_path)
    raise ConfigurationError(f"{section_name} requires either inline or path.")


def _parse_logging_section(value: Any) -> LoggingSettings:
    if value is None:
        return LoggingSettings(level=DEFAULT_LOG_LEVEL)
    section = _require_mapping(value, "logging")
    level = section.get("level", DEFAULT_LOG_LEVEL)
    if not isinstance(level, str):
        raise ConfigurationError("logging.level must be a string.")
    normalized = level.strip().upper()
    if normalized not in _LOG_LEVELS:
        raise ConfigurationError(
            f"logging.level must be one of {', '.join(_LOG_LEVELS)}; got '{level}'."
        )
    return LoggingSettings(level=normalized)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value
