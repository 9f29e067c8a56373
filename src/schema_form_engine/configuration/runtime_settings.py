"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SourceConfig:
    """Where a schema or prefill document comes from: inline text or a file."""

    inline: str | None
    path: Path | None


@dataclass(frozen=True)
class LoggingSettings:
    """Logging verbosity for command line runs."""

    level: str


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SourceConfig
    prefill: SourceConfig | None
    logging: LoggingSettings
