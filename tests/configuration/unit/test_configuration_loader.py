"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from schema_form_engine.configuration.loader import ConfigurationError, load_configuration


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "form.yaml",
        """
schema:
  inline: |
    {
      "type": "object",
      "properties": {"title": {"type": "string"}}
    }
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.schema.inline is not None
    assert configuration.schema.inline.lstrip().startswith("{")
    assert configuration.schema.path is None
    assert configuration.prefill is None
    assert configuration.logging.level == "WARNING"


def test_loads_json_configuration_with_relative_paths(tmp_path: Path) -> None:
    schema_path = _write_file(
        tmp_path / "schema.json",
        json.dumps({"type": "object", "properties": {"title": {"type": "string"}}}),
    )
    data_path = _write_file(tmp_path / "data.json", json.dumps({"title": "Engineer"}))
    config_path = _write_file(
        tmp_path / "form.json",
        json.dumps(
            {
                "schema": {"path": schema_path.name},
                "prefill": {"path": data_path.name},
                "logging": {"level": "debug"},
            }
        ),
    )

    configuration = load_configuration(config_path)

    assert configuration.schema.path == schema_path.resolve()
    assert configuration.prefill is not None
    assert configuration.prefill.path == data_path.resolve()
    assert configuration.logging.level == "DEBUG"


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("schema: {}", "schema requires either inline or path"),
        ("schema:\n  inline: '{}'\n  path: schema.json", "must not set both inline and path"),
        ("schema:\n  inline: 12", "schema.inline must be a string"),
        ("schema:\n  inline: '   '", "schema.inline cannot be empty"),
        ("schema:\n  path: missing.json", "schema file not found"),
        ("prefill:\n  inline: '{}'", "Configuration section 'schema' is required"),
        ("schema:\n  inline: '{}'\nprefill: []", "Configuration section 'prefill' is required"),
        ("schema:\n  inline: '{}'\nlogging:\n  level: LOUD", "logging.level must be one of"),
        ("- just\n- a list", "Configuration root must be a mapping"),
        ("schema: [unclosed", "Failed to parse configuration file"),
    ],
)
def test_rejects_invalid_configuration(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "form.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


def test_missing_configuration_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "absent.yaml")
