"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "form.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Form configuration template for schema-form.
# Replace every <REQUIRED> placeholder before running fields, validate or submit.
# Replace <OPTIONAL> placeholders only when your setup needs them.

schema:
  # Provide either inline JSON schema text or a JSON schema path.
  # Relative paths are resolved against this file's directory.
  path: "<REQUIRED>"
  # inline: "<OPTIONAL>"

prefill:
  # Optional document whose values prefill the form.
  # Remove this section to start every field from its type default.
  path: "<OPTIONAL>"
  # inline: "<OPTIONAL>"

logging:
  # One of CRITICAL, ERROR, WARNING, INFO, DEBUG.
  level: "WARNING"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML form configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder form configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Form configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
