"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Mapping, Sequence
from typing import Any

import click

from schema_form_engine.configuration import (
    DEFAULT_CONFIG_FILENAME,
    Configuration,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from schema_form_engine.form_loading import build_form_loader, nest_values, submit_form
from schema_form_engine.form_state import FormState
from schema_form_engine.path_addressing import leaf_nodes, required_leaf_paths
from schema_form_engine.schema_model import (
    ArrayNode,
    BooleanNode,
    DynamicValue,
    IntegerNode,
    LeafNode,
    NumberNode,
    ObjectNode,
    StringNode,
    parse_integer,
    parse_number,
)

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


_CONFIG_OPTION = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON form configuration file",
)
_SET_OPTION = click.option(
    "--set",
    "assignments",
    multiple=True,
    metavar="PATH=VALUE",
    help="Edit one field before validating; may be repeated",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-form-engine")
@click.option(
    "--log-level",
    type=click.Choice(["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"], case_sensitive=False),
    default=None,
    help="Override the logging level from the form configuration",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Schema-driven form prefill and validation utility."""
    ctx.obj = {"log_level": log_level.upper() if log_level else None}


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML form configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML form configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="fields")
@_CONFIG_OPTION
@click.pass_context
def list_fields(ctx: click.Context, config_path: str) -> None:
    """List the flattened field paths of the configured schema."""
    state = _load_form(ctx, config_path)
    schema = state.schema
    if not isinstance(schema, ObjectNode):
        raise CliError("Configured schema did not load.")
    required_paths = required_leaf_paths(schema)
    for path, node in leaf_nodes(schema).items():
        requirement = "required" if path in required_paths else "optional"
        click.echo(f"{path}\t{node.kind.value}\t{requirement}\t{node.title or ''}")


@cli.command(name="validate")
@_CONFIG_OPTION
@_SET_OPTION
@click.pass_context
def validate(ctx: click.Context, config_path: str, assignments: tuple[str, ...]) -> None:
    """Run one validation pass over the prefilled form and report field errors."""
    state = _load_form(ctx, config_path)
    _apply_assignments(state, assignments)
    if state.validate():
        click.echo("Form is valid.")
        return
    _echo_errors(state.errors)
    raise CliError(f"Form has {len(state.errors)} invalid field(s).")


@cli.command(name="submit")
@_CONFIG_OPTION
@_SET_OPTION
@click.option(
    "--nested",
    is_flag=True,
    default=False,
    help="Emit the payload as a nested document instead of flat field paths.",
)
@click.pass_context
def submit(
    ctx: click.Context, config_path: str, assignments: tuple[str, ...], nested: bool
) -> None:
    """Validate the form and print the submission payload as JSON when it is valid."""
    state = _load_form(ctx, config_path)
    _apply_assignments(state, assignments)
    outcome = submit_form(state)
    if not outcome.accepted or outcome.payload is None:
        _echo_errors(outcome.errors)
        raise CliError("Please correct the errors in the form.")
    payload: Any = outcome.payload
    if nested and state.schema is not None:
        payload = nest_values(state.schema, outcome.payload)
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _load_form(ctx: click.Context, config_path: str) -> FormState:
    try:
        configuration = load_configuration(config_path)
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc)) from exc
    _configure_logging(ctx, configuration)

    state = FormState()
    outcome = build_form_loader(configuration, state).load()
    if not outcome.succeeded:
        raise CliError(outcome.error_message or "Failed to load form.")
    return state


def _configure_logging(ctx: click.Context, configuration: Configuration) -> None:
    override = (ctx.obj or {}).get("log_level")
    logging.basicConfig(
        level=override or configuration.logging.level,
        format=_LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def _apply_assignments(state: FormState, assignments: Sequence[str]) -> None:
    if not assignments:
        return
    if state.schema is None:
        raise CliError("Cannot edit fields before a schema is loaded.")
    nodes = leaf_nodes(state.schema)
    for assignment in assignments:
        path, separator, raw_value = assignment.partition("=")
        if not separator or not path:
            raise CliError(f"Field edits must look like PATH=VALUE: {assignment}")
        node = nodes.get(path)
        if node is None:
            raise CliError(f"Unknown field path: {path}")
        state.set(path, _coerce_edit(node, raw_value))


def _coerce_edit(node: LeafNode, raw_value: str) -> DynamicValue:
    """Convert command line text the way a field widget would for the node kind."""
    if isinstance(node, StringNode):
        return raw_value
    if isinstance(node, IntegerNode):
        parsed_integer = parse_integer(raw_value)
        return raw_value if parsed_integer is None else parsed_integer
    if isinstance(node, NumberNode):
        parsed_number = parse_number(raw_value)
        return raw_value if parsed_number is None else parsed_number
    if isinstance(node, BooleanNode):
        lowered = raw_value.strip().lower()
        if lowered not in ("true", "false"):
            raise CliError(f"Boolean fields accept true or false, got: {raw_value}")
        return lowered == "true"
    if isinstance(node, ArrayNode):
        return _parse_string_list(raw_value)
    raise CliError(f"Unsupported field type: {node.kind.value}")


def _parse_string_list(raw_value: str) -> list[str]:
    stripped = raw_value.strip()
    if stripped.startswith("["):
        try:
            parsed = json.loads(stripped)
        except json.JSONDecodeError as exc:
            raise CliError(f"Invalid JSON list: {raw_value}") from exc
        if not isinstance(parsed, list) or not all(isinstance(item, str) for item in parsed):
            raise CliError(f"List fields accept a JSON list of strings: {raw_value}")
        return parsed
    return [item.strip() for item in stripped.split(",") if item.strip()]


def _echo_errors(errors: Mapping[str, str]) -> None:
    for path, message in errors.items():
        click.echo(f"{path}: {message}")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
