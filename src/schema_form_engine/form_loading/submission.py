"""Submission gate for a populated form."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from schema_form_engine.form_state.state_container import FormState
from schema_form_engine.path_addressing.field_paths import child_path
from schema_form_engine.schema_model.dynamic_values import DynamicValue
from schema_form_engine.schema_model.schema_nodes import ObjectNode, SchemaNode

from .form_contracts import SubmissionOutcome

_LOGGER = logging.getLogger(__name__)


def submit_form(state: FormState) -> SubmissionOutcome:
    """Validate the whole form and release the flat payload only when valid."""
    if state.validate():
        _LOGGER.info("Form accepted with %d fields.", len(state.values))
        return SubmissionOutcome(accepted=True, payload=dict(state.values), errors={})
    _LOGGER.info("Form rejected with %d field errors.", len(state.errors))
    return SubmissionOutcome(accepted=False, payload=None, errors=dict(state.errors))


def nest_values(schema: SchemaNode, values: Mapping[str, DynamicValue]) -> dict[str, Any]:
    """Rebuild the nested document shape of ``schema`` from flat path values."""
    if not isinstance(schema, ObjectNode):
        raise ValueError("Only object schemas can be nested into a document.")
    return _nest_object(schema, values, "")


def _nest_object(
    node: ObjectNode, values: Mapping[str, DynamicValue], path: str
) -> dict[str, Any]:
    document: dict[str, Any] = {}
    for key, child in node.properties.items():
        current = child_path(path, key)
        if isinstance(child, ObjectNode):
            document[key] = _nest_object(child, values, current)
        elif current in values:
            document[key] = values[current]
    return document
