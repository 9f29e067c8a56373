"""Recursive schema validation service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping

from schema_form_engine.path_addressing.field_paths import child_path
from schema_form_engine.schema_model.dynamic_values import DynamicValue
from schema_form_engine.schema_model.schema_nodes import ObjectNode, SchemaNode

from .field_rules import check_field

_LOGGER = logging.getLogger(__name__)


def validate_all(
    schema: SchemaNode,
    values: Mapping[str, DynamicValue],
    errors: MutableMapping[str, str],
    path: str = "",
    required: bool = False,
) -> bool:
    """Validate every leaf below ``path`` and record per-field errors.

    A call at the root path clears ``errors`` first, so one top-level call
    always leaves a complete replacement of the error mapping. Returns
    whether every visited leaf is valid.
    """
    if not path:
        errors.clear()

    if isinstance(schema, ObjectNode):
        is_valid = True
        for key, child in schema.properties.items():
            child_valid = validate_all(
                child,
                values,
                errors,
                path=child_path(path, key),
                required=key in schema.required,
            )
            is_valid = is_valid and child_valid
        return is_valid

    value = values.get(path)
    error = check_field(schema, value, required)
    if error is None:
        errors.pop(path, None)
        _LOGGER.debug("Field '%s' is valid (required=%s).", path, required)
        return True
    errors[path] = error
    _LOGGER.debug("Field '%s' failed validation: %s (value=%r).", path, error, value)
    return False
