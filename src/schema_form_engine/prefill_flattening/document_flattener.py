"""Prefill document flattening service."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any, assert_never

from schema_form_engine.path_addressing.field_paths import child_path
from schema_form_engine.schema_model.dynamic_values import (
    DynamicValue,
    parse_integer,
    parse_number,
)
from schema_form_engine.schema_model.schema_nodes import (
    ArrayNode,
    BooleanNode,
    IntegerNode,
    NumberNode,
    ObjectNode,
    SchemaNode,
    StringNode,
)


def flatten(document: Any, schema: SchemaNode, path: str = "") -> dict[str, DynamicValue]:
    """Project a JSON-like document onto one value per schema leaf path.

    Missing or mistyped branches of the document never fail; the affected
    leaves receive their type default instead.
    """
    values: dict[str, DynamicValue] = {}
    _flatten_node(document, schema, path, values)
    return values


def _flatten_node(
    element: Any, node: SchemaNode, path: str, values: dict[str, DynamicValue]
) -> None:
    match node:
        case ObjectNode():
            source = element if isinstance(element, Mapping) else None
            for key, child in node.properties.items():
                child_element = source.get(key) if source is not None else None
                _flatten_node(child_element, child, child_path(path, key), values)
        case StringNode():
            values[path] = element if isinstance(element, str) else ""
        case IntegerNode():
            values[path] = parse_integer(element)
        case NumberNode():
            values[path] = parse_number(element)
        case BooleanNode():
            values[path] = element if isinstance(element, bool) else False
        case ArrayNode():
            values[path] = _string_items(element)
        case _:
            assert_never(node)


def _string_items(element: Any) -> list[str]:
    if isinstance(element, str | bytes) or not isinstance(element, Sequence):
        return []
    items: list[str] = []
    for item in element:
        if isinstance(item, str):
            items.append(item)
        elif isinstance(item, bool | int | float):
            try:
                items.append(json.dumps(item))
            except ValueError:
                continue
    return items
