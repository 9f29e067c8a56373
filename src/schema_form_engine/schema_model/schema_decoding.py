"""JSON schema decoding into the typed schema tree."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from .schema_nodes import (
    ArrayNode,
    BooleanNode,
    IntegerNode,
    NumberNode,
    ObjectNode,
    SchemaError,
    SchemaKind,
    SchemaNode,
    StringNode,
)

_LOGGER = logging.getLogger(__name__)


def load_schema_text(text: str) -> ObjectNode:
    """Parse JSON schema text into a schema tree."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid JSON schema: {exc}") from exc
    return decode_schema(document)


def decode_schema(document: Any) -> ObjectNode:
    """Decode a parsed JSON schema document whose root describes an object."""
    if not isinstance(document, Mapping):
        raise SchemaError("JSON schema root must be an object.")

    node_types = _json_schema_types(document)
    is_object = node_types == (SchemaKind.OBJECT.value,) or (
        not node_types and "properties" in document
    )
    if not is_object:
        raise SchemaError("JSON schema root must define object properties.")

    title = _optional_string(document.get("title"), "title", "") or _optional_string(
        document.get("description"), "description", ""
    )
    return _decode_object(document, path="", title=title)


def _decode_node(node: Any, *, path: str, name: str | None) -> SchemaNode:
    if not isinstance(node, Mapping):
        raise SchemaError(f"Schema node at '{path}' must be an object.")

    node_types = _json_schema_types(node)
    title = _optional_string(node.get("title"), "title", path) or name
    if not node_types:
        if "$ref" in node:
            _LOGGER.warning(
                "Schema node at '%s' uses an unresolved $ref; treating it as an empty object.",
                path,
            )
            return ObjectNode(title=title)
        raise SchemaError(f"Schema node at '{path}' does not declare a type.")
    if len(node_types) > 1:
        raise SchemaError(f"Schema node at '{path}' declares multiple types: {list(node_types)}")

    try:
        kind = SchemaKind(node_types[0])
    except ValueError as exc:
        raise SchemaError(f"Unknown schema node type at '{path}': {node_types[0]}") from exc

    if kind is SchemaKind.STRING:
        return StringNode(
            title=title,
            enum=_optional_string_tuple(node.get("enum"), "enum", path),
            min_length=_optional_int(node.get("minLength"), "minLength", path),
            max_length=_optional_int(node.get("maxLength"), "maxLength", path),
            format=_optional_string(node.get("format"), "format", path),
        )
    if kind is SchemaKind.INTEGER:
        return IntegerNode(
            title=title,
            minimum=_optional_int(node.get("minimum"), "minimum", path),
            maximum=_optional_int(node.get("maximum"), "maximum", path),
        )
    if kind is SchemaKind.NUMBER:
        return NumberNode(
            title=title,
            minimum=_optional_float(node.get("minimum"), "minimum", path),
            maximum=_optional_float(node.get("maximum"), "maximum", path),
        )
    if kind is SchemaKind.BOOLEAN:
        return BooleanNode(title=title)
    if kind is SchemaKind.ARRAY:
        return _decode_array(node, path=path, title=title)
    return _decode_object(node, path=path, title=title)


def _decode_object(node: Mapping[str, Any], *, path: str, title: str | None) -> ObjectNode:
    raw_properties = node.get("properties", {})
    if not isinstance(raw_properties, Mapping):
        raise SchemaError(f"'properties' at '{path}' must be an object.")

    properties: dict[str, SchemaNode] = {}
    for key, child in raw_properties.items():
        if not isinstance(key, str) or not key:
            raise SchemaError(f"Property names at '{path}' must be non-empty strings.")
        child_path = key if not path else f"{path}.{key}"
        properties[key] = _decode_node(child, path=child_path, name=key)

    required = _optional_string_tuple(node.get("required"), "required", path) or ()
    for name in required:
        if name not in properties:
            raise SchemaError(f"Required property '{name}' at '{path}' is not defined.")
    return ObjectNode(title=title, properties=properties, required=frozenset(required))


def _decode_array(node: Mapping[str, Any], *, path: str, title: str | None) -> ArrayNode:
    raw_items = node.get("items")
    if raw_items is None:
        return ArrayNode(title=title)
    items = _decode_node(raw_items, path=f"{path}[]", name=None)
    if not isinstance(items, StringNode):
        raise SchemaError(f"Array '{path}' must declare string items.")
    return ArrayNode(title=title, items=items)


def _json_schema_types(node: Mapping[str, Any]) -> tuple[str, ...]:
    node_type = node.get("type")
    if isinstance(node_type, list):
        filtered = [value for value in node_type if isinstance(value, str) and value != "null"]
        return tuple(filtered) if filtered else ("null",)
    if isinstance(node_type, str):
        return (node_type,)
    return ()


def _optional_string(value: Any, keyword: str, path: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise SchemaError(f"'{keyword}' at '{path}' must be a string.")
    return value


def _optional_int(value: Any, keyword: str, path: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(f"'{keyword}' at '{path}' must be an integer.")
    return value


def _optional_float(value: Any, keyword: str, path: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise SchemaError(f"'{keyword}' at '{path}' must be a number.")
    try:
        return float(value)
    except OverflowError as exc:
        raise SchemaError(f"'{keyword}' at '{path}' is out of range.") from exc


def _optional_string_tuple(value: Any, keyword: str, path: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise SchemaError(f"'{keyword}' at '{path}' must be a list of strings.")
    items: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise SchemaError(f"'{keyword}' at '{path}' must be a list of strings.")
        if item in items:
            raise SchemaError(f"'{keyword}' at '{path}' contains duplicate entry '{item}'.")
        items.append(item)
    return tuple(items)
