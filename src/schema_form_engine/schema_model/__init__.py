"""Schema model exports."""

from .dynamic_values import DynamicValue, default_value_for, parse_integer, parse_number
from .schema_decoding import decode_schema, load_schema_text
from .schema_nodes import (
    ArrayNode,
    BooleanNode,
    IntegerNode,
    LeafNode,
    NumberNode,
    ObjectNode,
    SchemaError,
    SchemaKind,
    SchemaNode,
    StringNode,
    is_leaf,
)

__all__ = [
    "ArrayNode",
    "BooleanNode",
    "IntegerNode",
    "LeafNode",
    "NumberNode",
    "ObjectNode",
    "SchemaError",
    "SchemaKind",
    "SchemaNode",
    "StringNode",
    "is_leaf",
    "DynamicValue",
    "default_value_for",
    "parse_integer",
    "parse_number",
    "decode_schema",
    "load_schema_text",
]
