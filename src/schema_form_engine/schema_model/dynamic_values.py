"""Dynamic field value types and coercion helpers."""

from __future__ import annotations

import re
from typing import TypeAlias, assert_never

from .schema_nodes import (
    ArrayNode,
    BooleanNode,
    IntegerNode,
    LeafNode,
    NumberNode,
    StringNode,
)

DynamicValue: TypeAlias = str | int | float | bool | list[str] | None

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")
_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_integer(value: object) -> int | None:
    """Interpret a value as an integer, returning ``None`` when it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def parse_number(value: object) -> float | None:
    """Interpret a value as a float, returning ``None`` when it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float) or (
        isinstance(value, str) and _NUMBER_PATTERN.fullmatch(value)
    ):
        try:
            return float(value)
        except OverflowError:
            return None
    return None


def default_value_for(node: LeafNode) -> DynamicValue:
    """Return the value a leaf holds when no source value exists."""
    match node:
        case StringNode():
            return ""
        case IntegerNode() | NumberNode():
            return None
        case BooleanNode():
            return False
        case ArrayNode():
            return []
        case _:
            assert_never(node)
