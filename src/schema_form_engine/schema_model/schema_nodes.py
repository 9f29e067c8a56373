"""Typed schema tree entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, TypeAlias, TypeGuard


class SchemaError(Exception):
    """Raised for schema authoring or decoding failures."""


class SchemaKind(str, Enum):
    """Discriminator shared by every schema node variant."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"


@dataclass(frozen=True)
class StringNode:
    """Text field, optionally restricted to an enumeration or a format."""

    kind: ClassVar[SchemaKind] = SchemaKind.STRING

    title: str | None = None
    enum: tuple[str, ...] | None = None
    min_length: int | None = None
    max_length: int | None = None
    format: str | None = None


@dataclass(frozen=True)
class IntegerNode:
    """Whole-number field with optional inclusive bounds."""

    kind: ClassVar[SchemaKind] = SchemaKind.INTEGER

    title: str | None = None
    minimum: int | None = None
    maximum: int | None = None


@dataclass(frozen=True)
class NumberNode:
    """Floating point field with optional inclusive bounds."""

    kind: ClassVar[SchemaKind] = SchemaKind.NUMBER

    title: str | None = None
    minimum: float | None = None
    maximum: float | None = None


@dataclass(frozen=True)
class BooleanNode:
    """Checkbox-style field."""

    kind: ClassVar[SchemaKind] = SchemaKind.BOOLEAN

    title: str | None = None


@dataclass(frozen=True)
class ArrayNode:
    """List field; only string items are supported."""

    kind: ClassVar[SchemaKind] = SchemaKind.ARRAY

    title: str | None = None
    items: SchemaNode | None = None


@dataclass(frozen=True)
class ObjectNode:
    """Group of named child nodes.

    ``properties`` keeps declaration order and is exposed read-only. Every
    name listed in ``required`` must be one of the property names. Object
    nodes compare by value but are not hashable.
    """

    kind: ClassVar[SchemaKind] = SchemaKind.OBJECT

    title: str | None = None
    properties: Mapping[str, SchemaNode] = field(default_factory=dict)
    required: frozenset[str] = frozenset()

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))
        object.__setattr__(self, "required", frozenset(self.required))
        unknown = sorted(name for name in self.required if name not in self.properties)
        if unknown:
            raise SchemaError(f"Required properties are not defined: {', '.join(unknown)}")


SchemaNode: TypeAlias = StringNode | IntegerNode | NumberNode | BooleanNode | ObjectNode | ArrayNode
LeafNode: TypeAlias = StringNode | IntegerNode | NumberNode | BooleanNode | ArrayNode


def is_leaf(node: SchemaNode) -> TypeGuard[LeafNode]:
    """Return whether the node stores a value (every variant except objects)."""
    return not isinstance(node, ObjectNode)
