"""Dotted path addressing for schema tree positions."""

from __future__ import annotations

from collections.abc import Iterator

from schema_form_engine.schema_model.schema_nodes import (
    LeafNode,
    ObjectNode,
    SchemaError,
    SchemaNode,
    is_leaf,
)


def child_path(parent: str, key: str) -> str:
    """Return the path of property ``key`` below ``parent`` (root is the empty string)."""
    return key if not parent else f"{parent}.{key}"


def iter_leaf_nodes(schema: SchemaNode, path: str = "") -> Iterator[tuple[str, LeafNode]]:
    """Yield every leaf path with its node in declaration order."""
    if is_leaf(schema):
        yield path, schema
        return
    if isinstance(schema, ObjectNode):
        for key, child in schema.properties.items():
            yield from iter_leaf_nodes(child, child_path(path, key))


def leaf_nodes(schema: SchemaNode) -> dict[str, LeafNode]:
    """Return leaf nodes keyed by path, rejecting paths that collide."""
    nodes: dict[str, LeafNode] = {}
    for path, node in iter_leaf_nodes(schema):
        if path in nodes:
            raise SchemaError(f"Duplicate field path detected: {path}")
        nodes[path] = node
    return nodes


def required_leaf_paths(schema: SchemaNode) -> frozenset[str]:
    """Return the leaf paths whose parent object lists them as required."""
    return frozenset(_iter_required_paths(schema, ""))


def _iter_required_paths(schema: SchemaNode, path: str) -> Iterator[str]:
    if not isinstance(schema, ObjectNode):
        return
    for key, child in schema.properties.items():
        current = child_path(path, key)
        if not is_leaf(child):
            yield from _iter_required_paths(child, current)
        elif key in schema.required:
            yield current
