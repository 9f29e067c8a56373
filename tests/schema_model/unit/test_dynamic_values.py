"""Dynamic value coercion tests."""

from __future__ import annotations

import pytest
from schema_form_engine.schema_model.dynamic_values import (
    default_value_for,
    parse_integer,
    parse_number,
)
from schema_form_engine.schema_model.schema_nodes import (
    ArrayNode,
    BooleanNode,
    IntegerNode,
    NumberNode,
    StringNode,
)


@pytest.mark.parametrize(
    ("node", "expected"),
    [
        (StringNode(), ""),
        (IntegerNode(), None),
        (NumberNode(), None),
        (BooleanNode(), False),
        (ArrayNode(), []),
    ],
)
def test_default_value_for_each_leaf_kind(node, expected) -> None:
    assert default_value_for(node) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(7, 7), ("7", 7), ("-12", -12), (" 7", None), ("7.0", None), (7.0, None), (True, None)],
)
def test_parse_integer(raw: object, expected: int | None) -> None:
    assert parse_integer(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (7, 7.0),
        (2.5, 2.5),
        ("2.5", 2.5),
        ("1e3", 1000.0),
        ("abc", None),
        (False, None),
        (None, None),
    ],
)
def test_parse_number(raw: object, expected: float | None) -> None:
    assert parse_number(raw) == expected
