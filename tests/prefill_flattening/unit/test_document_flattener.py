"""Prefill flattening tests."""

from __future__ import annotations

from schema_form_engine.path_addressing.field_paths import leaf_nodes
from schema_form_engine.prefill_flattening.document_flattener import flatten
from schema_form_engine.schema_model.schema_nodes import (
    ArrayNode,
    BooleanNode,
    IntegerNode,
    NumberNode,
    ObjectNode,
    StringNode,
)


def _profile_schema() -> ObjectNode:
    return ObjectNode(
        properties={
            "name": StringNode(),
            "age": IntegerNode(),
            "score": NumberNode(),
            "active": BooleanNode(),
            "tags": ArrayNode(items=StringNode()),
            "address": ObjectNode(properties={"city": StringNode(), "floor": IntegerNode()}),
        }
    )


def test_missing_integer_stays_absent_instead_of_zero() -> None:
    schema = ObjectNode(properties={"a": IntegerNode()})

    assert flatten({}, schema) == {"a": None}
    assert flatten({"a": 7}, schema) == {"a": 7}


def test_empty_document_gives_every_leaf_its_type_default() -> None:
    values = flatten({}, _profile_schema())

    assert values == {
        "name": "",
        "age": None,
        "score": None,
        "active": False,
        "tags": [],
        "address.city": "",
        "address.floor": None,
    }


def test_flatten_produces_one_entry_per_leaf_and_none_for_objects() -> None:
    schema = _profile_schema()

    values = flatten({"address": {"city": "Tel Aviv"}}, schema)

    assert set(values) == set(leaf_nodes(schema))
    assert "address" not in values
    assert values["address.city"] == "Tel Aviv"


def test_copies_well_typed_document_values() -> None:
    values = flatten(
        {
            "name": "Dana",
            "age": 34,
            "score": 7.5,
            "active": True,
            "tags": ["a", "b"],
            "address": {"city": "Haifa", "floor": "3"},
        },
        _profile_schema(),
    )

    assert values == {
        "name": "Dana",
        "age": 34,
        "score": 7.5,
        "active": True,
        "tags": ["a", "b"],
        "address.city": "Haifa",
        "address.floor": 3,
    }


def test_mistyped_document_values_fall_back_to_defaults() -> None:
    values = flatten(
        {
            "name": 12,
            "age": "twelve",
            "score": True,
            "active": "yes",
            "tags": "a,b",
            "address": ["not", "an", "object"],
        },
        _profile_schema(),
    )

    assert values["name"] == ""
    assert values["age"] is None
    assert values["score"] is None
    assert values["active"] is False
    assert values["tags"] == []
    assert values["address.city"] == ""


def test_numbers_accept_integers_and_numeric_text() -> None:
    schema = ObjectNode(properties={"salary": NumberNode(), "count": IntegerNode()})

    values = flatten({"salary": 80000, "count": 4.5}, schema)

    assert values["salary"] == 80000.0
    assert isinstance(values["salary"], float)
    assert values["count"] is None
    assert flatten({"salary": "12.25"}, schema)["salary"] == 12.25


def test_array_keeps_primitive_entries_as_text_and_drops_the_rest() -> None:
    schema = ObjectNode(properties={"tags": ArrayNode(items=StringNode())})

    values = flatten({"tags": ["x", 3, True, None, {"k": "v"}, ["nested"]]}, schema)

    assert values["tags"] == ["x", "3", "true"]


def test_non_mapping_document_is_treated_as_empty() -> None:
    assert flatten(None, ObjectNode(properties={"a": StringNode()})) == {"a": ""}


def test_oversized_numeric_values_flatten_to_absent() -> None:
    schema = ObjectNode(properties={"count": IntegerNode(), "salary": NumberNode()})

    values = flatten({"count": "9" * 5000, "salary": 10**400}, schema)

    assert values == {"count": None, "salary": None}


def test_array_drops_integers_that_cannot_be_rendered_as_text() -> None:
    schema = ObjectNode(properties={"tags": ArrayNode(items=StringNode())})

    assert flatten({"tags": ["x", 10**5000, 7]}, schema) == {"tags": ["x", "7"]}
