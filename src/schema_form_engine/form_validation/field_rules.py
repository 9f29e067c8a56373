"""Per-field constraint checks."""

from __future__ import annotations

import re
from datetime import datetime
from typing import assert_never

from schema_form_engine.schema_model.dynamic_values import (
    DynamicValue,
    parse_integer,
    parse_number,
)
from schema_form_engine.schema_model.schema_nodes import (
    ArrayNode,
    BooleanNode,
    IntegerNode,
    LeafNode,
    NumberNode,
    StringNode,
)

REQUIRED_MESSAGE = "Field is required"
INVALID_DATE_MESSAGE = "Invalid date format. Expected YYYY-MM-DD"
INVALID_INTEGER_MESSAGE = "Invalid integer value"
INVALID_NUMBER_MESSAGE = "Invalid number value"

DATE_FORMAT = "date"
_DATE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}")


def check_field(node: LeafNode, value: DynamicValue, required: bool) -> str | None:
    """Return the first violated constraint message for a leaf value, if any."""
    if required and (value is None or value == ""):
        return REQUIRED_MESSAGE

    match node:
        case StringNode():
            return _check_string(node, value)
        case IntegerNode():
            return _check_bounds(
                parse_integer(value), value, node.minimum, node.maximum, INVALID_INTEGER_MESSAGE
            )
        case NumberNode():
            return _check_bounds(
                parse_number(value), value, node.minimum, node.maximum, INVALID_NUMBER_MESSAGE
            )
        case BooleanNode():
            return None
        case ArrayNode():
            if required and not value:
                return REQUIRED_MESSAGE
            return None
        case _:
            assert_never(node)


def is_valid_date(text: str) -> bool:
    """Return whether text is a calendar-valid ``YYYY-MM-DD`` date."""
    if not _DATE_SHAPE.fullmatch(text):
        return False
    try:
        datetime.strptime(text, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def _check_string(node: StringNode, value: DynamicValue) -> str | None:
    text = "" if value is None else str(value)
    if node.min_length is not None and len(text) < node.min_length:
        return f"Must be at least {node.min_length} characters long"
    if node.max_length is not None and len(text) > node.max_length:
        return f"Must be at most {node.max_length} characters long"
    if node.format == DATE_FORMAT and text and not is_valid_date(text):
        return INVALID_DATE_MESSAGE
    return None


def _check_bounds(
    number: int | float | None,
    raw_value: DynamicValue,
    minimum: int | float | None,
    maximum: int | float | None,
    invalid_message: str,
) -> str | None:
    if number is None:
        if raw_value is not None and raw_value != "":
            return invalid_message
        return None
    if minimum is not None and number < minimum:
        return f"Minimum value: {minimum}"
    if maximum is not None and number > maximum:
        return f"Maximum value: {maximum}"
    return None
