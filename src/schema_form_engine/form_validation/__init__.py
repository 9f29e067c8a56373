"""Form validation exports."""

from .field_rules import (
    INVALID_DATE_MESSAGE,
    INVALID_INTEGER_MESSAGE,
    INVALID_NUMBER_MESSAGE,
    REQUIRED_MESSAGE,
    check_field,
    is_valid_date,
)
from .tree_validator import validate_all

__all__ = [
    "INVALID_DATE_MESSAGE",
    "INVALID_INTEGER_MESSAGE",
    "INVALID_NUMBER_MESSAGE",
    "REQUIRED_MESSAGE",
    "check_field",
    "is_valid_date",
    "validate_all",
]
