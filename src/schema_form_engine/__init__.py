"""Schema-driven form prefill and validation engine."""

import logging

from .form_state import FormState
from .form_validation import validate_all
from .path_addressing import child_path
from .prefill_flattening import flatten
from .schema_model import SchemaNode, decode_schema, load_schema_text

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FormState",
    "SchemaNode",
    "child_path",
    "decode_schema",
    "flatten",
    "load_schema_text",
    "validate_all",
]
