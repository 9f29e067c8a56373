"""Protocols implemented by schema and prefill sources."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from schema_form_engine.schema_model.schema_nodes import SchemaNode


class SchemaProvider(Protocol):
    """Source of the form schema.

    Implementations raise ``AcquisitionError`` when the schema cannot be
    fetched or decoded.
    """

    def fetch_schema(self) -> SchemaNode: ...


class PrefillProvider(Protocol):
    """Source of the document used to prefill the form."""

    def fetch_prefill_data(self, locator: str) -> Mapping[str, Any]: ...
