"""Form loading and submission entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from schema_form_engine.schema_model.dynamic_values import DynamicValue
from schema_form_engine.schema_model.schema_nodes import SchemaNode


@dataclass(frozen=True)
class LoadOutcome:
    """Result of one schema and prefill load attempt."""

    schema: SchemaNode | None
    error_message: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error_message is None


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result of passing the form through the submission gate."""

    accepted: bool
    payload: Mapping[str, DynamicValue] | None
    errors: Mapping[str, str]
