"""Load orchestration tests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schema_form_engine.acquisition.acquisition_errors import (
    AcquisitionError,
    LocalErrorKind,
    NetworkErrorKind,
)
from schema_form_engine.form_loading.load_orchestration import FormLoader
from schema_form_engine.form_state.state_container import FormState
from schema_form_engine.schema_model.schema_nodes import (
    IntegerNode,
    ObjectNode,
    SchemaNode,
    StringNode,
)

_SCHEMA = ObjectNode(
    properties={"name": StringNode(), "age": IntegerNode()},
    required=frozenset({"name"}),
)


class _FakeSchemaProvider:
    def __init__(self, schema: SchemaNode | None = None, error: AcquisitionError | None = None):
        self._schema = schema
        self._error = error
        self.calls = 0

    def fetch_schema(self) -> SchemaNode:
        self.calls += 1
        if self._error is not None:
            raise self._error
        assert self._schema is not None
        return self._schema


class _FakePrefillProvider:
    def __init__(self, document: Any = None, error: AcquisitionError | None = None):
        self._document = document
        self._error = error
        self.locators: list[str] = []

    def fetch_prefill_data(self, locator: str) -> Mapping[str, Any]:
        self.locators.append(locator)
        if self._error is not None:
            raise self._error
        return self._document


def test_successful_load_populates_state_from_prefill() -> None:
    state = FormState()
    prefill = _FakePrefillProvider({"name": "Dana", "age": 41})
    loader = FormLoader(
        _FakeSchemaProvider(_SCHEMA),
        state,
        prefill_provider=prefill,
        prefill_locator="https://example.com/data",
    )

    outcome = loader.load()

    assert outcome.succeeded is True
    assert outcome.schema == _SCHEMA
    assert state.values == {"name": "Dana", "age": 41}
    assert prefill.locators == ["https://example.com/data"]


def test_load_without_prefill_provider_uses_defaults() -> None:
    state = FormState()

    outcome = FormLoader(_FakeSchemaProvider(_SCHEMA), state).load()

    assert outcome.succeeded is True
    assert state.values == {"name": "", "age": None}


def test_schema_failure_reports_one_message_and_keeps_state(caplog) -> None:
    state = FormState()
    state.load(_SCHEMA, {"name": "kept", "age": 1})
    loader = FormLoader(
        _FakeSchemaProvider(error=AcquisitionError(NetworkErrorKind.NO_CONNECTIVITY)),
        state,
        prefill_provider=_FakePrefillProvider({}),
    )

    outcome = loader.load()

    assert outcome.succeeded is False
    assert outcome.schema is None
    assert outcome.error_message == "Failed to load schema (no_connectivity)"
    assert state.values == {"name": "kept", "age": 1}
    assert state.errors == {}
    assert "Schema acquisition failed" in caplog.text


def test_prefill_failure_keeps_schema_but_reports_failure() -> None:
    state = FormState()
    loader = FormLoader(
        _FakeSchemaProvider(_SCHEMA),
        state,
        prefill_provider=_FakePrefillProvider(error=AcquisitionError(NetworkErrorKind.TIMEOUT)),
    )

    outcome = loader.load()

    assert outcome.schema == _SCHEMA
    assert outcome.error_message == "Failed to load initial data (timeout)"
    assert state.values == {}


def test_non_object_prefill_document_is_a_decoding_error() -> None:
    loader = FormLoader(
        _FakeSchemaProvider(_SCHEMA),
        FormState(),
        prefill_provider=_FakePrefillProvider(["not", "an", "object"]),
    )

    outcome = loader.load()

    assert outcome.error_message == (
        f"Failed to load initial data ({LocalErrorKind.DECODING_ERROR.value})"
    )


def test_colliding_field_paths_fail_the_load() -> None:
    schema = ObjectNode(
        properties={
            "a": ObjectNode(properties={"b": StringNode()}),
            "a.b": StringNode(),
        }
    )

    outcome = FormLoader(_FakeSchemaProvider(schema), FormState()).load()

    assert outcome.error_message == "Failed to load schema (decoding_error)"


def test_reloading_replaces_state_with_latest_completed_load() -> None:
    state = FormState()
    first = FormLoader(
        _FakeSchemaProvider(_SCHEMA), state, prefill_provider=_FakePrefillProvider({"name": "A"})
    )
    second = FormLoader(
        _FakeSchemaProvider(_SCHEMA), state, prefill_provider=_FakePrefillProvider({"name": "B"})
    )

    first.load()
    second.load()

    assert state.get("name") == "B"
