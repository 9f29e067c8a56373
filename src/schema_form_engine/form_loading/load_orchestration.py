"""Schema and prefill load orchestration service."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from schema_form_engine.acquisition.acquisition_errors import AcquisitionError, LocalErrorKind
from schema_form_engine.acquisition.provider_contracts import PrefillProvider, SchemaProvider
from schema_form_engine.form_state.state_container import FormState
from schema_form_engine.prefill_flattening.document_flattener import flatten
from schema_form_engine.schema_model.schema_nodes import SchemaError

from .form_contracts import LoadOutcome

_LOGGER = logging.getLogger(__name__)


class FormLoader:
    """Fetch a schema and its prefill document, then populate the form state.

    Loads are not cancelled: when several loads run, the one that completes
    last determines the state.
    """

    def __init__(
        self,
        schema_provider: SchemaProvider,
        state: FormState,
        *,
        prefill_provider: PrefillProvider | None = None,
        prefill_locator: str = "",
    ) -> None:
        self._schema_provider = schema_provider
        self._prefill_provider = prefill_provider
        self._prefill_locator = prefill_locator
        self._state = state

    def load(self) -> LoadOutcome:
        """Run one load attempt and report the outcome."""
        try:
            schema = self._schema_provider.fetch_schema()
        except AcquisitionError as exc:
            _LOGGER.warning("Schema acquisition failed: %s", exc)
            return LoadOutcome(
                schema=None, error_message=f"Failed to load schema ({exc.kind.value})"
            )

        try:
            document = self._fetch_document()
        except AcquisitionError as exc:
            _LOGGER.warning("Prefill acquisition failed: %s", exc)
            return LoadOutcome(
                schema=schema, error_message=f"Failed to load initial data ({exc.kind.value})"
            )

        try:
            self._state.load(schema, flatten(document, schema))
        except SchemaError as exc:
            _LOGGER.warning("Schema rejected while populating form state: %s", exc)
            return LoadOutcome(
                schema=None,
                error_message=f"Failed to load schema ({LocalErrorKind.DECODING_ERROR.value})",
            )
        _LOGGER.info("Loaded form with %d fields.", len(self._state.values))
        return LoadOutcome(schema=schema)

    def _fetch_document(self) -> Mapping[str, object]:
        if self._prefill_provider is None:
            return {}
        document = self._prefill_provider.fetch_prefill_data(self._prefill_locator)
        if not isinstance(document, Mapping):
            raise AcquisitionError(
                LocalErrorKind.DECODING_ERROR, "Prefill document root must be an object."
            )
        return document
