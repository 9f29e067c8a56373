"""Wiring of configured sources into a form loader."""

from __future__ import annotations

from schema_form_engine.acquisition.provider_contracts import PrefillProvider, SchemaProvider
from schema_form_engine.acquisition.source_providers import (
    FilePrefillProvider,
    FileSchemaProvider,
    TextPrefillProvider,
    TextSchemaProvider,
)
from schema_form_engine.configuration.runtime_settings import Configuration, SourceConfig
from schema_form_engine.form_state.state_container import FormState

from .load_orchestration import FormLoader

INLINE_PREFILL_LOCATOR = "inline"


def build_form_loader(configuration: Configuration, state: FormState) -> FormLoader:
    """Create a loader reading the configured schema and prefill sources."""
    prefill_provider: PrefillProvider | None = None
    prefill_locator = ""
    if configuration.prefill is not None:
        prefill_provider, prefill_locator = _prefill_source(configuration.prefill)
    return FormLoader(
        _schema_source(configuration.schema),
        state,
        prefill_provider=prefill_provider,
        prefill_locator=prefill_locator,
    )


def _schema_source(source: SourceConfig) -> SchemaProvider:
    if source.path is not None:
        return FileSchemaProvider(source.path)
    return TextSchemaProvider(source.inline or "")


def _prefill_source(source: SourceConfig) -> tuple[PrefillProvider, str]:
    if source.path is not None:
        return FilePrefillProvider(source.path.parent), source.path.name
    return TextPrefillProvider(source.inline or ""), INLINE_PREFILL_LOCATOR
