"""Schema and prefill providers backed by inline text or local files."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from schema_form_engine.schema_model.schema_decoding import load_schema_text
from schema_form_engine.schema_model.schema_nodes import SchemaError, SchemaNode

from .acquisition_errors import AcquisitionError, LocalErrorKind

_LOGGER = logging.getLogger(__name__)


class TextSchemaProvider:
    """Schema provider that decodes JSON schema text held in memory."""

    def __init__(self, text: str) -> None:
        self._text = text

    def fetch_schema(self) -> SchemaNode:
        return _decode_schema_text(self._text)


class FileSchemaProvider:
    """Schema provider that reads a JSON schema file on every fetch."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def fetch_schema(self) -> SchemaNode:
        return _decode_schema_text(_read_text(self._path))


class TextPrefillProvider:
    """Prefill provider serving one in-memory JSON document for any locator."""

    def __init__(self, text: str) -> None:
        self._text = text

    def fetch_prefill_data(self, locator: str) -> Mapping[str, Any]:
        _LOGGER.debug("Serving inline prefill document for locator '%s'.", locator)
        return _decode_document_text(self._text)


class FilePrefillProvider:
    """Prefill provider that treats the locator as a JSON file path.

    Relative locators are resolved against ``base_path``.
    """

    def __init__(self, base_path: Path | str = ".") -> None:
        self._base_path = Path(base_path)

    def fetch_prefill_data(self, locator: str) -> Mapping[str, Any]:
        candidate = Path(locator)
        path = candidate if candidate.is_absolute() else self._base_path / candidate
        return _decode_document_text(_read_text(path))


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AcquisitionError(LocalErrorKind.UNREADABLE, f"{path}: {exc}") from exc


def _decode_schema_text(text: str) -> SchemaNode:
    try:
        return load_schema_text(text)
    except SchemaError as exc:
        raise AcquisitionError(LocalErrorKind.DECODING_ERROR, str(exc)) from exc


def _decode_document_text(text: str) -> Mapping[str, Any]:
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AcquisitionError(LocalErrorKind.DECODING_ERROR, f"Invalid JSON: {exc}") from exc
    if not isinstance(document, Mapping):
        raise AcquisitionError(
            LocalErrorKind.DECODING_ERROR, "Prefill document root must be an object."
        )
    return document
