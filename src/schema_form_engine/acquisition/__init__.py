"""Schema and prefill acquisition exports."""

from .acquisition_errors import AcquisitionError, LocalErrorKind, NetworkErrorKind
from .provider_contracts import PrefillProvider, SchemaProvider
from .source_providers import (
    FilePrefillProvider,
    FileSchemaProvider,
    TextPrefillProvider,
    TextSchemaProvider,
)

__all__ = [
    "AcquisitionError",
    "LocalErrorKind",
    "NetworkErrorKind",
    "PrefillProvider",
    "SchemaProvider",
    "FilePrefillProvider",
    "FileSchemaProvider",
    "TextPrefillProvider",
    "TextSchemaProvider",
]
