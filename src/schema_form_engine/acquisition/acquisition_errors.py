"""Acquisition error taxonomy."""

from __future__ import annotations

from enum import Enum


class NetworkErrorKind(str, Enum):
    """Remote acquisition failures."""

    NO_CONNECTIVITY = "no_connectivity"
    TIMEOUT = "timeout"
    SERVER_REJECTED = "server_rejected"
    UNKNOWN = "unknown"


class LocalErrorKind(str, Enum):
    """Local acquisition failures."""

    DECODING_ERROR = "decoding_error"
    UNREADABLE = "unreadable"


class AcquisitionError(Exception):
    """Raised when a schema or prefill document cannot be acquired."""

    def __init__(self, kind: NetworkErrorKind | LocalErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        message = kind.value if detail is None else f"{kind.value}: {detail}"
        super().__init__(message)

    @property
    def is_network_error(self) -> bool:
        """Return whether the failure happened on the network side."""
        return isinstance(self.kind, NetworkErrorKind)
