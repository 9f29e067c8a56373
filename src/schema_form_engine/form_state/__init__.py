"""Form state exports."""

from .state_container import (
    FormState,
    FormStateChange,
    FormStateChangeKind,
    FormStateError,
    FormStateListener,
)

__all__ = [
    "FormState",
    "FormStateChange",
    "FormStateChangeKind",
    "FormStateError",
    "FormStateListener",
]
