"""Mutable form state container."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from schema_form_engine.form_validation.tree_validator import validate_all
from schema_form_engine.path_addressing.field_paths import leaf_nodes
from schema_form_engine.schema_model.dynamic_values import DynamicValue, default_value_for
from schema_form_engine.schema_model.schema_nodes import LeafNode, SchemaNode


class FormStateError(Exception):
    """Raised when the form state is used before a schema is bound."""


class FormStateChangeKind(str, Enum):
    """Kinds of form state mutations reported to listeners."""

    LOADED = "loaded"
    VALUE_SET = "value_set"
    VALIDATED = "validated"
    CLEARED = "cleared"


@dataclass(frozen=True)
class FormStateChange:
    """Notification payload delivered to form state listeners."""

    kind: FormStateChangeKind
    path: str | None = None


FormStateListener = Callable[[FormStateChange], None]


class FormState:
    """Current field values and field errors keyed by path.

    The container assumes a single writer. Setting a value never triggers
    validation; callers run :meth:`validate` when they want a fresh pass.
    """

    def __init__(self) -> None:
        self._schema: SchemaNode | None = None
        self._leaf_nodes: dict[str, LeafNode] = {}
        self._values: dict[str, DynamicValue] = {}
        self._errors: dict[str, str] = {}
        self._listeners: list[FormStateListener] = []

    @property
    def schema(self) -> SchemaNode | None:
        """Schema bound by the latest :meth:`load`."""
        return self._schema

    @property
    def values(self) -> Mapping[str, DynamicValue]:
        """Read-only view of the current values."""
        return MappingProxyType(self._values)

    @property
    def errors(self) -> Mapping[str, str]:
        """Read-only view of the errors from the latest validation pass."""
        return MappingProxyType(self._errors)

    def load(self, schema: SchemaNode, values: Mapping[str, DynamicValue]) -> None:
        """Replace the state with a freshly flattened schema and value set."""
        leaves = leaf_nodes(schema)
        self._values.clear()
        self._errors.clear()
        self._schema = schema
        self._leaf_nodes = leaves
        self._values.update(values)
        self._notify(FormStateChange(kind=FormStateChangeKind.LOADED))

    def get(self, path: str) -> DynamicValue:
        """Return the stored value, or the leaf's type default when absent."""
        if path in self._values:
            return self._values[path]
        node = self._leaf_nodes.get(path)
        return default_value_for(node) if node is not None else None

    def set(self, path: str, value: DynamicValue) -> None:
        """Overwrite the value at ``path`` without validating."""
        self._values[path] = value
        self._notify(FormStateChange(kind=FormStateChangeKind.VALUE_SET, path=path))

    def error_for(self, path: str) -> str | None:
        """Return the current error message for ``path``, if any."""
        return self._errors.get(path)

    def clear(self) -> None:
        """Empty both values and errors."""
        self._values.clear()
        self._errors.clear()
        self._notify(FormStateChange(kind=FormStateChangeKind.CLEARED))

    def validate(self) -> bool:
        """Run a full validation pass over the bound schema."""
        if self._schema is None:
            raise FormStateError("Cannot validate form state before a schema is loaded.")
        is_valid = validate_all(self._schema, self._values, self._errors)
        self._notify(FormStateChange(kind=FormStateChangeKind.VALIDATED))
        return is_valid

    def subscribe(self, listener: FormStateListener) -> Callable[[], None]:
        """Register a change listener and return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, change: FormStateChange) -> None:
        for listener in tuple(self._listeners):
            listener(change)
