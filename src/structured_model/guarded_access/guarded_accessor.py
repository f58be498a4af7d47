"""Field-membership gating for model reads and writes."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from structured_model.observable_model import UNSET, AttributeStore, normalize_write
from structured_model.schema_composition import EffectiveSchema


class UnknownFieldError(LookupError):
    """Raised when a read or write names an attribute that is not a declared field."""

    def __init__(self, field_name: str, operation: str) -> None:
        self.field_name = field_name
        self.operation = operation
        super().__init__(
            f"{operation}(): A field (attribute) with the name '{field_name}' was not found."
        )


def require_declared_fields(schema: EffectiveSchema, names: Iterable[str], operation: str) -> None:
    """Fail on the first undeclared name; nothing is written by the caller in that case."""
    for name in names:
        if name not in schema:
            raise UnknownFieldError(name, operation)


class GuardedAccessor:
    """Wrap any attribute store so only declared fields can be read or written."""

    def __init__(self, store: AttributeStore, schema: EffectiveSchema) -> None:
        self._store = store
        self._schema = schema

    @property
    def schema(self) -> EffectiveSchema:
        return self._schema

    def get(self, name: str) -> Any:
        require_declared_fields(self._schema, (name,), f"{self._schema.model_name}.get")
        return self._store.get(name)

    def set(self, attributes: Mapping[str, Any] | str, value: Any = UNSET) -> None:
        changes = normalize_write(attributes, value)
        require_declared_fields(self._schema, changes, f"{self._schema.model_name}.set")
        self._store.set(changes)

    def has(self, name: str) -> bool:
        return name in self._schema
