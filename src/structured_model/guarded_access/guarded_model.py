"""Base class for models with declared fields."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from structured_model.field_definition import FieldDeclaration
from structured_model.observable_model import UNSET, ObservableModel, normalize_write
from structured_model.schema_composition import (
    EffectiveSchema,
    apply_field_defaults,
    compose_schema,
)

from .guarded_accessor import require_declared_fields


class StructuredModel(ObservableModel):
    """Observable model that only accepts its declared fields.

    Subclasses list their own fields in ``fields``; declarations are inherited
    and a subclass field replaces an ancestor field of the same name::

        class Person(StructuredModel):
            fields = ["first_name", {"name": "age", "default": 0}]

        class Employee(Person):
            fields = ["employer"]

    The schema is composed before the base model applies defaults or the
    initial attributes, so those writes are already checked against it.
    """

    fields: ClassVar[Sequence[FieldDeclaration]] = ()

    def __init__(self, attributes: Mapping[str, Any] | None = None) -> None:
        schema = compose_schema(type(self))
        apply_field_defaults(self, schema)
        self.schema: EffectiveSchema = schema
        super().__init__(attributes)

    def get(self, name: str) -> Any:
        require_declared_fields(self.schema, (name,), f"{type(self).__name__}.get")
        return super().get(name)

    def set(self, attributes: Mapping[str, Any] | str, value: Any = UNSET) -> None:
        changes = normalize_write(attributes, value)
        require_declared_fields(self.schema, changes, f"{type(self).__name__}.set")
        super().set(changes)

    def has(self, name: str) -> bool:
        """Return whether ``name`` is a declared field, whatever its current value."""
        return name in self.schema
