"""Composed schema entities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from structured_model.field_definition import Field, FieldDeclaration


@dataclass(frozen=True)
class SchemaLevel:
    """Field declarations owned by exactly one class of a model hierarchy."""

    owner_name: str
    declarations: tuple[FieldDeclaration, ...]


@dataclass(frozen=True)
class EffectiveSchema(Mapping[str, Field]):
    """Override-resolved mapping of field names to fields for one model class."""

    model_name: str
    entries: Mapping[str, Field] = field(default_factory=dict)
    origins: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))
        object.__setattr__(self, "origins", MappingProxyType(dict(self.origins)))

    def __getitem__(self, name: str) -> Field:
        return self.entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(self.entries)

    def origin_of(self, name: str) -> str:
        """Return the name of the class whose declaration supplied the field."""
        return self.origins[name]

    def declared_defaults(self) -> dict[str, Any]:
        return {name: item.default for name, item in self.entries.items() if item.has_default}
