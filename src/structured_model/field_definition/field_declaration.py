"""Field definition entities and declaration normalization."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Final


class ConfigurationError(Exception):
    """Raised when a field declaration or declaration file is malformed."""


class _NoDefault(Enum):
    NO_DEFAULT = "NO_DEFAULT"

    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Final = _NoDefault.NO_DEFAULT

_DEFAULT_KEYS = ("default", "default_value", "defaultValue")
_RESERVED_KEYS = ("name", *_DEFAULT_KEYS)


@dataclass(frozen=True)
class Field:
    """Schema entry describing one permitted model attribute.

    A Field stores no data itself. It only names an attribute a model may
    hold, optionally with a default value and opaque declaration metadata
    (labels, validators, ...) that is carried along untouched.
    """

    name: str
    default: Any = NO_DEFAULT
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.name is None or self.name == "":
            raise ConfigurationError("no 'name' property provided to Field")
        if not isinstance(self.name, str):
            raise ConfigurationError(
                f"Field name must be a string, got {type(self.name).__name__}."
            )
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    @classmethod
    def from_declaration(cls, declaration: FieldDeclaration) -> Field:
        """Normalize a bare name, a mapping, or an existing Field."""
        if isinstance(declaration, Field):
            return declaration
        if isinstance(declaration, str):
            return cls(name=declaration)
        if isinstance(declaration, Mapping):
            metadata = {
                key: value for key, value in declaration.items() if key not in _RESERVED_KEYS
            }
            return cls(
                name=declaration.get("name"),  # type: ignore[arg-type]
                default=_declared_default(declaration),
                metadata=metadata,
            )
        raise ConfigurationError(
            "Field declarations must be a name or a mapping, "
            f"got {type(declaration).__name__}."
        )


def _declared_default(declaration: Mapping[str, Any]) -> Any:
    for key in _DEFAULT_KEYS:
        if key in declaration:
            return declaration[key]
    return NO_DEFAULT


FieldDeclaration = str | Mapping[str, Any] | Field
