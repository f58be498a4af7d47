"""Field definition exports."""

from .field_declaration import NO_DEFAULT, ConfigurationError, Field, FieldDeclaration

__all__ = [
    "ConfigurationError",
    "Field",
    "FieldDeclaration",
    "NO_DEFAULT",
]
