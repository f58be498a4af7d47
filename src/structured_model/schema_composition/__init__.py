"""Schema composition exports."""

from .effective_schema import EffectiveSchema, SchemaLevel
from .schema_composer import apply_field_defaults, collect_declaration_levels, compose_schema

__all__ = [
    "EffectiveSchema",
    "SchemaLevel",
    "apply_field_defaults",
    "collect_declaration_levels",
    "compose_schema",
]
