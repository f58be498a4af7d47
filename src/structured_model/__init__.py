"""Declarative field schemas for observable data models."""

import logging

from .field_definition import NO_DEFAULT, ConfigurationError, Field
from .guarded_access import GuardedAccessor, StructuredModel, UnknownFieldError
from .observable_model import ChangeEvent, ObservableModel
from .schema_composition import EffectiveSchema, compose_schema

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ChangeEvent",
    "ConfigurationError",
    "EffectiveSchema",
    "Field",
    "GuardedAccessor",
    "NO_DEFAULT",
    "ObservableModel",
    "StructuredModel",
    "UnknownFieldError",
    "compose_schema",
]
