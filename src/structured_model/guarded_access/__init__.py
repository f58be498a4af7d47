"""Guarded access exports."""

from .guarded_accessor import GuardedAccessor, UnknownFieldError, require_declared_fields
from .guarded_model import StructuredModel

__all__ = [
    "GuardedAccessor",
    "StructuredModel",
    "UnknownFieldError",
    "require_declared_fields",
]
