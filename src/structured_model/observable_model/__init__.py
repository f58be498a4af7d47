"""Base model exports."""

from .observable_model import (
    AttributeStore,
    ChangeEvent,
    ChangeListener,
    UNSET,
    ObservableModel,
    normalize_write,
)

__all__ = [
    "AttributeStore",
    "ChangeEvent",
    "ChangeListener",
    "ObservableModel",
    "UNSET",
    "normalize_write",
]
