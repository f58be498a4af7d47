"""Observable attribute container used as the base model."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Protocol

UNSET: Any = object()


@dataclass(frozen=True)
class ChangeEvent:
    """One attribute whose value changed during a write."""

    name: str
    previous: Any
    current: Any


ChangeListener = Callable[["ObservableModel", ChangeEvent], None]


class AttributeStore(Protocol):
    """Native read/write surface of a data model."""

    def get(self, name: str) -> Any: ...

    def set(self, attributes: Mapping[str, Any] | str, value: Any = ...) -> None: ...


def normalize_write(attributes: Mapping[str, Any] | str, value: Any = UNSET) -> dict[str, Any]:
    """Turn ``set(name, value)`` and ``set(mapping)`` calls into one mapping."""
    if isinstance(attributes, str):
        if value is UNSET:
            raise TypeError("set() with an attribute name requires a value.")
        return {attributes: value}
    if value is not UNSET:
        raise TypeError("set() with a mapping does not accept a separate value.")
    return dict(attributes)


class ObservableModel:
    """Attribute container that notifies listeners about value changes.

    ``defaults`` holds values applied on construction before the caller's
    initial attributes.
    """

    defaults: Mapping[str, Any] = MappingProxyType({})

    def __init__(self, attributes: Mapping[str, Any] | None = None) -> None:
        self._attributes: dict[str, Any] = {}
        self._listeners: list[ChangeListener] = []
        self.set({**self.defaults, **(attributes or {})})

    def get(self, name: str) -> Any:
        return self._attributes.get(name)

    def set(self, attributes: Mapping[str, Any] | str, value: Any = UNSET) -> None:
        changes = normalize_write(attributes, value)
        events = [
            ChangeEvent(name=name, previous=self._attributes.get(name), current=current)
            for name, current in changes.items()
            if name not in self._attributes or self._attributes[name] != current
        ]
        self._attributes.update(changes)
        for event in events:
            for listener in list(self._listeners):
                listener(self, event)

    def has(self, name: str) -> bool:
        return self._attributes.get(name) is not None

    def on_change(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def off_change(self, listener: ChangeListener) -> None:
        self._listeners.remove(listener)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._attributes)
