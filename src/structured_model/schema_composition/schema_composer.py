"""Schema composition across a model class hierarchy."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from structured_model.field_definition import ConfigurationError, Field

from .effective_schema import EffectiveSchema, SchemaLevel

DECLARATION_ATTRIBUTE = "fields"
DEFAULTS_ATTRIBUTE = "defaults"

logger = logging.getLogger(__name__)


def collect_declaration_levels(model_class: type) -> list[SchemaLevel]:
    """Collect each class's own field declarations, most-derived class first."""
    levels: list[SchemaLevel] = []
    for klass in model_class.__mro__:
        if DECLARATION_ATTRIBUTE not in vars(klass):
            continue
        declarations = vars(klass)[DECLARATION_ATTRIBUTE]
        if not isinstance(declarations, (list, tuple)):
            logger.warning(
                "Ignoring %s.%s: expected a list or tuple of field declarations, got %s",
                klass.__name__,
                DECLARATION_ATTRIBUTE,
                type(declarations).__name__,
            )
            continue
        levels.append(SchemaLevel(owner_name=klass.__name__, declarations=tuple(declarations)))
    return levels


def compose_schema(model_class: type) -> EffectiveSchema:
    """Build the effective schema of a model class.

    Levels are processed base-first so that a subclass declaring a field with
    the same name as an ancestor replaces the ancestor's field. Within one
    level the later declaration of a name wins.
    """
    entries: dict[str, Field] = {}
    origins: dict[str, str] = {}
    for level in reversed(collect_declaration_levels(model_class)):
        for declaration in level.declarations:
            try:
                item = Field.from_declaration(declaration)
            except ConfigurationError as exc:
                raise ConfigurationError(f"{level.owner_name}: {exc}") from exc
            if item.name in entries:
                logger.debug(
                    "%s overrides field %r declared by %s",
                    level.owner_name,
                    item.name,
                    origins[item.name],
                )
            entries[item.name] = item
            origins[item.name] = level.owner_name

    schema = EffectiveSchema(model_name=model_class.__name__, entries=entries, origins=origins)
    logger.debug("Composed schema for %s: %s", schema.model_name, ", ".join(schema.field_names))
    return schema


def apply_field_defaults(model: Any, schema: EffectiveSchema) -> None:
    """Write declared field defaults into an instance-owned defaults store.

    The inherited class-level store is copied, never modified. Models without
    defaulted fields keep the inherited store.
    """
    declared = schema.declared_defaults()
    if not declared:
        return
    store = _owned_defaults_store(model)
    store.update(declared)


def _owned_defaults_store(model: Any) -> dict[str, Any]:
    instance_attributes = vars(model)
    if DEFAULTS_ATTRIBUTE in instance_attributes:
        existing = instance_attributes[DEFAULTS_ATTRIBUTE]
        if isinstance(existing, dict):
            return existing
    inherited = getattr(model, DEFAULTS_ATTRIBUTE, None)
    if inherited is not None and not isinstance(inherited, Mapping):
        raise ConfigurationError(
            f"{type(model).__name__}.{DEFAULTS_ATTRIBUTE} must be a mapping, "
            f"got {type(inherited).__name__}."
        )
    store = dict(inherited or {})
    setattr(model, DEFAULTS_ATTRIBUTE, store)
    return store
