"""Declaration file loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from structured_model.field_definition import ConfigurationError, FieldDeclaration
from structured_model.guarded_access import StructuredModel
from structured_model.schema_composition import compose_schema

from .declaration_models import DeclarationDocument, ModelDeclaration

logger = logging.getLogger(__name__)


def load_declaration_document(declarations_path: Path | str) -> DeclarationDocument:
    """Read and validate a YAML declaration file."""
    path = Path(declarations_path)
    if not path.exists():
        raise ConfigurationError(f"Declaration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Failed to read declaration file: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse declaration file: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Declaration file root must be a mapping.")

    models_section = parsed.get("models")
    if not isinstance(models_section, Mapping) or not models_section:
        raise ConfigurationError("Declaration section 'models' is required.")

    models = tuple(
        _parse_model_section(name, section) for name, section in models_section.items()
    )
    return DeclarationDocument(source_path=path, models=models)


def build_model_classes(
    document: DeclarationDocument,
    *,
    base_class: type[StructuredModel] = StructuredModel,
) -> dict[str, type[StructuredModel]]:
    """Create one model class per declaration, parents before children."""
    declarations = {model.name: model for model in document.models}
    classes: dict[str, type[StructuredModel]] = {}
    for name in _resolution_order(declarations):
        declaration = declarations[name]
        parent = classes[declaration.extends] if declaration.extends else base_class
        namespace: dict[str, Any] = {
            "fields": declaration.fields,
            "__module__": base_class.__module__,
            "__qualname__": name,
            "__doc__": f"Model declared in {document.source_path.name}.",
        }
        if declaration.defaults:
            namespace["defaults"] = MappingProxyType(dict(declaration.defaults))
        model_class = type(name, (parent,), namespace)
        schema = compose_schema(model_class)
        for key in declaration.defaults:
            if key not in schema:
                raise ConfigurationError(
                    f"models.{name}.defaults.{key} does not name a declared field."
                )
        classes[name] = model_class
        logger.debug("Built model class %s extending %s", name, parent.__name__)
    return {model.name: classes[model.name] for model in document.models}


def load_model_declarations(
    declarations_path: Path | str,
    *,
    base_class: type[StructuredModel] = StructuredModel,
) -> dict[str, type[StructuredModel]]:
    """Load a declaration file and return its model classes by name."""
    document = load_declaration_document(declarations_path)
    return build_model_classes(document, base_class=base_class)


def _parse_model_section(name: Any, value: Any) -> ModelDeclaration:
    model_name = _require_identifier(name, "models")
    label = f"models.{model_name}"
    if value is None:
        value = {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Declaration section '{label}' must be a mapping.")

    extends = value.get("extends")
    if extends is not None:
        extends = _require_identifier(extends, f"{label}.extends")

    return ModelDeclaration(
        name=model_name,
        extends=extends,
        fields=_parse_field_list(value.get("fields"), f"{label}.fields"),
        defaults=_parse_defaults(value.get("defaults"), f"{label}.defaults"),
    )


def _parse_field_list(value: Any, label: str) -> tuple[FieldDeclaration, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError(f"{label} must be a list of field declarations.")
    for item in value:
        if not isinstance(item, (str, Mapping)):
            raise ConfigurationError(f"{label} entries must be names or mappings.")
    return tuple(value)


def _parse_defaults(value: Any, label: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{label} must be a mapping.")
    return dict(value)


def _resolution_order(declarations: Mapping[str, ModelDeclaration]) -> list[str]:
    ordered: list[str] = []
    resolved: set[str] = set()
    for start in declarations:
        chain: list[str] = []
        current: str | None = start
        while current is not None and current not in resolved:
            if current in chain:
                cycle = " -> ".join([*chain, current])
                raise ConfigurationError(f"Cyclic model inheritance detected: {cycle}")
            if current not in declarations:
                raise ConfigurationError(
                    f"models.{chain[-1]}.extends references unknown model '{current}'."
                )
            chain.append(current)
            current = declarations[current].extends
        for name in reversed(chain):
            resolved.add(name)
            ordered.append(name)
    return ordered


def _require_identifier(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped.isidentifier():
        raise ConfigurationError(f"{field_name} '{value}' is not a valid model name.")
    return stripped
