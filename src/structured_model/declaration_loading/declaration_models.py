"""Declaration file entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from structured_model.field_definition import FieldDeclaration


@dataclass(frozen=True)
class ModelDeclaration:
    """One model entry of a declaration file."""

    name: str
    extends: str | None
    fields: tuple[FieldDeclaration, ...]
    defaults: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeclarationDocument:
    """Parsed declaration file, with models in file order."""

    source_path: Path
    models: tuple[ModelDeclaration, ...]
