"""Declaration loading exports."""

from .declaration_loader import (
    build_model_classes,
    load_declaration_document,
    load_model_declarations,
)
from .declaration_models import DeclarationDocument, ModelDeclaration

__all__ = [
    "DeclarationDocument",
    "ModelDeclaration",
    "build_model_classes",
    "load_declaration_document",
    "load_model_declarations",
]
