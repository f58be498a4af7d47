"""Field declaration tests."""

from __future__ import annotations

import dataclasses

import pytest
from structured_model.field_definition import NO_DEFAULT, ConfigurationError, Field


def test_bare_name_declaration_normalizes_to_field() -> None:
    field = Field.from_declaration("field1")

    assert field.name == "field1"
    assert field.default is NO_DEFAULT
    assert field.has_default is False
    assert dict(field.metadata) == {}


def test_mapping_declaration_keeps_default_and_metadata() -> None:
    validator = str.isdigit
    field = Field.from_declaration(
        {"name": "zip_code", "default": "00000", "label": "ZIP", "validator": validator}
    )

    assert field.name == "zip_code"
    assert field.default == "00000"
    assert field.has_default is True
    assert field.metadata["label"] == "ZIP"
    assert field.metadata["validator"] is validator
    assert "name" not in field.metadata
    assert "default" not in field.metadata


@pytest.mark.parametrize("default_key", ["default_value", "defaultValue"])
def test_default_key_synonyms_set_the_default(default_key: str) -> None:
    field = Field.from_declaration({"name": "field1", default_key: "value1", "label": "L"})

    assert field.default == "value1"
    assert default_key not in field.metadata
    assert dict(field.metadata) == {"label": "L"}


def test_none_is_a_legitimate_default() -> None:
    field = Field.from_declaration({"name": "parent", "default": None})

    assert field.has_default is True
    assert field.default is None


def test_existing_field_passes_through() -> None:
    field = Field(name="field1", default=1)

    assert Field.from_declaration(field) is field


@pytest.mark.parametrize("declaration", [{"default": "value"}, {"name": None}, {"name": ""}, ""])
def test_missing_name_fails_with_configuration_error(declaration: object) -> None:
    with pytest.raises(ConfigurationError, match="no 'name' property provided to Field"):
        Field.from_declaration(declaration)  # type: ignore[arg-type]


def test_non_string_name_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="must be a string"):
        Field.from_declaration({"name": 42})


def test_unsupported_declaration_type_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="got int"):
        Field.from_declaration(42)  # type: ignore[arg-type]


def test_field_is_immutable_and_metadata_read_only() -> None:
    source = {"name": "field1", "label": "Field 1"}
    field = Field.from_declaration(source)
    source["label"] = "changed"

    assert field.metadata["label"] == "Field 1"
    with pytest.raises(dataclasses.FrozenInstanceError):
        field.name = "other"  # type: ignore[misc]
    with pytest.raises(TypeError):
        field.metadata["label"] = "other"  # type: ignore[index]
