"""Command line interface entry point."""

from __future__ import annotations

import importlib
import logging
import sys
from collections.abc import Mapping, Sequence
from typing import Any

import click
import yaml

from structured_model.declaration_loading import load_model_declarations
from structured_model.field_definition import ConfigurationError
from structured_model.schema_composition import EffectiveSchema, compose_schema

_PLAIN_SCALARS = (str, int, float, bool, type(None))


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="structured-model")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Inspect and validate declarative model field schemas."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="describe")
@click.option(
    "--declarations",
    "declarations_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to a YAML model declaration file",
)
@click.option(
    "--model",
    "model_name",
    required=False,
    help="Only describe this model from the declaration file",
)
@click.option(
    "--target",
    required=False,
    help="Python model class to describe, as module:ClassName",
)
def describe(declarations_path: str | None, model_name: str | None, target: str | None) -> None:
    """Print the effective field schema of one or more models as YAML."""
    if bool(declarations_path) == bool(target):
        raise CliError("Provide exactly one of --declarations or --target.")
    try:
        if target:
            schemas = [compose_schema(_import_target(target))]
        elif declarations_path:
            classes = load_model_declarations(declarations_path)
            if model_name:
                if model_name not in classes:
                    raise CliError(f"Model '{model_name}' is not declared in {declarations_path}.")
                classes = {model_name: classes[model_name]}
            schemas = [compose_schema(model_class) for model_class in classes.values()]
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(
        yaml.safe_dump([_describe_schema(schema) for schema in schemas], sort_keys=False),
        nl=False,
    )


@cli.command(name="check")
@click.option(
    "--declarations",
    "declarations_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to a YAML model declaration file",
)
def check(declarations_path: str) -> None:
    """Validate a model declaration file."""
    try:
        classes = load_model_declarations(declarations_path)
    except (ConfigurationError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"{len(classes)} model(s) declared in {declarations_path} are valid.")


def _import_target(target: str) -> type:
    module_name, _, class_name = target.partition(":")
    if not module_name or not class_name:
        raise CliError(f"Target must look like module:ClassName, got '{target}'.")
    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        raise CliError(f"Cannot import module '{module_name}': {exc}") from exc
    model_class = getattr(module, class_name, None)
    if not isinstance(model_class, type):
        raise CliError(f"'{class_name}' is not a class in module '{module_name}'.")
    return model_class


def _describe_schema(schema: EffectiveSchema) -> dict[str, Any]:
    fields = []
    for name, item in schema.items():
        entry: dict[str, Any] = {"name": name, "declared_in": schema.origin_of(name)}
        if item.has_default:
            entry["default"] = _plain(item.default)
        if item.metadata:
            entry["metadata"] = _plain(item.metadata)
        fields.append(entry)
    return {"model": schema.model_name, "fields": fields}


def _plain(value: Any) -> Any:
    if isinstance(value, _PLAIN_SCALARS):
        return value
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, Sequence):
        return [_plain(item) for item in value]
    return repr(value)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
