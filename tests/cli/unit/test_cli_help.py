"""CLI smoke tests."""

from click.testing import CliRunner
from structured_model.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "describe" in result.output
    assert "check" in result.output
    assert "--verbose" in result.output
