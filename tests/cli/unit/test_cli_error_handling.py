"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from structured_model.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["check"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--declarations" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["describe", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err


def test_describe_requires_exactly_one_source(capsys) -> None:
    exit_code = main(["describe"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Provide exactly one of --declarations or --target." in captured.err


def test_missing_declaration_file_is_reported_without_traceback(capsys, tmp_path: Path) -> None:
    exit_code = main(["check", "--declarations", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Declaration file not found" in captured.err
    assert "Traceback" not in captured.err


def test_malformed_target_is_reported(capsys) -> None:
    exit_code = main(["describe", "--target", "no_colon_here"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Target must look like module:ClassName" in captured.err


def test_unimportable_target_module_is_reported(capsys) -> None:
    exit_code = main(["describe", "--target", "structured_model_missing_module:Model"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Cannot import module 'structured_model_missing_module'" in captured.err


def test_check_rejects_defaults_for_undeclared_fields(capsys, tmp_path: Path) -> None:
    declarations_path = tmp_path / "models.yaml"
    declarations_path.write_text(
        "models:\n  M:\n    fields: [a]\n    defaults:\n      b: 1\n", encoding="utf-8"
    )

    exit_code = main(["check", "--declarations", str(declarations_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "models.M.defaults.b does not name a declared field." in captured.err
    assert captured.out == ""


def test_non_utf8_declaration_file_is_reported_without_traceback(
    capsys, tmp_path: Path
) -> None:
    declarations_path = tmp_path / "models.yaml"
    declarations_path.write_bytes(b"models:\n  M:\n    fields: [\xff]\n")

    exit_code = main(["check", "--declarations", str(declarations_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to read declaration file" in captured.err
    assert "Traceback" not in captured.err


def test_target_module_failing_on_import_is_reported(
    capsys, tmp_path: Path, monkeypatch
) -> None:
    (tmp_path / "cli_broken_models.py").write_text("class Broken(:\n", encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))

    exit_code = main(["describe", "--target", "cli_broken_models:Broken"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Cannot import module 'cli_broken_models'" in captured.err
    assert "Traceback" not in captured.err
