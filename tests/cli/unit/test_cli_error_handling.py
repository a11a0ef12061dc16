"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from openapi_specfmt.cli import main


def test_missing_input_argument_returns_clean_click_error(capsys) -> None:
    exit_code = main(["format"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing argument" in captured.err
    assert "INPUT" in captured.err
    assert "Traceback" not in captured.err


def test_nonexistent_input_returns_clean_click_error(tmp_path: Path, capsys) -> None:
    exit_code = main(["format", str(tmp_path / "missing.yml")])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "does not exist" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(tmp_path: Path, capsys) -> None:
    spec_path = tmp_path / "openapi.yml"
    spec_path.write_text("paths: {}\n", encoding="utf-8")

    exit_code = main(["format", str(spec_path), "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_structure_failure_returns_exit_code_one(tmp_path: Path, capsys) -> None:
    spec_path = tmp_path / "openapi.yml"
    spec_path.write_text("openapi: 3.0.0\n", encoding="utf-8")

    exit_code = main(["format", str(spec_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Error: Missing or invalid 'paths' section." in captured.err
    assert "Traceback" not in captured.err
    assert spec_path.read_text(encoding="utf-8") == "openapi: 3.0.0\n"


def test_decode_failure_returns_exit_code_one(tmp_path: Path, capsys) -> None:
    spec_path = tmp_path / "openapi.yml"
    spec_path.write_text("paths: [unclosed\n", encoding="utf-8")

    exit_code = main(["format", str(spec_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to decode YAML" in captured.err
