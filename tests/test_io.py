from pathlib import Path

import pytest

from script_glossary.io import create_run_paths, read_script_text


def test_create_run_paths_creates_expected_structure(tmp_path: Path) -> None:
    paths = create_run_paths(tmp_path, run_id="demo_run")
    assert paths.root == tmp_path / "demo_run"
    assert paths.output_request_dir.exists()
    assert paths.output_report_dir.exists()

    with pytest.raises(FileExistsError):
        create_run_paths(tmp_path, run_id="demo_run")


def test_read_script_text_strips_bom(tmp_path: Path) -> None:
    script = tmp_path / "script.txt"
    script.write_text("\ufeffHello there.\n", encoding="utf-8")

    assert read_script_text(script) == "Hello there.\n"


def test_read_script_text_rejects_missing_and_non_text_files(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Script file not found"):
        read_script_text(tmp_path / "missing.txt")

    notes = tmp_path / "notes.md"
    notes.write_text("# notes", encoding="utf-8")
    with pytest.raises(ValueError, match=".txt"):
        read_script_text(notes)
