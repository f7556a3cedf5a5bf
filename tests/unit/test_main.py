"""Tests for the guidebook command line tools."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from guidebook.config import get_settings
from guidebook.main import main
from guidebook.sample import SAMPLE_BLOCKS, SAMPLE_ITEMS


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("GUIDEBOOK_BOOKS_DIR", str(tmp_path / "books"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def catalog(tmp_path: Path) -> Path:
    path = tmp_path / "objects.json"
    path.write_text(
        json.dumps({"blocks": list(SAMPLE_BLOCKS), "items": list(SAMPLE_ITEMS)}),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_path(tmp_path: Path) -> Path:
    path = tmp_path / "sample.json"
    assert main(["sample", str(path)]) == 0
    return path


def test_sample_writes_document(sample_path: Path):
    data = json.loads(sample_path.read_text(encoding="utf-8"))
    assert data["unlocBookTitle"] == "Title message"
    assert data["categoryList"][0]["categoryType"] == "CategoryItemStack"


def test_validate_with_catalog(sample_path: Path, catalog: Path, capsys):
    assert main(["--objects", str(catalog), "validate", str(sample_path)]) == 0
    assert f"{sample_path}: ok" in capsys.readouterr().out


def test_validate_reports_unresolved_objects(sample_path: Path, tmp_path: Path, capsys):
    missing = tmp_path / "missing.json"

    assert main(["validate", str(sample_path), str(missing)]) == 1

    out = capsys.readouterr().out
    assert "UnresolvedReferenceError" in out
    assert f"{missing}: BookNotFoundError" in out


def test_format_rewrites_document(sample_path: Path, catalog: Path, tmp_path: Path):
    compact = tmp_path / "compact.json"
    compact.write_text(
        json.dumps(json.loads(sample_path.read_text(encoding="utf-8"))), encoding="utf-8"
    )
    output = tmp_path / "formatted.json"

    assert main(["--objects", str(catalog), "format", str(compact), "--output", str(output)]) == 0
    assert output.read_text(encoding="utf-8") == sample_path.read_text(encoding="utf-8")


def test_list_books(tmp_path: Path, capsys):
    books = tmp_path / "books"
    books.mkdir()
    (books / "guide.json").write_text("{}", encoding="utf-8")

    assert main(["list"]) == 0
    assert capsys.readouterr().out.splitlines() == ["guide"]


def test_missing_catalog_is_usage_error(tmp_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--objects", str(tmp_path / "nope.json"), "list"])
    assert excinfo.value.code == 2


def test_validate_reports_directory_and_continues(
    sample_path: Path, catalog: Path, tmp_path: Path, capsys
):
    folder = tmp_path / "folder"
    folder.mkdir()

    assert main(["--objects", str(catalog), "validate", str(folder), str(sample_path)]) == 1

    out = capsys.readouterr().out
    assert f"{folder}: BookNotFoundError" in out
    assert f"{sample_path}: ok" in out


def test_sample_rejects_objects_catalog(catalog: Path, tmp_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--objects", str(catalog), "sample", str(tmp_path / "sample.json")])
    assert excinfo.value.code == 2
    assert not (tmp_path / "sample.json").exists()


def test_unknown_log_level_is_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", "bogus", "list"])
    assert excinfo.value.code == 2


def test_log_level_is_case_insensitive():
    assert main(["--log-level", "debug", "list"]) == 0


def test_invalid_log_level_setting_is_usage_error(monkeypatch):
    monkeypatch.setenv("GUIDEBOOK_LOG_LEVEL", "bogus")
    with pytest.raises(SystemExit) as excinfo:
        main(["list"])
    assert excinfo.value.code == 2


def test_list_does_not_create_books_dir(tmp_path: Path, capsys):
    assert main(["list"]) == 0
    assert capsys.readouterr().out == ""
    assert not (tmp_path / "books").exists()
