"""Tests for loading books from files and in-code definitions."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from guidebook.domain.models import Book, ResourceLocation
from guidebook.domain.pages import PageText
from guidebook.errors import (
    BookNotFoundError,
    DocumentReadError,
    MalformedDocumentError,
    UnknownVariantError,
)
from guidebook.sample import SampleGuideBook


class _NoBook:
    def build_book(self) -> Book | None:
        return None


def test_missing_file_is_not_found(loader, tmp_path: Path):
    with pytest.raises(BookNotFoundError) as excinfo:
        loader.load_from_file(tmp_path / "missing.json")
    assert isinstance(excinfo.value, FileNotFoundError)


def test_in_code_book_survives_save_and_reload(loader, game_registry, tmp_path: Path):
    book = loader.load_from_definition(SampleGuideBook(game_registry))

    path = loader.save_to_file(book, tmp_path / "nested" / "sample.json")

    assert path.exists()
    assert loader.load_from_file(path) == book


def test_saved_document_is_pretty_utf8(loader, game_registry, tmp_path: Path):
    book = SampleGuideBook(game_registry).build_book()
    entry = book.categories[0].entries[ResourceLocation("guideapi", "entry")]
    entry.add_page(PageText(text="Überblick"))

    path = loader.save_to_file(book, tmp_path / "book.json")
    text = path.read_text(encoding="utf-8")

    assert "Überblick" in text
    assert text.endswith("}\n")
    assert '\n  "unlocWelcomeMessage": "Is this still a thing?"' in text
    assert loader.load_from_file(path) == book


def test_codec_errors_propagate_unchanged(loader, tmp_path: Path):
    path = tmp_path / "book.json"
    path.write_text(json.dumps({"unlocBookTitle": "t"}), encoding="utf-8")
    with pytest.raises(MalformedDocumentError):
        loader.load_from_file(path)

    path.write_text(
        json.dumps(
            {
                "unlocBookTitle": "t",
                "unlocWelcomeMessage": "w",
                "unlocDisplayName": "d",
                "color": {"red": 0, "green": 0, "blue": 0, "alpha": 0},
                "categoryList": [{"categoryType": "CategoryUnknown"}],
            }
        ),
        encoding="utf-8",
    )
    with pytest.raises(UnknownVariantError) as excinfo:
        loader.load_from_file(path)
    assert excinfo.value.family == "category"


def test_invalid_utf8_is_malformed(loader, tmp_path: Path):
    path = tmp_path / "book.json"
    path.write_bytes(b"\xff\xfe{}")
    with pytest.raises(MalformedDocumentError, match="UTF-8"):
        loader.load_from_file(path)


def test_definition_without_book(loader):
    with pytest.raises(MalformedDocumentError, match="_NoBook"):
        loader.load_from_definition(_NoBook())


def test_directory_is_not_a_book(loader, tmp_path: Path):
    with pytest.raises(BookNotFoundError):
        loader.load_from_file(tmp_path)


def test_file_used_as_parent_is_not_found(loader, tmp_path: Path):
    parent = tmp_path / "book.json"
    parent.write_text("{}", encoding="utf-8")
    with pytest.raises(BookNotFoundError):
        loader.load_from_file(parent / "child.json")


def test_unreadable_file_is_a_read_error(loader, tmp_path: Path, monkeypatch):
    path = tmp_path / "locked.json"
    path.write_text("{}", encoding="utf-8")

    def _denied(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_text", _denied)
    with pytest.raises(DocumentReadError, match="locked.json") as excinfo:
        loader.load_from_file(path)
    assert isinstance(excinfo.value, OSError)
