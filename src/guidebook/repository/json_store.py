"""JSON-based repository for guidebook documents."""

from __future__ import annotations

from pathlib import Path

from guidebook.domain.models import Book
from guidebook.loader import BookLoader


class JsonBookRepository:
    """Persist books as JSON documents in one directory, addressed by name."""

    def __init__(self, base_path: Path, loader: BookLoader) -> None:
        self.base_path = base_path
        self._loader = loader

    def _path_for(self, name: str) -> Path:
        if not name or name.startswith(".") or Path(name).name != name:
            raise ValueError(f"invalid book name '{name}'")
        return self.base_path / f"{name}.json"

    def save(self, name: str, book: Book) -> Path:
        """Serialize a book to disk and return the document path."""

        return self._loader.save_to_file(book, self._path_for(name))

    def load(self, name: str) -> Book:
        """Load a previously saved book."""

        return self._loader.load_from_file(self._path_for(name))

    def list_books(self) -> list[str]:
        """Return the names of all books currently persisted in the repository."""

        if not self.base_path.is_dir():
            return []
        return sorted(
            path.stem
            for path in self.base_path.glob("*.json")
            if path.is_file() and not path.name.startswith(".")
        )

    def delete(self, name: str) -> None:
        """Remove a book document if it exists."""

        path = self._path_for(name)
        if path.exists():
            path.unlink()
