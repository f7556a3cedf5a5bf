"""Load books from JSON documents or from in-code definitions."""

from __future__ import annotations

import logging
from pathlib import Path

from guidebook.domain.models import Book
from guidebook.errors import BookNotFoundError, DocumentReadError, MalformedDocumentError
from guidebook.interfaces.guide_book import IGuideBook
from guidebook.serialization.codec import BookCodec

logger = logging.getLogger(__name__)


class BookLoader:
    """Produce books from disk or from code; both paths yield the same objects.

    Codec errors propagate unchanged so callers can branch on the error type.
    """

    def __init__(self, codec: BookCodec) -> None:
        self.codec = codec

    def load_from_file(self, path: Path | str) -> Book:
        """Read and decode a UTF-8 book document."""

        source = Path(path)
        try:
            text = source.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as exc:
            raise BookNotFoundError(f"book document '{source}' not found") from exc
        except UnicodeDecodeError as exc:
            raise MalformedDocumentError(f"{source}: not valid UTF-8") from exc
        except OSError as exc:
            raise DocumentReadError(f"cannot read book document '{source}': {exc}") from exc
        book = self.codec.loads(text)
        logger.debug("loaded book '%s' from %s", book.unloc_book_title, source)
        return book

    def save_to_file(self, book: Book, path: Path | str) -> Path:
        """Write ``book`` as pretty-printed JSON and return the target path."""

        target = Path(path)
        payload = self.codec.dumps(book)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(payload + "\n", encoding="utf-8")
        logger.debug("saved book '%s' to %s", book.unloc_book_title, target)
        return target

    def load_from_definition(self, definition: IGuideBook) -> Book:
        """Build a book in code, bypassing the codec."""

        book = definition.build_book()
        if book is None:
            raise MalformedDocumentError(f"{type(definition).__name__} did not build a book")
        return book
