"""Guide Book Protocol Interface.

Authors implement this protocol to contribute a book assembled in code. The
host discovers implementations and hands them to the loader.
"""

from typing import Protocol

from guidebook.domain.models import Book


class IGuideBook(Protocol):
    """Protocol for an in-code book definition."""

    def build_book(self) -> Book | None:
        """Assemble the book.

        Returns:
            The fully populated book, or None when the definition declines
            to provide one
        """
        ...
