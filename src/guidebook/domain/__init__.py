"""Domain model for guidebooks.

* Dataclasses for the book tree and its value types (see :mod:`models`).
* Built-in page, entry and category variants.
* Enumerations shared across the package.
"""

from . import categories, entries, enums, models, pages

__all__ = [
    "categories",
    "entries",
    "enums",
    "models",
    "pages",
]
