"""Guidebook content framework.

Books are trees of categories, entries and pages. Pages, entries and
categories are open families: each concrete variant registers a codec under
its discriminator, and :class:`~guidebook.serialization.BookCodec` uses those
registries to read and write whole books as JSON.
"""

from guidebook.domain.models import Book, Category, Color, Entry, GameObjectRef, Page
from guidebook.loader import BookLoader
from guidebook.serialization import BookCodec, TypeRegistry, VariantRegistries

__version__ = "0.1.0"

__all__ = [
    "Book",
    "BookCodec",
    "BookLoader",
    "Category",
    "Color",
    "Entry",
    "GameObjectRef",
    "Page",
    "TypeRegistry",
    "VariantRegistries",
]
