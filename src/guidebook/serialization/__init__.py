"""Polymorphic JSON serialization of guidebooks.

* :class:`TypeRegistry` / :class:`VariantRegistries`: discriminator → codec
  tables, one per family.
* :mod:`values`: fixed codecs for colors and game-object references.
* :class:`BookCodec`: the document codec tying both together.
"""

from .codec import BookCodec
from .registry import TypeRegistry, VariantRegistries

__all__ = [
    "BookCodec",
    "TypeRegistry",
    "VariantRegistries",
]
