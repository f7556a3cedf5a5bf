"""Variant Codec Protocol Interface.

Every concrete page, entry and category variant contributes one codec,
registered under the variant's discriminator at startup.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from guidebook.serialization.codec import BookCodec

T = TypeVar("T")


class IVariantCodec(Protocol[T]):
    """Protocol for reading and writing one variant of a polymorphic family.

    The discriminator field is handled by the book codec; implementations only
    produce and consume the variant's own fields. Nested members (pages,
    entries, game objects) go back through the book codec passed in.
    """

    def serialize(self, obj: T, codec: BookCodec) -> dict[str, Any]:
        """Return the variant's fields as a JSON-ready dict."""
        ...

    def deserialize(self, data: Mapping[str, Any], codec: BookCodec) -> T:
        """Build the variant from a JSON object that still carries its discriminator."""
        ...
