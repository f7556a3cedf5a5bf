"""JSON codec for whole books.

Polymorphic members are written as JSON objects whose first field is the
family discriminator (``pageType``, ``entryType`` or ``categoryType``),
followed by whatever the variant codec emits. Reading looks the
discriminator up in the family registry and hands the object to that codec.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from guidebook.domain.models import Book, Category, Entry, GameObjectRef, Page, ResourceLocation
from guidebook.errors import MalformedDocumentError
from guidebook.interfaces.game_registry import IGameRegistry
from guidebook.schemas import BookPayload, validate_payload
from guidebook.schemas.base import PayloadT

from . import values
from .registry import TypeRegistry, VariantRegistries

T = TypeVar("T")


class BookCodec:
    """Serialize and deserialize books against a fixed set of registries.

    The codec only reads the registries; all registration must be complete
    before the first document is loaded.
    """

    def __init__(
        self,
        registries: VariantRegistries,
        game_registry: IGameRegistry,
        *,
        indent: int = 2,
    ) -> None:
        self.registries = registries
        self.game_registry = game_registry
        self.indent = indent

    # --- Book -------------------------------------------------------------------

    def serialize(self, book: Book) -> dict[str, Any]:
        data: dict[str, Any] = {
            "unlocBookTitle": book.unloc_book_title,
            "unlocWelcomeMessage": book.unloc_welcome_message,
            "unlocDisplayName": book.unloc_display_name,
            "color": values.encode_color(book.color),
            "categoryList": [self.serialize_category(c) for c in book.categories],
        }
        if book.page_texture is not None:
            data["pageTexture"] = book.page_texture
        if book.outline_texture is not None:
            data["outlineTexture"] = book.outline_texture
        return data

    def deserialize(self, data: Any) -> Book:
        payload = validate_payload(BookPayload, data, where="book")
        return Book(
            unloc_book_title=payload.unloc_book_title,
            unloc_welcome_message=payload.unloc_welcome_message,
            unloc_display_name=payload.unloc_display_name,
            color=values.decode_color(payload.color),
            categories=[self.deserialize_category(c) for c in payload.category_list],
            page_texture=payload.page_texture,
            outline_texture=payload.outline_texture,
        )

    def dumps(self, book: Book) -> str:
        """Pretty-printed JSON text for ``book``."""

        return json.dumps(self.serialize(book), indent=self.indent, ensure_ascii=False)

    def loads(self, text: str | bytes) -> Book:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedDocumentError(f"invalid JSON: {exc}") from exc
        except RecursionError as exc:
            raise MalformedDocumentError("invalid JSON: nested too deeply") from exc
        return self.deserialize(data)

    # --- Polymorphic members ----------------------------------------------------

    def serialize_page(self, page: Page) -> dict[str, Any]:
        return self._write_variant(self.registries.pages, page)

    def deserialize_page(self, data: Any) -> Page:
        return self._read_variant(self.registries.pages, data)

    def serialize_entry(self, entry: Entry) -> dict[str, Any]:
        return self._write_variant(self.registries.entries, entry)

    def deserialize_entry(self, data: Any) -> Entry:
        return self._read_variant(self.registries.entries, data)

    def serialize_category(self, category: Category) -> dict[str, Any]:
        return self._write_variant(self.registries.categories, category)

    def deserialize_category(self, data: Any) -> Category:
        return self._read_variant(self.registries.categories, data)

    def serialize_pages(self, pages: Iterable[Page]) -> list[dict[str, Any]]:
        return [self.serialize_page(page) for page in pages]

    def deserialize_pages(self, items: Iterable[Any]) -> list[Page]:
        return [self.deserialize_page(item) for item in items]

    def serialize_entries(self, entries: Mapping[ResourceLocation, Entry]) -> dict[str, Any]:
        """Write an entry mapping as a JSON object keyed by ``namespace:path``."""

        return {str(key): self.serialize_entry(entry) for key, entry in entries.items()}

    def deserialize_entries(self, raw: Mapping[str, Any]) -> dict[ResourceLocation, Entry]:
        entries: dict[ResourceLocation, Entry] = {}
        for key, item in raw.items():
            location = self.parse_location(key)
            if location in entries:
                raise MalformedDocumentError(f"duplicate entry identifier '{location}'")
            entries[location] = self.deserialize_entry(item)
        return entries

    def _write_variant(self, registry: TypeRegistry[T], obj: T) -> dict[str, Any]:
        discriminator = type(obj).variant_type
        variant_codec = registry.lookup(discriminator)
        fields = variant_codec.serialize(obj, self)
        return {registry.family.discriminator_field: discriminator, **fields}

    def _read_variant(self, registry: TypeRegistry[T], data: Any) -> T:
        field_name = registry.family.discriminator_field
        if not isinstance(data, Mapping):
            raise MalformedDocumentError(
                f"{registry.family}: expected a JSON object, got {type(data).__name__}"
            )
        discriminator = data.get(field_name)
        if not isinstance(discriminator, str):
            raise MalformedDocumentError(f"{registry.family} object has no '{field_name}' string")
        return registry.lookup(discriminator).deserialize(data, self)

    # --- Helpers for variant codecs ---------------------------------------------

    def encode_game_object(self, ref: GameObjectRef) -> dict[str, Any]:
        return values.encode_game_object(ref, self.game_registry)

    def decode_game_object(self, data: Any) -> GameObjectRef:
        return values.decode_game_object(data, self.game_registry)

    @staticmethod
    def validate(model: type[PayloadT], data: Any, *, where: str) -> PayloadT:
        return validate_payload(model, data, where=where)

    @staticmethod
    def parse_location(text: str) -> ResourceLocation:
        try:
            return ResourceLocation.parse(text)
        except ValueError as exc:
            raise MalformedDocumentError(f"invalid resource location '{text}': {exc}") from exc
