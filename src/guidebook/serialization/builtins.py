"""Codecs for the page, entry and category variants shipped with the framework."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from guidebook.domain.categories import CategoryItemStack, CategoryResourceLocation
from guidebook.domain.entries import EntryItemStack
from guidebook.domain.models import Entry
from guidebook.domain.pages import PageFurnaceRecipe, PageImage, PageIRecipe, PageText
from guidebook.schemas import (
    CategoryItemStackPayload,
    CategoryResourceLocationPayload,
    EntryItemStackPayload,
    EntryPayload,
    PageFurnaceRecipePayload,
    PageImagePayload,
    PageIRecipePayload,
    PageTextPayload,
)

if TYPE_CHECKING:
    from .codec import BookCodec
    from .registry import VariantRegistries


# --- Pages ----------------------------------------------------------------------


class PageTextCodec:
    def serialize(self, page: PageText, codec: BookCodec) -> dict[str, Any]:
        return {"text": page.text}

    def deserialize(self, data: Mapping[str, Any], codec: BookCodec) -> PageText:
        payload = codec.validate(PageTextPayload, data, where=PageText.variant_type)
        return PageText(text=payload.text)


class PageImageCodec:
    def serialize(self, page: PageImage, codec: BookCodec) -> dict[str, Any]:
        return {"image": page.image}

    def deserialize(self, data: Mapping[str, Any], codec: BookCodec) -> PageImage:
        payload = codec.validate(PageImagePayload, data, where=PageImage.variant_type)
        return PageImage(image=payload.image)


class PageFurnaceRecipeCodec:
    def serialize(self, page: PageFurnaceRecipe, codec: BookCodec) -> dict[str, Any]:
        return {"input": codec.encode_game_object(page.input)}

    def deserialize(self, data: Mapping[str, Any], codec: BookCodec) -> PageFurnaceRecipe:
        payload = codec.validate(
            PageFurnaceRecipePayload, data, where=PageFurnaceRecipe.variant_type
        )
        return PageFurnaceRecipe(input=codec.decode_game_object(payload.input))


class PageIRecipeCodec:
    def serialize(self, page: PageIRecipe, codec: BookCodec) -> dict[str, Any]:
        return {"recipe": str(page.recipe)}

    def deserialize(self, data: Mapping[str, Any], codec: BookCodec) -> PageIRecipe:
        payload = codec.validate(PageIRecipePayload, data, where=PageIRecipe.variant_type)
        return PageIRecipe(recipe=codec.parse_location(payload.recipe))


# --- Entries --------------------------------------------------------------------


class EntryCodec:
    """Plain entry: a name key and an ordered page list."""

    def serialize(self, entry: Entry, codec: BookCodec) -> dict[str, Any]:
        return {
            "unlocEntryName": entry.unloc_name,
            "pageList": codec.serialize_pages(entry.pages),
        }

    def deserialize(self, data: Mapping[str, Any], codec: BookCodec) -> Entry:
        payload = codec.validate(EntryPayload, data, where=Entry.variant_type)
        return Entry(
            unloc_name=payload.unloc_entry_name,
            pages=codec.deserialize_pages(payload.page_list),
        )


class EntryItemStackCodec(EntryCodec):
    def serialize(self, entry: EntryItemStack, codec: BookCodec) -> dict[str, Any]:
        data = super().serialize(entry, codec)
        data["icon"] = codec.encode_game_object(entry.icon)
        return data

    def deserialize(self, data: Mapping[str, Any], codec: BookCodec) -> EntryItemStack:
        payload = codec.validate(EntryItemStackPayload, data, where=EntryItemStack.variant_type)
        return EntryItemStack(
            unloc_name=payload.unloc_entry_name,
            pages=codec.deserialize_pages(payload.page_list),
            icon=codec.decode_game_object(payload.icon),
        )


# --- Categories -----------------------------------------------------------------


class CategoryItemStackCodec:
    def serialize(self, category: CategoryItemStack, codec: BookCodec) -> dict[str, Any]:
        return {
            "unlocCategoryName": category.unloc_name,
            "entries": codec.serialize_entries(category.entries),
            "icon": codec.encode_game_object(category.icon),
        }

    def deserialize(self, data: Mapping[str, Any], codec: BookCodec) -> CategoryItemStack:
        payload = codec.validate(
            CategoryItemStackPayload, data, where=CategoryItemStack.variant_type
        )
        return CategoryItemStack(
            unloc_name=payload.unloc_category_name,
            entries=codec.deserialize_entries(payload.entries),
            icon=codec.decode_game_object(payload.icon),
        )


class CategoryResourceLocationCodec:
    def serialize(self, category: CategoryResourceLocation, codec: BookCodec) -> dict[str, Any]:
        return {
            "unlocCategoryName": category.unloc_name,
            "entries": codec.serialize_entries(category.entries),
            "icon": category.icon,
        }

    def deserialize(
        self, data: Mapping[str, Any], codec: BookCodec
    ) -> CategoryResourceLocation:
        payload = codec.validate(
            CategoryResourceLocationPayload, data, where=CategoryResourceLocation.variant_type
        )
        return CategoryResourceLocation(
            unloc_name=payload.unloc_category_name,
            entries=codec.deserialize_entries(payload.entries),
            icon=payload.icon,
        )


def register_builtin_variants(registries: VariantRegistries) -> None:
    """Register every built-in variant; run before any author-contributed variant."""

    registries.pages.register(PageText.variant_type, PageTextCodec())
    registries.pages.register(PageImage.variant_type, PageImageCodec())
    registries.pages.register(PageFurnaceRecipe.variant_type, PageFurnaceRecipeCodec())
    registries.pages.register(PageIRecipe.variant_type, PageIRecipeCodec())

    registries.entries.register(Entry.variant_type, EntryCodec())
    registries.entries.register(EntryItemStack.variant_type, EntryItemStackCodec())

    registries.categories.register(CategoryItemStack.variant_type, CategoryItemStackCodec())
    registries.categories.register(
        CategoryResourceLocation.variant_type, CategoryResourceLocationCodec()
    )
