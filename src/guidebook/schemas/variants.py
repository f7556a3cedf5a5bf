from typing import Any

from pydantic import Field

from .base import WirePayload


class PageTextPayload(WirePayload):
    text: str = Field(..., description="Text or localization key")


class PageImagePayload(WirePayload):
    image: str = Field(..., min_length=1, description="Image reference")


class PageFurnaceRecipePayload(WirePayload):
    input: Any = Field(..., description="Game object reference for the smelted input")


class PageIRecipePayload(WirePayload):
    recipe: str = Field(..., min_length=1, description="Registered recipe identifier")


class EntryPayload(WirePayload):
    unloc_entry_name: str = Field(..., alias="unlocEntryName", description="Entry name key")
    page_list: list[Any] = Field(..., alias="pageList", description="Tagged page objects")


class EntryItemStackPayload(EntryPayload):
    icon: Any = Field(..., description="Game object reference used as icon")


class CategoryPayload(WirePayload):
    unloc_category_name: str = Field(
        ..., alias="unlocCategoryName", description="Category name key"
    )
    entries: dict[str, Any] = Field(
        ..., description="Tagged entry objects keyed by resource location"
    )


class CategoryItemStackPayload(CategoryPayload):
    icon: Any = Field(..., description="Game object reference used as icon")


class CategoryResourceLocationPayload(CategoryPayload):
    icon: str = Field(..., min_length=1, description="Image reference used as icon")
