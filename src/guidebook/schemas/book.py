from typing import Any

from pydantic import Field

from .base import WirePayload


class BookPayload(WirePayload):
    unloc_book_title: str = Field(..., alias="unlocBookTitle", description="Title key")
    unloc_welcome_message: str = Field(
        ..., alias="unlocWelcomeMessage", description="Welcome message key"
    )
    unloc_display_name: str = Field(..., alias="unlocDisplayName", description="Item name key")
    color: Any = Field(..., description="Book color object, decoded by the color codec")
    category_list: list[Any] = Field(
        ..., alias="categoryList", description="Tagged category objects, in display order"
    )
    page_texture: str | None = Field(None, alias="pageTexture", description="Opaque image reference")
    outline_texture: str | None = Field(
        None, alias="outlineTexture", description="Opaque image reference"
    )
