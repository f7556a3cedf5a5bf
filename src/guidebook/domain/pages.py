"""Built-in page variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .models import GameObjectRef, Page, ResourceLocation


@dataclass(slots=True, kw_only=True)
class PageText(Page):
    """Page of free text (a localization key or literal text)."""

    variant_type: ClassVar[str] = "PageText"

    text: str


@dataclass(slots=True, kw_only=True)
class PageImage(Page):
    """Page showing a single image."""

    variant_type: ClassVar[str] = "PageImage"

    image: str


@dataclass(slots=True, kw_only=True)
class PageFurnaceRecipe(Page):
    """Page showing the smelting recipe whose input is ``input``."""

    variant_type: ClassVar[str] = "PageFurnaceRecipe"

    input: GameObjectRef


@dataclass(slots=True, kw_only=True)
class PageIRecipe(Page):
    """Page showing a crafting recipe registered with the host under ``recipe``."""

    variant_type: ClassVar[str] = "PageIRecipe"

    recipe: ResourceLocation
