"""Sample book assembled in code, exercising every family of built-in variants."""

from __future__ import annotations

from guidebook.domain.categories import CategoryItemStack
from guidebook.domain.entries import EntryItemStack
from guidebook.domain.enums import RegistryKind
from guidebook.domain.models import Book, Color, GameObjectRef, ResourceLocation
from guidebook.domain.pages import PageFurnaceRecipe, PageIRecipe, PageText
from guidebook.errors import UnresolvedReferenceError
from guidebook.interfaces.game_registry import IGameRegistry
from guidebook.utils.in_memory import InMemoryGameRegistry

SAMPLE_BLOCKS = ("minecraft:cobblestone",)
SAMPLE_ITEMS = ("minecraft:potato", "minecraft:banner", "minecraft:acacia_boat")


def sample_game_registry() -> InMemoryGameRegistry:
    """In-memory registry holding every object the sample book refers to."""

    return InMemoryGameRegistry(blocks=SAMPLE_BLOCKS, items=SAMPLE_ITEMS)


class SampleGuideBook:
    """In-code definition of the sample book."""

    def __init__(self, game_registry: IGameRegistry) -> None:
        self._game_registry = game_registry

    def _ref(self, kind: RegistryKind, name: str) -> GameObjectRef:
        handle = self._game_registry.resolve_by_name(kind, name)
        if handle is None:
            raise UnresolvedReferenceError(kind, name)
        return GameObjectRef(handle=handle, kind=kind)

    def build_book(self) -> Book:
        entry = EntryItemStack(
            unloc_name="test.entry.name",
            pages=[
                PageText(text="Hello, this is\nsome text"),
                PageFurnaceRecipe(input=self._ref(RegistryKind.BLOCK, "minecraft:cobblestone")),
                PageIRecipe(recipe=ResourceLocation("gi", "test1")),
            ],
            icon=self._ref(RegistryKind.ITEM, "minecraft:potato"),
        )
        category = CategoryItemStack(
            unloc_name="test.category.name",
            entries={ResourceLocation("guideapi", "entry"): entry},
            icon=self._ref(RegistryKind.ITEM, "minecraft:banner"),
        )
        return Book(
            unloc_book_title="Title message",
            unloc_welcome_message="Is this still a thing?",
            unloc_display_name="Display Name",
            categories=[category],
            color=Color(0, 0, 255),
        )
