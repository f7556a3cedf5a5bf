"""Dataclasses describing a guidebook and the values it carries.

A book is a tree: it owns an ordered list of categories, each category owns
a mapping of entries keyed by resource location, and each entry owns an
ordered list of pages. Pages, entries and categories are open families; the
concrete variants live in :mod:`guidebook.domain.pages`,
:mod:`guidebook.domain.entries` and :mod:`guidebook.domain.categories`, and
every variant declares the discriminator it is written with.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from .enums import RegistryKind

if TYPE_CHECKING:
    from guidebook.interfaces.localization import ITranslator

DEFAULT_NAMESPACE = "minecraft"


# --- Value types ----------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ResourceLocation:
    """Namespaced identifier such as ``guideapi:entry``."""

    namespace: str
    path: str

    def __post_init__(self) -> None:
        if not self.namespace or not self.path:
            raise ValueError("resource location needs a namespace and a path")
        if ":" in self.namespace:
            raise ValueError(f"invalid namespace '{self.namespace}'")

    @classmethod
    def parse(cls, text: str) -> ResourceLocation:
        """Parse ``namespace:path``; a bare path lands in the default namespace."""

        namespace, sep, path = text.partition(":")
        if not sep:
            return cls(DEFAULT_NAMESPACE, namespace)
        return cls(namespace, path)

    def __str__(self) -> str:
        return f"{self.namespace}:{self.path}"


@dataclass(frozen=True, slots=True)
class Color:
    """RGBA color with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for channel in ("red", "green", "blue", "alpha"):
            value = getattr(self, channel)
            if not 0 <= value <= 255:
                raise ValueError(f"{channel} channel must be within 0..255, got {value}")


DEFAULT_BOOK_COLOR = Color(171, 70, 30)


@dataclass(frozen=True, slots=True)
class GameObjectRef:
    """Reference to a host block or item plus its metadata sub-variant.

    ``handle`` is whatever object the host registry hands out; the codec only
    ever passes it back to the registry to recover its name.
    """

    handle: Any
    kind: RegistryKind = RegistryKind.ITEM
    metadata: int = 0

    @property
    def is_block(self) -> bool:
        return self.kind is RegistryKind.BLOCK


# --- Polymorphic families -------------------------------------------------------


@dataclass(slots=True, kw_only=True)
class Page:
    """Base class of every page variant."""

    variant_type: ClassVar[str] = ""


@dataclass(slots=True, kw_only=True)
class Entry:
    """Base entry: a named, ordered list of pages.

    Also usable directly as the plain ``Entry`` variant.
    """

    variant_type: ClassVar[str] = "Entry"

    unloc_name: str
    pages: list[Page] = field(default_factory=list)

    def add_page(self, page: Page) -> None:
        self.pages.append(page)

    def remove_page(self, page: Page) -> None:
        if page in self.pages:
            self.pages.remove(page)

    def localized_name(self, translator: ITranslator) -> str:
        return translator.translate(self.unloc_name)


@dataclass(slots=True, kw_only=True)
class Category:
    """Base class of every category variant."""

    variant_type: ClassVar[str] = ""

    unloc_name: str
    entries: dict[ResourceLocation, Entry] = field(default_factory=dict)

    def add_entry(self, key: ResourceLocation, entry: Entry) -> None:
        self.entries[key] = entry

    def remove_entry(self, key: ResourceLocation) -> None:
        self.entries.pop(key, None)

    def localized_name(self, translator: ITranslator) -> str:
        return translator.translate(self.unloc_name)


# --- Aggregate root -------------------------------------------------------------


@dataclass(slots=True, kw_only=True)
class Book:
    """Root aggregate owning the ordered category list."""

    unloc_book_title: str
    unloc_welcome_message: str
    unloc_display_name: str
    categories: list[Category] = field(default_factory=list)
    color: Color = DEFAULT_BOOK_COLOR
    page_texture: str | None = None
    outline_texture: str | None = None

    def add_category(self, category: Category) -> None:
        self.categories.append(category)

    def remove_category(self, category: Category) -> None:
        if category in self.categories:
            self.categories.remove(category)

    def add_categories(self, categories: list[Category]) -> None:
        self.categories.extend(categories)

    def remove_categories(self, categories: list[Category]) -> None:
        self.categories = [c for c in self.categories if c not in categories]

    def localized_title(self, translator: ITranslator) -> str:
        return translator.translate(self.unloc_book_title)

    def localized_welcome_message(self, translator: ITranslator) -> str:
        return translator.translate(self.unloc_welcome_message)

    def localized_display_name(self, translator: ITranslator) -> str:
        return translator.translate(self.unloc_display_name)
