"""Enumerations shared by the guidebook domain."""

from __future__ import annotations

from enum import StrEnum


class RegistryKind(StrEnum):
    """Host name registry a game object lives in."""

    BLOCK = "block"
    ITEM = "item"


class VariantFamily(StrEnum):
    """Open polymorphic families handled by the type registries."""

    PAGE = "page"
    ENTRY = "entry"
    CATEGORY = "category"

    @property
    def discriminator_field(self) -> str:
        """JSON field carrying the variant tag for this family."""

        return f"{self.value}Type"
