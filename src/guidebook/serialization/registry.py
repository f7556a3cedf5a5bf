"""Discriminator registries for the open page, entry and category families."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from guidebook.domain.enums import VariantFamily
from guidebook.domain.models import Category, Entry, Page
from guidebook.errors import UnknownVariantError
from guidebook.interfaces.variant_codec import IVariantCodec

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TypeRegistry(Generic[T]):
    """Map discriminators of one family to the codec that reads and writes them.

    Registration happens once at startup; afterwards the registry is only
    read. The first codec registered for a discriminator stays authoritative.
    """

    def __init__(self, family: VariantFamily) -> None:
        self.family = family
        self._codecs: dict[str, IVariantCodec[T]] = {}

    def register(self, discriminator: str, codec: IVariantCodec[T]) -> bool:
        """Register ``codec`` under ``discriminator``.

        Returns ``False`` (after logging a warning) when the discriminator is
        already taken; the existing codec is kept.
        """

        if not isinstance(discriminator, str) or not discriminator:
            raise ValueError(f"{self.family} discriminator must be a non-empty string")
        existing = self._codecs.get(discriminator)
        if existing is not None:
            logger.warning(
                "duplicate %s variant '%s' ignored; keeping %s",
                self.family,
                discriminator,
                type(existing).__name__,
            )
            return False
        self._codecs[discriminator] = codec
        logger.debug("registered %s variant '%s'", self.family, discriminator)
        return True

    def lookup(self, discriminator: str) -> IVariantCodec[T]:
        """Return the codec for ``discriminator`` or raise ``UnknownVariantError``."""

        try:
            return self._codecs[discriminator]
        except KeyError:
            raise UnknownVariantError(str(self.family), discriminator) from None

    def discriminators(self) -> list[str]:
        """Registered discriminators in registration order."""

        return list(self._codecs)

    def __contains__(self, discriminator: object) -> bool:
        return discriminator in self._codecs

    def __len__(self) -> int:
        return len(self._codecs)


@dataclass(slots=True)
class VariantRegistries:
    """One independent registry per polymorphic family."""

    pages: TypeRegistry[Page] = field(default_factory=lambda: TypeRegistry(VariantFamily.PAGE))
    entries: TypeRegistry[Entry] = field(
        default_factory=lambda: TypeRegistry(VariantFamily.ENTRY)
    )
    categories: TypeRegistry[Category] = field(
        default_factory=lambda: TypeRegistry(VariantFamily.CATEGORY)
    )

    @classmethod
    def with_builtins(cls) -> VariantRegistries:
        """Return fresh registries pre-populated with the built-in variants."""

        from guidebook.serialization.builtins import register_builtin_variants

        registries = cls()
        register_builtin_variants(registries)
        return registries
