"""Exceptions raised while loading and writing guidebook documents."""

from __future__ import annotations

from guidebook.domain.enums import RegistryKind


class GuidebookError(Exception):
    """Base class for every guidebook load/save failure."""


class BookNotFoundError(GuidebookError, FileNotFoundError):
    """Raised when a book document does not exist on disk."""


class DocumentReadError(GuidebookError, OSError):
    """Raised when a book document exists but cannot be read."""


class MalformedDocumentError(GuidebookError):
    """Raised when a document is missing a required field or has the wrong shape."""


class UnknownVariantError(GuidebookError):
    """Raised when a discriminator has no codec registered in its family."""

    def __init__(self, family: str, discriminator: str) -> None:
        super().__init__(f"unknown {family} variant '{discriminator}'")
        self.family = family
        self.discriminator = discriminator


class UnresolvedReferenceError(GuidebookError):
    """Raised when a game-object name cannot be resolved by the host registry."""

    def __init__(self, kind: RegistryKind, name: str | None) -> None:
        if name is None:
            message = f"{kind} handle has no registered name"
        else:
            message = f"no {kind} named '{name}' in the host registry"
        super().__init__(message)
        self.kind = kind
        self.name = name
