"""Game Registry Protocol Interface.

This module defines the protocol (interface) for the host-owned name
registries that game-object references are resolved against.
"""

from typing import Any, Protocol

from guidebook.domain.enums import RegistryKind


class IGameRegistry(Protocol):
    """Protocol defining name lookups against the host's block and item registries.

    Blocks and items live in two independent registries, so every lookup names
    the registry kind it targets. Handles are opaque host objects.
    """

    def resolve_by_name(self, kind: RegistryKind, name: str) -> Any | None:
        """Resolve a registry name to a host handle.

        Args:
            kind: Registry to search (block or item)
            name: Registry name, e.g. ``minecraft:potato``

        Returns:
            The host handle, or None when the name is not registered
        """
        ...

    def name_of(self, kind: RegistryKind, handle: Any) -> str | None:
        """Return the registry name of a handle, or None when it is unknown."""
        ...
