"""Dict-backed host collaborators for tests, tooling and the CLI."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from guidebook.domain.enums import RegistryKind
from guidebook.domain.models import GameObjectRef
from guidebook.errors import UnresolvedReferenceError


@dataclass(frozen=True, slots=True)
class GameObject:
    """Handle handed out by :class:`InMemoryGameRegistry`."""

    name: str
    kind: RegistryKind


class InMemoryGameRegistry:
    """Two independent name → handle tables, one for blocks and one for items."""

    def __init__(self, *, blocks: Iterable[str] = (), items: Iterable[str] = ()) -> None:
        self._objects: dict[RegistryKind, dict[str, Any]] = {kind: {} for kind in RegistryKind}
        for name in blocks:
            self.register(RegistryKind.BLOCK, name)
        for name in items:
            self.register(RegistryKind.ITEM, name)

    def register(self, kind: RegistryKind, name: str, handle: Any | None = None) -> Any:
        """Add ``name`` to the ``kind`` table and return its handle."""

        if handle is None:
            handle = GameObject(name, kind)
        self._objects[kind][name] = handle
        return handle

    def resolve_by_name(self, kind: RegistryKind, name: str) -> Any | None:
        return self._objects[kind].get(name)

    def name_of(self, kind: RegistryKind, handle: Any) -> str | None:
        for name, candidate in self._objects[kind].items():
            if candidate is handle or candidate == handle:
                return name
        return None

    def ref(self, kind: RegistryKind, name: str, metadata: int = 0) -> GameObjectRef:
        """Build a reference to a registered object for in-code book construction."""

        handle = self.resolve_by_name(kind, name)
        if handle is None:
            raise UnresolvedReferenceError(kind, name)
        return GameObjectRef(handle=handle, kind=kind, metadata=metadata)

    def item(self, name: str, metadata: int = 0) -> GameObjectRef:
        return self.ref(RegistryKind.ITEM, name, metadata)

    def block(self, name: str, metadata: int = 0) -> GameObjectRef:
        return self.ref(RegistryKind.BLOCK, name, metadata)


class DictTranslator:
    """Translator backed by a mapping; unknown keys translate to themselves."""

    def __init__(self, translations: Mapping[str, str] | None = None) -> None:
        self._translations = dict(translations or {})

    def translate(self, key: str) -> str:
        return self._translations.get(key, key)
