"""Built-in entry variants beyond the plain :class:`~guidebook.domain.models.Entry`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .models import Entry, GameObjectRef


@dataclass(slots=True, kw_only=True)
class EntryItemStack(Entry):
    """Entry listed with a game object as its icon."""

    variant_type: ClassVar[str] = "EntryItemStack"

    icon: GameObjectRef
