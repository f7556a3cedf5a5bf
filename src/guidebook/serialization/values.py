"""Codecs for the two value types that have no native JSON form.

The set is fixed: colors and game-object references. Game-object references
are resolved through the host registry, so documents that use them can only
be read once the host has finished registering its blocks and items.
"""

from __future__ import annotations

from typing import Any

from guidebook.domain.enums import RegistryKind
from guidebook.domain.models import Color, GameObjectRef
from guidebook.errors import UnresolvedReferenceError
from guidebook.interfaces.game_registry import IGameRegistry
from guidebook.schemas import ColorPayload, GameObjectPayload, validate_payload


def encode_color(color: Color) -> dict[str, int]:
    return {
        "red": color.red,
        "green": color.green,
        "blue": color.blue,
        "alpha": color.alpha,
    }


def decode_color(data: Any) -> Color:
    """Read a color; every channel is required."""

    payload = validate_payload(ColorPayload, data, where="malformed color")
    return Color(payload.red, payload.green, payload.blue, payload.alpha)


def encode_game_object(ref: GameObjectRef, registry: IGameRegistry) -> dict[str, Any]:
    """Write ``{isBlock, name, metadata}`` using the name the host knows the handle by."""

    name = registry.name_of(ref.kind, ref.handle)
    if name is None:
        raise UnresolvedReferenceError(ref.kind, None)
    return {"isBlock": ref.is_block, "name": name, "metadata": ref.metadata}


def decode_game_object(data: Any, registry: IGameRegistry) -> GameObjectRef:
    """Resolve a reference against the block or item registry selected by ``isBlock``."""

    payload = validate_payload(GameObjectPayload, data, where="game object reference")
    kind = RegistryKind.BLOCK if payload.is_block else RegistryKind.ITEM
    handle = registry.resolve_by_name(kind, payload.name)
    if handle is None:
        raise UnresolvedReferenceError(kind, payload.name)
    return GameObjectRef(handle=handle, kind=kind, metadata=payload.metadata)
