"""Built-in category variants."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .models import Category, GameObjectRef


@dataclass(slots=True, kw_only=True)
class CategoryItemStack(Category):
    """Category represented by a game object icon."""

    variant_type: ClassVar[str] = "CategoryItemStack"

    icon: GameObjectRef


@dataclass(slots=True, kw_only=True)
class CategoryResourceLocation(Category):
    """Category represented by an image; ``icon`` is passed through untouched."""

    variant_type: ClassVar[str] = "CategoryResourceLocation"

    icon: str
