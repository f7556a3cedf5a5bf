from .base import WirePayload, describe_validation_error, validate_payload
from .book import BookPayload
from .catalog import ObjectCatalogPayload
from .values import ColorPayload, GameObjectPayload
from .variants import (
    CategoryItemStackPayload,
    CategoryPayload,
    CategoryResourceLocationPayload,
    EntryItemStackPayload,
    EntryPayload,
    PageFurnaceRecipePayload,
    PageImagePayload,
    PageIRecipePayload,
    PageTextPayload,
)

__all__ = [
    "BookPayload",
    "CategoryItemStackPayload",
    "CategoryPayload",
    "CategoryResourceLocationPayload",
    "ColorPayload",
    "EntryItemStackPayload",
    "EntryPayload",
    "GameObjectPayload",
    "ObjectCatalogPayload",
    "PageFurnaceRecipePayload",
    "PageIRecipePayload",
    "PageImagePayload",
    "PageTextPayload",
    "WirePayload",
    "describe_validation_error",
    "validate_payload",
]
