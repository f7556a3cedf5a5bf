from pydantic import Field

from .base import WirePayload


class ColorPayload(WirePayload):
    red: int = Field(..., ge=0, le=255, description="Red channel")
    green: int = Field(..., ge=0, le=255, description="Green channel")
    blue: int = Field(..., ge=0, le=255, description="Blue channel")
    alpha: int = Field(..., ge=0, le=255, description="Alpha channel")


class GameObjectPayload(WirePayload):
    is_block: bool = Field(..., alias="isBlock", description="Look up in the block registry")
    name: str = Field(..., min_length=1, description="Registry name of the block or item")
    metadata: int = Field(..., description="Sub-variant (damage/meta) value")
