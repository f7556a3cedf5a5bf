from pydantic import Field

from .base import WirePayload


class ObjectCatalogPayload(WirePayload):
    blocks: list[str] = Field(default_factory=list, description="Registered block names")
    items: list[str] = Field(default_factory=list, description="Registered item names")
