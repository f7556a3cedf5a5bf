"""Protocol-based interfaces for the host and author collaborators.

The codec and loader only talk to the host through these contracts, so tests
and tools can supply in-memory implementations.
"""

from guidebook.interfaces.game_registry import IGameRegistry
from guidebook.interfaces.guide_book import IGuideBook
from guidebook.interfaces.localization import ITranslator
from guidebook.interfaces.variant_codec import IVariantCodec

__all__ = [
    "IGameRegistry",
    "IGuideBook",
    "ITranslator",
    "IVariantCodec",
]
