"""Localization Protocol Interface."""

from typing import Protocol


class ITranslator(Protocol):
    """Protocol for the host's string translation service."""

    def translate(self, key: str) -> str:
        """Translate a localization key into display text."""
        ...
