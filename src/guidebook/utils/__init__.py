"""Utility helpers for the guidebook package."""

from guidebook.utils.in_memory import DictTranslator, GameObject, InMemoryGameRegistry

__all__ = [
    "DictTranslator",
    "GameObject",
    "InMemoryGameRegistry",
]
