"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`guidebook` package without requiring an editable install in CI, and
provides the registries, codec and loader most tests share.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from guidebook.loader import BookLoader  # noqa: E402
from guidebook.sample import sample_game_registry  # noqa: E402
from guidebook.serialization import BookCodec, VariantRegistries  # noqa: E402
from guidebook.utils.in_memory import InMemoryGameRegistry  # noqa: E402


@pytest.fixture
def game_registry() -> InMemoryGameRegistry:
    return sample_game_registry()


@pytest.fixture
def registries() -> VariantRegistries:
    return VariantRegistries.with_builtins()


@pytest.fixture
def codec(registries: VariantRegistries, game_registry: InMemoryGameRegistry) -> BookCodec:
    return BookCodec(registries, game_registry)


@pytest.fixture
def loader(codec: BookCodec) -> BookLoader:
    return BookLoader(codec)
