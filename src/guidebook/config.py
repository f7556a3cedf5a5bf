"""Lightweight configuration for the guidebook tools."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(
        env_prefix="GUIDEBOOK_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    books_dir: Path = Field(default=Path("books"), description="Where book documents live")
    json_indent: int = Field(default=2, ge=0, description="Indentation of written documents")
    log_level: str = Field(default="INFO", description="Root logging level for the CLI")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
