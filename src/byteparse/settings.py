"""CLI defaults loaded from environment variables (BYTEPARSE_*) or a .env file."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field(default="warning")
    delimiter: str = Field(default="\n", min_length=1)
    text_mode: bool = Field(default=True)
    max_segments: Optional[int] = Field(default=None, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="BYTEPARSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
