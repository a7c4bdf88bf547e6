"""Lightweight configuration for the hexpath service."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(
        env_prefix="HEXPATH_", env_file=".env", env_file_encoding="utf-8"
    )

    host: str = Field(default="127.0.0.1", description="Interface the HTTP server binds to")
    port: int = Field(
        default=8000, description="TCP port the HTTP server listens on", ge=1, le=65535
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
