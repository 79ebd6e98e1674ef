"""
wilayah.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the API and persistence layers.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WILAYAH_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "wilayah-api"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # File-backed SQLite; the parent directory is created on startup.
    database_url: str = "sqlite+aiosqlite:///./data/wilayah_indonesia.db"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
