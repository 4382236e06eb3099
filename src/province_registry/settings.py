"""
province_registry.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the API, persistence and logging layers.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    All values can be overridden with `PROVINCE_*` environment variables,
    e.g. `PROVINCE_DATABASE_URL=sqlite+aiosqlite:///./other.db`.
    """

    model_config = SettingsConfigDict(env_prefix="PROVINCE_", case_sensitive=False)

    # dev/test create tables on startup; prod relies on Alembic.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "province-registry"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./provinces.db"
    sql_echo: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests build `Settings(...)` directly instead of going through the cache.
