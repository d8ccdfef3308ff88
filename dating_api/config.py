"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting can be overridden by an environment variable of the same name
    - get_settings() is cached (lru_cache) — single instance per process
    - database_url always names an async driver (asyncpg / aiosqlite)

Design Decisions:
    - Paging and age defaults are domain constants in core/, not settings
    - CORS_ORIGINS is a JSON list (pydantic-settings decodes complex types)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMATS = ("json", "text")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service
    app_name: str = "dating-api"
    app_version: str = "1.0.0"

    # Database
    database_url: str = "postgresql+asyncpg://dating:dating@db:5432/dating"
    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_echo: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:4200"]
    track_last_active: bool = True

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"
    sql_log_level: str = "WARNING"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql://; the engine needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        if isinstance(v, str) and v.startswith("sqlite:///"):
            return v.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
        return v

    @field_validator("log_format")
    @classmethod
    def known_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {LOG_FORMATS}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
