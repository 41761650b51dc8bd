"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables or .env (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process
    - DB_PORT stays a string here; the connection factory parses it

Design Decisions:
    - Database keys are optional on the model: missing keys are reported by
      build_connection_descriptor during startup, not at import time
"""

from functools import lru_cache
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database (DB_* is the deployment contract)
    db_host: str | None = None
    db_port: str = "5432"
    db_username: str | None = None
    db_password: str | None = None
    db_name: str | None = None

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a declared setting by its environment name, e.g. ``"DB_PORT"``."""
        name = key.lower()
        if name not in type(self).model_fields:
            return default
        value = getattr(self, name)
        return default if value is None else value


@lru_cache
def get_settings() -> Settings:
    return Settings()
