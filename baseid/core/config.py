"""
Configuration helpers for the Base ID backend.

Routers/services read a Settings object instead of fetching os.environ
directly, so tests can swap the environment and clear the cache.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    host: str
    port: int
    log_level: str
    log_file: str | None


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./server/database.db").strip(),
        host=os.getenv("HOST", "localhost"),
        port=_int(os.getenv("PORT", "4200"), 4200),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE") or None,
    )
