"""
Configuration helpers for the blog backend.

Settings are read from environment variables once and passed explicitly to
the app factory and the database handle, so routers/services do not fetch
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    db_pool_size: int
    db_pool_timeout: float
    db_echo: bool
    storage_backend: str
    log_level: str
    host: str
    port: int


def _int(value: str | None, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _float(value: str | None, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or "sqlite:///./blog.db").strip(),
        db_pool_size=max(1, _int(os.getenv("DB_POOL_SIZE"), 5)),
        db_pool_timeout=max(0.0, _float(os.getenv("DB_POOL_TIMEOUT"), 30.0)),
        db_echo=_bool(os.getenv("DB_ECHO"), False),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "sql").strip().lower(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT"), 8080),
    )
