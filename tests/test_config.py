from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote blog seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blog.app import create_app
from blog.core import config as core_config


@pytest.fixture(autouse=True)
def fresh_settings():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("DATABASE_URL", "DB_POOL_SIZE", "DB_POOL_TIMEOUT", "STORAGE_BACKEND", "PORT"):
        monkeypatch.delenv(name, raising=False)
    settings = core_config.get_settings()
    assert settings.database_url == "sqlite:///./blog.db"
    assert settings.db_pool_size == 5
    assert settings.db_pool_timeout == 30.0
    assert settings.storage_backend == "sql"
    assert settings.port == 8080


def test_invalid_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("DB_POOL_SIZE", "lots")
    monkeypatch.setenv("DB_POOL_TIMEOUT", "soon")
    monkeypatch.setenv("DB_ECHO", "yes")
    settings = core_config.get_settings()
    assert settings.db_pool_size == 5
    assert settings.db_pool_timeout == 30.0
    assert settings.db_echo is True


def test_memory_backend_skips_database(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    app = create_app()
    assert app.state.database is None


def test_unknown_backend_is_rejected(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "redis")
    with pytest.raises(RuntimeError, match="Unknown STORAGE_BACKEND"):
        create_app()


def test_in_memory_sqlite_url_is_rejected(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "sql")
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    with pytest.raises(RuntimeError, match="In-memory SQLite"):
        create_app()
