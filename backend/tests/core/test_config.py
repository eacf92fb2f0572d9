"""Settings — verifies env parsing and URL rewriting."""

from itemstore.config import Settings, get_settings
from itemstore.core.domain_types import StoreBackend


def test_postgres_url_rewritten_for_asyncpg():
    s = Settings(database_url="postgresql://u:p@db:5432/items")
    assert s.database_url == "postgresql+asyncpg://u:p@db:5432/items"


def test_sqlite_url_untouched():
    s = Settings(database_url="sqlite+aiosqlite:///./x.db")
    assert s.database_url == "sqlite+aiosqlite:///./x.db"


def test_store_backend_from_env(monkeypatch):
    monkeypatch.setenv("STORE_BACKEND", "memory")
    assert Settings().store_backend == StoreBackend.MEMORY


def test_defaults():
    s = Settings()
    assert s.store_backend == StoreBackend.SQL
    assert s.database_create_schema is True
    assert s.log_level == "INFO"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
