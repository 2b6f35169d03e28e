"""Tests for Settings — env parsing and URL normalization."""

from guestbook.config import Settings
from guestbook.core.domain_types import StoreBackend


def test_postgres_url_gets_async_driver():
    settings = Settings(database_url="postgresql://u:p@db:5432/guestbook")

    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/guestbook"


def test_other_urls_untouched():
    settings = Settings(database_url="sqlite+aiosqlite:///./x.db")

    assert settings.database_url == "sqlite+aiosqlite:///./x.db"


def test_comment_store_read_from_env(monkeypatch):
    monkeypatch.setenv("COMMENT_STORE", "memory")

    assert Settings().comment_store == StoreBackend.MEMORY


def test_defaults(monkeypatch):
    monkeypatch.delenv("COMMENT_STORE", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)

    settings = Settings()

    assert settings.comment_store == StoreBackend.DATABASE
    assert settings.database_create_schema is True
    assert settings.log_format == "json"
