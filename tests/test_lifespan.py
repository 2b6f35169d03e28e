"""App lifespan — store provisioning on startup and release on shutdown."""

import logging

import pytest
from sqlalchemy import text

import guestbook.infrastructure.database as db_module
from guestbook.config import Settings
from guestbook.core.domain_types import StoreBackend
from guestbook.main import app, lifespan
from guestbook.services.memory_comment_store import InMemoryCommentStore


@pytest.fixture(autouse=True)
def _restore_logging():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)


async def test_memory_backend_attaches_store(monkeypatch):
    settings = Settings(comment_store=StoreBackend.MEMORY, log_format="text")
    monkeypatch.setattr("guestbook.main.get_settings", lambda: settings)

    async with lifespan(app):
        assert isinstance(app.state.memory_store, InMemoryCommentStore)

    assert app.state.memory_store is None


async def test_database_backend_creates_schema_and_disposes(monkeypatch, tmp_path):
    settings = Settings(
        comment_store=StoreBackend.DATABASE,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'life.db'}",
        log_format="text",
    )
    monkeypatch.setattr("guestbook.main.get_settings", lambda: settings)
    monkeypatch.setattr(db_module, "db_manager", None)

    async with lifespan(app):
        manager = db_module.db_manager
        assert manager is not None
        async with manager.session() as db:
            assert await db.scalar(text("SELECT COUNT(*) FROM comments")) == 0

    assert db_module.db_manager is None
