"""Tests for DatabaseSessionManager — schema creation, error mapping, lifecycle."""

import pytest
from sqlalchemy import text

import guestbook.infrastructure.database as db_module
from guestbook.core.errors import StoreError
from guestbook.infrastructure.database import (
    DatabaseSessionManager, close_db, init_db,
)


@pytest.fixture
def file_db_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'manager.db'}"


async def test_create_schema_builds_comments_table(file_db_url):
    manager = DatabaseSessionManager(file_db_url)
    await manager.create_schema()

    async with manager.session() as db:
        count = await db.scalar(text("SELECT COUNT(*) FROM comments"))
    assert count == 0
    await manager.close()


async def test_operational_errors_become_store_errors(file_db_url):
    manager = DatabaseSessionManager(file_db_url)

    with pytest.raises(StoreError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))

    assert exc_info.value.operation == "execute"
    await manager.close()


async def test_init_and_close_db_manage_singleton(file_db_url, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)

    manager = init_db(file_db_url, pool_size=2, max_overflow=1)
    assert db_module.db_manager is manager

    await close_db()
    assert db_module.db_manager is None
