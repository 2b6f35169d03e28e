"""Root conftest — shared test configuration and store fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Tests never touch the default on-disk guestbook.db
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("COMMENT_STORE", "database")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

import guestbook.models  # noqa: E402,F401
from guestbook.db.base import Base  # noqa: E402
from guestbook.db.session import create_session_factory  # noqa: E402
from guestbook.services.memory_comment_store import InMemoryCommentStore  # noqa: E402
from guestbook.services.sql_comment_store import SqlCommentStore  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def sql_store(test_db):
    return SqlCommentStore(test_db)


@pytest.fixture
def memory_store():
    return InMemoryCommentStore()


@pytest.fixture
async def drop_comments_table(test_engine):
    """Simulate a broken backing store by removing the table."""
    async def _drop():
        async with test_engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
    return _drop
