"""API test fixtures — FastAPI test clients for both store backends.

Invariants:
    - client: SqlCommentStore over the per-test SQLite engine
    - memory_client: one InMemoryCommentStore on app.state for the whole test
    - Lifespan is not run by ASGITransport; fixtures do the provisioning instead
"""

import pytest
from httpx import ASGITransport, AsyncClient

import guestbook.infrastructure.database as db_module
from guestbook.infrastructure.database import DatabaseSessionManager
from guestbook.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """Test client backed by the relational store."""
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager
    app.state.memory_store = None

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    db_module.db_manager = original_manager


@pytest.fixture
async def memory_client(memory_store):
    """Test client backed by a fresh in-memory store."""
    app.state.memory_store = memory_store

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.state.memory_store = None
