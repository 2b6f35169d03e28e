"""Request Dependencies — resolves the CommentStore for each request.

Invariants:
    - app.state.memory_store set → every request shares that one store
    - otherwise → a fresh SqlCommentStore over a request-scoped session,
      closed when the request finishes (success or failure)
"""

from typing import AsyncGenerator

from fastapi import Request

from guestbook.core.repository_protocols import CommentStore
from guestbook.infrastructure import database
from guestbook.services.sql_comment_store import SqlCommentStore


async def get_comment_store(
    request: Request,
) -> AsyncGenerator[CommentStore, None]:
    """FastAPI dependency yielding the configured comment store."""
    memory_store = getattr(request.app.state, "memory_store", None)
    if memory_store is not None:
        yield memory_store
        return
    if not database.db_manager:
        raise RuntimeError("Database not initialized")
    async with database.db_manager.session() as db:
        yield SqlCommentStore(db)
