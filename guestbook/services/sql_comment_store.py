"""SQL Comment Store — CommentStore backed by the comments table.

Invariants:
    - One store per request, wrapping that request's AsyncSession
    - id and durability come from the database; no application-level locking
    - Any SQLAlchemyError is rolled back, logged with the driver detail,
      and re-raised as StoreError with a fixed public message, even when
      the rollback itself fails
    - ping() never raises a SQLAlchemyError; an unreachable database is False
    - Only CommentRecord snapshots leave this module, never ORM instances
"""

import logging

from sqlalchemy import select, text as sql_text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from guestbook.core.comment_rules import require_comment_text
from guestbook.core.domain_types import CommentRecord, StoreBackend
from guestbook.core.errors import StoreError
from guestbook.models.comment import Comment

logger = logging.getLogger(__name__)


class SqlCommentStore:
    """Relational comment store."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[CommentRecord]:
        """All comments, newest first (id breaks timestamp ties)."""
        query = select(Comment).order_by(
            Comment.created_at.desc(), Comment.id.desc(),
        )
        try:
            result = await self.db.execute(query)
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            await self._fail("list_all", e)
            raise StoreError("Failed to fetch comments", "list_all") from e
        return [row.to_record() for row in rows]

    async def append(self, text: object) -> CommentRecord:
        """Validate and insert one comment; returns the stored record."""
        valid_text = require_comment_text(text)
        comment = Comment(text=valid_text)
        try:
            self.db.add(comment)
            await self.db.commit()
            await self.db.refresh(comment)
        except SQLAlchemyError as e:
            await self._fail("append", e)
            raise StoreError("Failed to create comment", "append") from e
        logger.info(
            "Comment created",
            extra={"comment_id": comment.id, "store": StoreBackend.DATABASE.value},
        )
        return comment.to_record()

    async def ping(self) -> bool:
        try:
            await self.db.execute(sql_text("SELECT 1"))
        except SQLAlchemyError as e:
            await self._fail("ping", e)
            return False
        return True

    async def _fail(self, operation: str, exc: SQLAlchemyError) -> None:
        try:
            await self.db.rollback()
        except SQLAlchemyError as rollback_exc:
            logger.error(
                f"Comment store rollback after {operation} failed: {rollback_exc}",
                extra={"operation": operation, "store": StoreBackend.DATABASE.value},
            )
        logger.error(
            f"Comment store {operation} failed: {exc}",
            extra={"operation": operation, "store": StoreBackend.DATABASE.value},
        )
