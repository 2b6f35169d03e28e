"""Comment ORM — the single persisted guestbook table.

Invariants:
    - id is an autoincrement integer primary key assigned by the database
    - text is non-nullable
    - created_at defaults to now (Python default + server default for raw inserts)
    - Rows are never updated or deleted by the application
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, Text, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column

from guestbook.core.domain_types import CommentId, CommentRecord, as_utc
from guestbook.db.base import Base


class Comment(Base):
    """Comment row."""
    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        index=True,
    )

    def to_record(self) -> CommentRecord:
        return CommentRecord(
            id=CommentId(self.id),
            text=self.text,
            created_at=as_utc(self.created_at),
        )
