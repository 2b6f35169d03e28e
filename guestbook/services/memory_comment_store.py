"""In-Memory Comment Store — process-lifetime CommentStore.

Invariants:
    - One instance per app, owned by app.state and passed to handlers by reference
    - ids start at 1 and are assigned under an asyncio.Lock, so they never repeat
    - Records are frozen and only ever appended; list_all() returns a new list
    - State is lost when the process exits
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable

from guestbook.core.comment_rules import require_comment_text
from guestbook.core.domain_types import CommentId, CommentRecord, StoreBackend

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryCommentStore:
    """Single-writer comment store held in process memory."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._records: list[CommentRecord] = []
        self._next_id = 1
        self._lock = asyncio.Lock()
        self._clock = clock

    async def list_all(self) -> list[CommentRecord]:
        """Snapshot of all comments, most recently appended first."""
        return list(reversed(self._records))

    async def append(self, text: object) -> CommentRecord:
        valid_text = require_comment_text(text)
        async with self._lock:
            record_id = self._next_id
            created_at = await self._stamp()
            self._next_id = record_id + 1
            record = CommentRecord(
                id=CommentId(record_id), text=valid_text, created_at=created_at,
            )
            self._records.append(record)
        logger.info(
            "Comment created",
            extra={"comment_id": record.id, "store": StoreBackend.MEMORY.value},
        )
        return record

    async def ping(self) -> bool:
        return True

    async def _stamp(self) -> datetime:
        """Creation timestamp; awaited while the id is reserved."""
        return self._clock()

    def __len__(self) -> int:
        return len(self._records)
