"""Domain Types — the Comment record and the small types around it.

Invariants:
    - CommentRecord is frozen: callers get snapshots, never live store state
    - CommentId is a positive integer assigned by the store
    - created_at is always timezone-aware (UTC)
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

CommentId = NewType("CommentId", int)


# ─── Enums ───────────────────────────────────────────────────────

class StoreBackend(str, Enum):
    """Which CommentStore implementation the app wires up at startup."""
    DATABASE = "database"
    MEMORY = "memory"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class CommentRecord:
    """Immutable view of one stored comment."""
    id: CommentId
    text: str
    created_at: datetime


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on read)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
