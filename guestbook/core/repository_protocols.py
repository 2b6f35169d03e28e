"""Boundary Protocols — contract between the API shell and comment stores.

Invariants:
    - Routes depend on CommentStore only, never on a concrete backend
    - list_all() returns newest first; append() returns the created record

Design Decisions:
    - Protocol over ABC: InMemoryCommentStore and SqlCommentStore share no base class
"""

from typing import Protocol

from guestbook.core.domain_types import CommentRecord


class CommentStore(Protocol):
    """Contract for comment persistence — implemented in services/."""
    async def list_all(self) -> list[CommentRecord]: ...
    async def append(self, text: object) -> CommentRecord: ...
    async def ping(self) -> bool: ...
