"""Comment Schemas — wire shapes for /comments and /hello.

Invariants:
    - CommentCreate.text is optional here: emptiness is the store's rule, so
      {} and {"text": ""} both reach the store and fail the same way
    - CommentResponse serializes created_at as "createdAt", ISO-8601 in UTC
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from guestbook.core.domain_types import CommentRecord, as_utc


class CommentCreate(BaseModel):
    """POST /comments body."""
    text: str | None = None


class CommentResponse(BaseModel):
    """A stored comment as returned to clients."""
    model_config = ConfigDict(populate_by_name=True)

    id: int
    text: str
    created_at: datetime = Field(alias="createdAt")

    @field_serializer("created_at")
    def serialize_created_at(self, value: datetime) -> str:
        return as_utc(value).isoformat()

    @classmethod
    def from_record(cls, record: CommentRecord) -> "CommentResponse":
        return cls(id=record.id, text=record.text, created_at=record.created_at)


class HelloResponse(BaseModel):
    message: str
    timestamp: str
