"""Comments — list and append guestbook comments.

Invariants:
    - GET returns every comment, newest first, as [{id, text, createdAt}]
    - POST returns 201 with the created comment
    - Missing body, {} and {"text": ""} all yield 400 "Comment text is required"
    - Store failures surface as StoreError → 500 via the global handler
"""

from fastapi import APIRouter, Depends, status

from guestbook.api.dependencies import get_comment_store
from guestbook.core.repository_protocols import CommentStore
from guestbook.schemas.comment import CommentCreate, CommentResponse

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("", response_model=list[CommentResponse])
async def list_comments(store: CommentStore = Depends(get_comment_store)):
    """Fetch all comments."""
    records = await store.list_all()
    return [CommentResponse.from_record(r) for r in records]


@router.post(
    "", response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    body: CommentCreate | None = None,
    store: CommentStore = Depends(get_comment_store),
):
    """Add a new comment."""
    record = await store.append(body.text if body else None)
    return CommentResponse.from_record(record)
