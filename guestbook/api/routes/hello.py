"""Hello — connectivity demo used by the landing page. No persistence."""

from datetime import datetime

from fastapi import APIRouter

from guestbook.schemas.comment import HelloResponse

router = APIRouter(prefix="/hello", tags=["hello"])

GREETING = "Hello from our Server! 👋"


@router.get("", response_model=HelloResponse)
async def hello():
    return HelloResponse(
        message=GREETING,
        timestamp=datetime.now().strftime("%H:%M:%S"),
    )
