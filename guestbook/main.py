"""Guestbook API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GuestbookError → {"error": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - Comment store provisioned on startup and released on shutdown via lifespan

Run with: uvicorn guestbook.main:app
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from guestbook.api.error_handlers import register_error_handlers
from guestbook.api.routes import comments, health, hello
from guestbook.config import get_settings
from guestbook.core.domain_types import StoreBackend
from guestbook.infrastructure.database import close_db, init_db
from guestbook.infrastructure.observability import setup_logging
from guestbook.services.memory_comment_store import InMemoryCommentStore

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.comment_store == StoreBackend.MEMORY:
        app.state.memory_store = InMemoryCommentStore()
    else:
        manager = init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_schema:
            await manager.create_schema()
    logger.info(
        "Guestbook API started",
        extra={"store": settings.comment_store.value},
    )
    yield
    await close_db()
    app.state.memory_store = None
    logger.info("Guestbook API shutting down")


app = FastAPI(title="Guestbook API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(hello.router)
app.include_router(comments.router)

register_error_handlers(app)

# Mounted after the API routers so /comments, /hello and /health take precedence.
# html=True serves index.html for "/" and "/guestbook/".
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")
