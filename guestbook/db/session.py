"""Async Session Factory — DB sessions for code running outside FastAPI.

Invariants:
    - Meant for scripts and test fixtures; requests go through DatabaseSessionManager
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to the given engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
