"""Async Session Factory — one place that decides how sessions are configured.

Invariants:
    - expire_on_commit=False everywhere: rows stay readable after commit in async code
    - Used by DatabaseSessionManager, the seed script and test fixtures alike

Design Decisions:
    - Takes an engine instead of a URL: callers own engine lifecycle (dispose)
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to `engine`."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
