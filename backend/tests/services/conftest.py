"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - `seeded` loads the reference dataset from ledger/db/seed.py

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so the test session
      and request sessions see the same database
    - PostgreSQL-only behaviour (FOR UPDATE, sqlstate conflicts) is exercised by
      simulating the lost race, not by real concurrency
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from ledger.db.base import Base
from ledger.db.seed import seed_demo_data
from ledger.db.session import create_session_factory
from ledger.infrastructure.database import DatabaseSessionManager, get_db
from ledger.main import app
from tests.services.factories import FIXED_NOW


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seeded(test_db):
    """Reference dataset loaded; yields the same session for assertions."""
    await seed_demo_data(test_db)
    return test_db


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # Readiness probe reads the manager from app.state
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    app.state.db_manager = manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = None


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW
