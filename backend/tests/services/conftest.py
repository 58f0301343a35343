"""Service test fixtures: async DB, fake payment gateway and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - get_payment_gateway overridden with FakePaymentGateway (never calls Stripe)
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - seed() writes through its own short-lived session so assertions never read
      stale identity-map state
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import redhope.infrastructure.database as db_module
import redhope.models  # noqa: F401
from redhope.api.dependencies import get_payment_gateway
from redhope.db.base import Base
from redhope.infrastructure.database import get_db, DatabaseSessionManager
from redhope.main import app

from fake_gateway import FakePaymentGateway


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_gateway():
    return FakePaymentGateway()


@pytest.fixture
def seed(test_session_factory):
    """Insert ORM rows; returns them refreshed. created_at staggered oldest-first."""

    async def _seed(*rows):
        base = datetime(2026, 1, 1, tzinfo=timezone.utc)
        async with test_session_factory() as session:
            for offset, row in enumerate(rows):
                if getattr(row, "created_at", None) is None:
                    row.created_at = base + timedelta(minutes=offset)
                if hasattr(row, "extra") and row.extra is None:
                    row.extra = {}
                session.add(row)
            await session.commit()
            for row in rows:
                await session.refresh(row)
        return rows

    return _seed


@pytest.fixture
def fetch(test_session_factory):
    """Load a row by primary key through a fresh session."""

    async def _fetch(model, row_id):
        async with test_session_factory() as session:
            return await session.get(model, row_id)

    return _fetch


@pytest.fixture
async def client(test_engine, test_session_factory, fake_gateway):
    """FastAPI test client with DB and payment gateway dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_payment_gateway] = lambda: fake_gateway

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
