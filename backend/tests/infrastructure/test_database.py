"""Tests for DatabaseSessionManager: rollback, readiness and store-error classification."""

import logging

import pytest
from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)

from redhope.infrastructure.database import (
    DatabaseSessionManager, classify_database_error,
)


@pytest.fixture
async def manager():
    m = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    yield m
    await m.dispose()


@pytest.mark.parametrize("error, operation", [
    (IntegrityError("INSERT", {}, Exception("duplicate key")), "commit"),
    (OperationalError("SELECT", {}, Exception("connection refused")), "execute"),
    (DBAPIError("SELECT", {}, Exception("driver failure")), "query"),
    (SQLAlchemyError("mapper failure"), "unknown"),
])
def test_classify_database_error(error, operation):
    db_error = classify_database_error(error)
    assert db_error.code == "DATABASE_ERROR"
    assert db_error.operation == operation
    assert db_error.http_status == 503


async def test_session_rolls_back_and_reraises(manager):
    async with manager.engine.begin() as conn:
        await conn.execute(text("CREATE TABLE donors (id INTEGER PRIMARY KEY)"))

    with pytest.raises(RuntimeError, match="boom"):
        async with manager.session() as db:
            await db.execute(text("INSERT INTO donors (id) VALUES (1)"))
            raise RuntimeError("boom")

    async with manager.session() as db:
        count = (await db.execute(text("SELECT COUNT(*) FROM donors"))).scalar_one()
    assert count == 0


async def test_health_check_reachable(manager):
    assert await manager.health_check() is True


async def test_health_check_unreachable_logs_database_error(caplog):
    broken = DatabaseSessionManager(
        "sqlite+aiosqlite:////nonexistent-redhope-dir/redhope.db",
    )
    with caplog.at_level(logging.ERROR, logger="redhope.infrastructure.database"):
        assert await broken.health_check() is False
    await broken.dispose()

    record = next(
        r for r in caplog.records if r.name == "redhope.infrastructure.database"
    )
    assert record.error_code == "DATABASE_ERROR"
