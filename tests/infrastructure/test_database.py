"""Database session manager — rollback, error mapping and readiness check."""

import pytest
from sqlalchemy import func, select, text
from sqlalchemy.exc import OperationalError

from conference_schedule.core.errors import DatabaseError, ResourceNotFoundError
from conference_schedule.db.base import Base
from conference_schedule.infrastructure.database import DatabaseSessionManager
from conference_schedule.models.email_entry import EmailListEntry
import conference_schedule.models  # noqa: F401


@pytest.fixture
async def manager(tmp_path):
    manager = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'schedule.db'}")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


async def test_health_check_passes(manager):
    assert await manager.health_check() is True


async def test_sqlalchemy_error_becomes_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    err = exc_info.value
    assert err.http_status == 503
    assert err.operation == "query"
    assert err.context.debug_info == {"exception": "OperationalError"}
    assert "no_such_table" not in err.message


async def test_integrity_error_is_reported_as_write(manager):
    async with manager.session() as db:
        db.add(EmailListEntry(email="ana@example.org", name="Ana", role="attendee"))
        await db.commit()

    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            db.add(EmailListEntry(email="ana@example.org", name="Ana B", role="speaker"))
            await db.commit()
    assert exc_info.value.operation == "write"

    async with manager.session() as db:
        count = await db.scalar(select(func.count()).select_from(EmailListEntry))
    assert count == 1


async def test_conference_errors_pass_through(manager):
    with pytest.raises(ResourceNotFoundError):
        async with manager.session():
            raise ResourceNotFoundError("Event", "missing")


async def test_health_check_fails_on_database_error(manager, monkeypatch):
    async def broken_execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    monkeypatch.setattr("sqlalchemy.ext.asyncio.AsyncSession.execute", broken_execute)
    assert await manager.health_check() is False
