"""API test fixtures — async DB, attachment storage and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db overridden with the session manager bound to the test engine
    - db_manager patched so the readiness probe sees the test engine
    - Attachment storage rooted in the test's tmp_path

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific behaviour is not exercised here)
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from conference_schedule.db.base import Base
from conference_schedule.infrastructure.database import get_db, DatabaseSessionManager
from conference_schedule.infrastructure.file_storage import FileStorage, get_storage
import conference_schedule.infrastructure.database as db_module
import conference_schedule.models  # noqa: F401
from conference_schedule.main import app


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
def storage(tmp_path):
    return FileStorage(tmp_path / "uploads")


@pytest.fixture
async def client(test_engine, test_session_factory, storage):
    """FastAPI test client with DB and storage dependencies overridden."""
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_storage] = lambda: storage

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def event_payload():
    return {
        "title": "Keynote",
        "description": "Opening talk",
        "start_time": "2025-07-17T14:00:00Z",
        "end_time": "2025-07-17T15:00:00Z",
        "location": "Hall A",
    }


@pytest.fixture
async def created_event(client, event_payload):
    res = await client.post("/api/v1/events", json=event_payload)
    assert res.status_code == 201
    return res.json()
