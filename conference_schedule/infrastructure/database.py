"""Database Access — async engine, request-scoped sessions and readiness check.

Invariants:
    - A session that sees an exception is rolled back before it is closed
    - Conference errors raised by routes pass through untouched
    - Any other SQLAlchemy failure becomes DatabaseError (503) carrying the
      failed operation and the driver exception name, never the SQL text

Design Decisions:
    - Unique-constraint races are resolved by the route that owns the
      constraint (it knows the resource and value for DuplicateResourceError)
    - Pool sizing only applies to server databases; SQLite keeps its own pool
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from conference_schedule.core.errors import DatabaseError, ErrorContext

logger = logging.getLogger(__name__)


def _engine_options(database_url: str, pool_size: int, max_overflow: int) -> dict:
    if database_url.startswith("sqlite"):
        return {}
    return {
        "pool_pre_ping": True,
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_recycle": 3600,
    }


def _operation_for(exc: SQLAlchemyError) -> str:
    return "write" if isinstance(exc, IntegrityError) else "query"


class DatabaseSessionManager:
    """Owns the engine and hands out one session per request."""

    def __init__(self, database_url: str, pool_size: int = 20, max_overflow: int = 10):
        self.engine = create_async_engine(
            database_url, **_engine_options(database_url, pool_size, max_overflow),
        )
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            operation = _operation_for(e)
            logger.error(
                f"Schedule database {operation} failed: {type(e).__name__}",
                extra={"error_code": "DATABASE_ERROR"},
            )
            raise DatabaseError(
                "the schedule store is unavailable", operation,
                ErrorContext(debug_info={"exception": type(e).__name__}),
            ) from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """True when the schedule store answers a trivial query."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except DatabaseError:
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


# Set by init_db() from the application lifespan
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a managed session."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
