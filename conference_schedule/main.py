"""Conference Schedule API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ConferenceError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and attachment storage initialized on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema managed by Alembic migrations, never create_all at startup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from conference_schedule.api.error_handlers import register_error_handlers
from conference_schedule.api.routes import (
    admin_emails, admin_settings, comments, events, files, health, schedule,
)
from conference_schedule.config import get_settings
from conference_schedule.infrastructure import database
from conference_schedule.infrastructure.file_storage import init_storage
from conference_schedule.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    init_storage(settings.upload_dir)
    logger.info(f"{settings.conference_name} schedule API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Schedule API shutting down")


app = FastAPI(
    title="Conference Schedule API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(events.router)
app.include_router(files.router)
app.include_router(schedule.router)
app.include_router(comments.router)
app.include_router(admin_settings.router)
app.include_router(admin_emails.router)

register_error_handlers(app)
