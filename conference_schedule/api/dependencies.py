"""Route Helpers — lookups and dependencies shared by several routers.

Invariants:
    - get_event_or_404 raises ResourceNotFoundError, never returns None
    - get_or_create_settings always returns a row (seeded from config defaults)
    - The calendar timezone is resolved from settings on every call (cheap, cache-free)
"""

import logging
from datetime import tzinfo
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from conference_schedule.config import get_settings
from conference_schedule.core.domain_types import SETTINGS_ROW_ID
from conference_schedule.core.errors import ErrorContext, ResourceNotFoundError
from conference_schedule.core.instants import resolve_timezone
from conference_schedule.models.conference_settings import ConferenceSettings
from conference_schedule.models.event import Event

logger = logging.getLogger(__name__)


def get_calendar_tz() -> tzinfo:
    """FastAPI dependency: zone used for day matching and naive inputs."""
    return resolve_timezone(get_settings().calendar_timezone)


async def get_event_or_404(event_id: UUID, db: AsyncSession) -> Event:
    result = await db.execute(select(Event).where(Event.id == event_id))
    event = result.scalar_one_or_none()
    if not event:
        raise ResourceNotFoundError(
            "Event", str(event_id), ErrorContext(event_id=str(event_id)),
        )
    return event


async def get_or_create_settings(db: AsyncSession) -> ConferenceSettings:
    """Load the settings row, inserting the configured defaults when absent."""
    settings_row = await db.get(ConferenceSettings, SETTINGS_ROW_ID)
    if settings_row:
        return settings_row

    config = get_settings()
    settings_row = ConferenceSettings(
        id=SETTINGS_ROW_ID,
        start_date=config.default_conference_start,
        end_date=config.default_conference_end,
        address="",
        notes="",
    )
    db.add(settings_row)
    await db.commit()
    logger.info("Created default conference settings")
    return settings_row
