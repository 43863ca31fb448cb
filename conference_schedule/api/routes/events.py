"""Events — CRUD for conference sessions plus their calendar exports.

Invariants:
    - GET /events returns every event ordered by start_time ascending,
      each with its comments and files embedded
    - POST clamps start/end into the configured conference window
    - PUT replaces all editable fields; end_time before start_time is a 400
    - DELETE cascades to comments and files, then removes stored attachments
    - Naive request datetimes are wall-clock times in the calendar timezone

Design Decisions:
    - Exports go through EventResponse so naive datetimes from SQLite are
      treated as UTC before reaching the link builder
    - Stored attachments removed only after the DB commit succeeds; a file
      that cannot be removed is logged and left behind, the delete still succeeds
"""

import logging
from datetime import datetime, timezone, tzinfo
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from conference_schedule.api.dependencies import (
    get_calendar_tz, get_event_or_404, get_or_create_settings,
)
from conference_schedule.core.calendar_links import (
    ICS_MEDIA_TYPE, build_export_links, ics_filename,
)
from conference_schedule.core.conference_days import (
    clamp_event_window, conference_window,
)
from conference_schedule.core.errors import (
    ErrorContext, FileStorageError, InvalidScheduleError,
)
from conference_schedule.core.instants import to_local
from conference_schedule.infrastructure.database import get_db
from conference_schedule.infrastructure.file_storage import FileStorage, get_storage
from conference_schedule.models.event import Event
from conference_schedule.schemas.event import (
    EventCreate, EventResponse, EventUpdate, ExportLinksResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/events", tags=["events"])


@router.get("", response_model=list[EventResponse])
async def list_events(db: AsyncSession = Depends(get_db)):
    """All events in start order."""
    result = await db.execute(select(Event).order_by(Event.start_time.asc()))
    events = result.scalars().all()
    logger.info(f"Retrieved {len(events)} events")
    return [EventResponse.model_validate(e) for e in events]


@router.post(
    "", response_model=EventResponse, status_code=status.HTTP_201_CREATED,
)
async def create_event(
    body: EventCreate,
    db: AsyncSession = Depends(get_db),
    local_tz: tzinfo = Depends(get_calendar_tz),
):
    """Create an event inside the conference window."""
    settings_row = await get_or_create_settings(db)
    window_start, window_end = conference_window(
        settings_row.start_date, settings_row.end_date, local_tz,
    )
    start, end = clamp_event_window(
        to_local(body.start_time, local_tz, "start_time"),
        to_local(body.end_time, local_tz, "end_time"),
        window_start, window_end,
    )
    event = Event(
        title=body.title,
        description=body.description,
        start_time=start.astimezone(timezone.utc),
        end_time=end.astimezone(timezone.utc),
        location=body.location,
        comments=[],
        files=[],
    )
    db.add(event)
    await db.commit()
    logger.info(f"Event created: {body.title}", extra={"event_id": str(event.id)})
    return EventResponse.model_validate(event)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(event_id: UUID, db: AsyncSession = Depends(get_db)):
    event = await get_event_or_404(event_id, db)
    return EventResponse.model_validate(event)


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: UUID,
    body: EventUpdate,
    db: AsyncSession = Depends(get_db),
    local_tz: tzinfo = Depends(get_calendar_tz),
):
    """Replace an event's title, description, times and location."""
    event = await get_event_or_404(event_id, db)
    start = to_local(body.start_time, local_tz, "start_time")
    end = to_local(body.end_time, local_tz, "end_time")
    if end < start:
        raise InvalidScheduleError(
            "end_time cannot be before start_time",
            ErrorContext(event_id=str(event_id), field_name="end_time"),
        )
    event.title = body.title
    event.description = body.description
    event.start_time = start.astimezone(timezone.utc)
    event.end_time = end.astimezone(timezone.utc)
    event.location = body.location
    event.updated_at = datetime.now(timezone.utc)
    await db.commit()
    logger.info("Event updated", extra={"event_id": str(event_id)})
    return EventResponse.model_validate(event)


@router.delete("/{event_id}")
async def delete_event(
    event_id: UUID,
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_storage),
):
    """Delete an event with its comments and attachments."""
    event = await get_event_or_404(event_id, db)
    stored_paths = [f.path for f in event.files]
    await db.delete(event)
    await db.commit()
    for path in stored_paths:
        try:
            storage.delete(path)
        except FileStorageError as e:
            logger.warning(
                f"Orphaned attachment left in storage: {path}",
                extra={"event_id": str(event_id), "error_code": e.code},
            )
    logger.info("Event deleted", extra={"event_id": str(event_id)})
    return {"message": "Event deleted successfully"}


@router.get("/{event_id}/export", response_model=ExportLinksResponse)
async def export_event(
    event_id: UUID,
    db: AsyncSession = Depends(get_db),
    local_tz: tzinfo = Depends(get_calendar_tz),
):
    """Google Calendar link and ICS text for "Add to Calendar"."""
    event = await get_event_or_404(event_id, db)
    calendar_event = EventResponse.model_validate(event).to_calendar_event()
    links = build_export_links(calendar_event, local_tz)
    return ExportLinksResponse(google_url=links.google_url, ics_text=links.ics_text)


@router.get("/{event_id}/calendar.ics")
async def download_event_ics(
    event_id: UUID,
    db: AsyncSession = Depends(get_db),
    local_tz: tzinfo = Depends(get_calendar_tz),
):
    """ICS file download for Apple Calendar, Outlook and similar clients."""
    event = await get_event_or_404(event_id, db)
    calendar_event = EventResponse.model_validate(event).to_calendar_event()
    links = build_export_links(calendar_event, local_tz)
    return Response(
        content=links.ics_bytes(),
        media_type=ICS_MEDIA_TYPE,
        headers={
            "Content-Disposition": (
                f'attachment; filename="{ics_filename(event.title)}"'
            ),
        },
    )
