"""Schedule — calendar day strip, per-day event list and new-event defaults.

Invariants:
    - GET /schedule/days spans conference start..end inclusive
    - GET /schedule?day=N returns the events whose local start day-of-month is N,
      in start order; day defaults to the conference start day
    - date in the day response is only set when N exists in the conference's
      start month (e.g. day 31 in June yields date=None)

Design Decisions:
    - Matching runs on EventResponse objects, after UTC normalisation, so
      the configured calendar timezone decides the day, not the DB driver
"""

import logging
from datetime import date, datetime, timezone, tzinfo

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from conference_schedule.api.dependencies import get_calendar_tz, get_or_create_settings
from conference_schedule.core.conference_days import (
    DEFAULT_EVENT_DURATION, clamp_event_window, conference_days,
    conference_window, initial_start,
)
from conference_schedule.core.day_matcher import match_events_to_day
from conference_schedule.infrastructure.database import get_db
from conference_schedule.models.event import Event
from conference_schedule.schemas.event import (
    ConferenceDayResponse, DayScheduleResponse, DraftWindowResponse, EventResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/schedule", tags=["schedule"])


@router.get("", response_model=DayScheduleResponse)
async def get_day_schedule(
    day: int | None = Query(None, ge=1, le=31),
    db: AsyncSession = Depends(get_db),
    local_tz: tzinfo = Depends(get_calendar_tz),
):
    """Events for the selected day of the conference month."""
    settings_row = await get_or_create_settings(db)
    selected_day = day or settings_row.start_date.day

    result = await db.execute(select(Event).order_by(Event.start_time.asc()))
    events = [EventResponse.model_validate(e) for e in result.scalars().all()]
    matched = match_events_to_day(events, selected_day, local_tz)
    logger.info(
        f"Matched {len(matched)} of {len(events)} events",
        extra={"day": selected_day},
    )
    return DayScheduleResponse(
        day=selected_day,
        date=_date_in_month(settings_row.start_date, selected_day),
        events=matched,
    )


@router.get("/days", response_model=list[ConferenceDayResponse])
async def list_conference_days(db: AsyncSession = Depends(get_db)):
    """Day strip shown above the calendar."""
    settings_row = await get_or_create_settings(db)
    return [
        ConferenceDayResponse.model_validate(d)
        for d in conference_days(settings_row.start_date, settings_row.end_date)
    ]


@router.get("/draft-window", response_model=DraftWindowResponse)
async def get_draft_window(
    db: AsyncSession = Depends(get_db),
    local_tz: tzinfo = Depends(get_calendar_tz),
):
    """Start/end a new-event form should open with."""
    settings_row = await get_or_create_settings(db)
    window_start, window_end = conference_window(
        settings_row.start_date, settings_row.end_date, local_tz,
    )
    now = datetime.now(timezone.utc).astimezone(local_tz)
    start = initial_start(now, window_start, window_end)
    start, end = clamp_event_window(
        start, start + DEFAULT_EVENT_DURATION, window_start, window_end,
    )
    return DraftWindowResponse(start_time=start, end_time=end)


def _date_in_month(month_anchor: date, day: int) -> date | None:
    try:
        return month_anchor.replace(day=day)
    except ValueError:
        return None
