"""Event Schemas — request/response contracts for events and the calendar views.

Invariants:
    - EventCreate/EventUpdate.title: 1-200 chars, stripped, non-empty
    - description/location default to "" (never None past the boundary)
    - Time order is not checked here: naive values only become comparable
      once the route localizes them in the calendar timezone
    - Response datetimes always carry a timezone

Design Decisions:
    - Naive request datetimes accepted here and localized by the route,
      which knows the configured calendar timezone
"""

import datetime as dt
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from conference_schedule.core.domain_types import CalendarEvent, Weekday
from conference_schedule.schemas.comment import CommentResponse
from conference_schedule.schemas.common import UtcDateTime, strip_required
from conference_schedule.schemas.event_file import EventFileResponse


class EventCreate(BaseModel):
    """Event creation. Title required, free text optional."""
    title: str = Field(min_length=1, max_length=200)
    description: str = Field("", max_length=10_000)
    start_time: datetime
    end_time: datetime
    location: str = Field("", max_length=300)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return strip_required(v)

    @field_validator("description", "location", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v


class EventUpdate(EventCreate):
    """Full replacement of an event's editable fields."""


class EventResponse(BaseModel):
    """Event with its comments and attachments."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    start_time: UtcDateTime
    end_time: UtcDateTime
    location: str
    created_at: UtcDateTime
    updated_at: UtcDateTime
    comments: list[CommentResponse] = []
    files: list[EventFileResponse] = []

    def to_calendar_event(self) -> CalendarEvent:
        return CalendarEvent(
            id=str(self.id),
            title=self.title,
            start_time=self.start_time,
            end_time=self.end_time,
            location=self.location,
            description=self.description,
        )


class DayScheduleResponse(BaseModel):
    """Events under one calendar day of the conference."""
    day: int
    date: dt.date | None = None
    events: list[EventResponse]


class ConferenceDayResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: dt.date
    day_of_month: int
    weekday: Weekday


class DraftWindowResponse(BaseModel):
    """Default start/end offered by a new-event form."""
    start_time: datetime
    end_time: datetime


class ExportLinksResponse(BaseModel):
    google_url: str
    ics_text: str
