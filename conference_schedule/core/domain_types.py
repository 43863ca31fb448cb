"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - EventId, CommentId, FileId, EmailEntryId wrap UUIDs
    - CalendarEvent is a view-model: built from ORM rows, never persisted by core
    - All valid roles encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - CalendarEvent start/end typed loosely (datetime | str) because the
      wire format is ISO-8601 and the matcher must tolerate bad values
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

EventId = NewType("EventId", UUID)
CommentId = NewType("CommentId", UUID)
FileId = NewType("FileId", UUID)
EmailEntryId = NewType("EmailEntryId", UUID)

SETTINGS_ROW_ID = "default"


# ─── Enums ───────────────────────────────────────────────────────

class EmailRole(str, Enum):
    """Role of a person on the conference email list."""
    ATTENDEE = "attendee"
    SPEAKER = "speaker"
    ORGANIZER = "organizer"
    STAFF = "staff"


class Weekday(str, Enum):
    """Short weekday labels shown above the calendar day strip."""
    SUN = "SUN"
    MON = "MON"
    TUE = "TUE"
    WED = "WED"
    THU = "THU"
    FRI = "FRI"
    SAT = "SAT"


# ─── View Models ─────────────────────────────────────────────────

Instant = datetime | str


@dataclass(frozen=True)
class CalendarEvent:
    """What the calendar view and export builder need from an event."""
    id: str
    title: str
    start_time: Instant
    end_time: Instant
    location: str = ""
    description: str = ""
