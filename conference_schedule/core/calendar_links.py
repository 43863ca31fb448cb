"""Calendar Links — "Add to Calendar" payloads for a single event.

Invariants:
    - Timestamps rendered as compact UTC (YYYYMMDDThhmmssZ), sub-seconds dropped
    - The composite description is built once and shared by both formats
    - ICS lines end with CRLF; newlines inside text fields become the two chars "\\n"
    - Pure: no IO, no network, identical input gives byte-identical output
    - Unparseable start/end raise InvalidInstantError (no sensible default exists)

Design Decisions:
    - ICS assembled line by line instead of through an iCalendar library:
      the document shape (field order, no PRODID/UID/DTSTAMP) is fixed
    - "/" kept literal in query values so the dates pair reads start/end
"""

import re
from dataclasses import dataclass
from datetime import tzinfo
from urllib.parse import urlencode

from conference_schedule.core.domain_types import CalendarEvent
from conference_schedule.core.instants import to_utc

GOOGLE_CALENDAR_RENDER_URL = "https://calendar.google.com/calendar/render"
ICS_LINE_ENDING = "\r\n"
ICS_MEDIA_TYPE = "text/calendar; charset=utf-8"


@dataclass(frozen=True)
class ExportLinks:
    """Google Calendar deep link plus the matching ICS document."""
    google_url: str
    ics_text: str

    def ics_bytes(self) -> bytes:
        return self.ics_text.encode("utf-8")


def format_compact_utc(value, local_tz: tzinfo | None = None, field_name: str = "instant") -> str:
    """2025-07-17T14:00:00.123Z -> 20250717T140000Z"""
    return to_utc(value, local_tz, field_name).strftime("%Y%m%dT%H%M%SZ")


def compose_export_description(description: str | None, location: str | None) -> str:
    return f"{description or ''}\n\nLocation: {location or ''}"


def escape_ics_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n").replace("\n", "\\n")


def build_google_calendar_url(
    title: str, details: str, start_compact: str, end_compact: str, location: str,
) -> str:
    query = urlencode(
        [
            ("action", "TEMPLATE"),
            ("text", title),
            ("details", details),
            ("dates", f"{start_compact}/{end_compact}"),
            ("location", location),
        ],
        safe="/",
    )
    return f"{GOOGLE_CALENDAR_RENDER_URL}?{query}"


def build_ics_text(
    title: str, details: str, start_compact: str, end_compact: str, location: str,
) -> str:
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        "BEGIN:VEVENT",
        f"DTSTART:{start_compact}",
        f"DTEND:{end_compact}",
        f"SUMMARY:{escape_ics_newlines(title)}",
        f"DESCRIPTION:{escape_ics_newlines(details)}",
        f"LOCATION:{escape_ics_newlines(location)}",
        "END:VEVENT",
        "END:VCALENDAR",
    ]
    return ICS_LINE_ENDING.join(lines) + ICS_LINE_ENDING


def build_export_links(event: CalendarEvent, local_tz: tzinfo | None = None) -> ExportLinks:
    """Google Calendar URL and ICS text for one event.

    Raises InvalidInstantError when start_time or end_time is unparseable.
    """
    start_compact = format_compact_utc(event.start_time, local_tz, "start_time")
    end_compact = format_compact_utc(event.end_time, local_tz, "end_time")
    title = event.title or ""
    location = event.location or ""
    details = compose_export_description(event.description, location)

    return ExportLinks(
        google_url=build_google_calendar_url(
            title, details, start_compact, end_compact, location,
        ),
        ics_text=build_ics_text(
            title, details, start_compact, end_compact, location,
        ),
    )


def ics_filename(title: str | None) -> str:
    """Attachment name for the ICS download: "Opening Keynote!" -> "opening-keynote.ics"."""
    slug = re.sub(r"[^a-z0-9]+", "-", (title or "").lower()).strip("-")
    return f"{slug or 'event'}.ics"
