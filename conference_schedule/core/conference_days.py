"""Conference Days — the day strip and the new-event window for a conference.

Invariants:
    - conference_days is inclusive of both start and end dates
    - end before start yields an empty strip (never raises)
    - clamp_event_window keeps start inside [conference_start, conference_end]
      and end no later than conference_end
    - New events default to one hour long

Design Decisions:
    - Calendar-date arithmetic only (date objects), so DST shifts never
      add or drop a day from the strip
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo

from conference_schedule.core.domain_types import Weekday

DEFAULT_EVENT_DURATION = timedelta(hours=1)

# date.weekday(): Monday == 0
_WEEKDAYS = (
    Weekday.MON, Weekday.TUE, Weekday.WED, Weekday.THU,
    Weekday.FRI, Weekday.SAT, Weekday.SUN,
)


@dataclass(frozen=True)
class ConferenceDay:
    """One cell of the calendar day strip."""
    date: date
    day_of_month: int
    weekday: Weekday


def conference_days(start: date, end: date) -> list[ConferenceDay]:
    """Every calendar day from start through end."""
    if isinstance(start, datetime):
        start = start.date()
    if isinstance(end, datetime):
        end = end.date()
    span = (end - start).days
    days = []
    for offset in range(span + 1):
        current = start + timedelta(days=offset)
        days.append(ConferenceDay(
            date=current,
            day_of_month=current.day,
            weekday=_WEEKDAYS[current.weekday()],
        ))
    return days


def conference_window(
    start: date, end: date, local_tz: tzinfo,
) -> tuple[datetime, datetime]:
    """First and last second of the conference in local time."""
    return (
        datetime.combine(start, time.min, tzinfo=local_tz),
        datetime.combine(end, time(23, 59, 59), tzinfo=local_tz),
    )


def initial_start(
    today: datetime, conference_start: datetime, conference_end: datetime,
) -> datetime:
    """Today when the conference is running, otherwise its first moment."""
    if conference_start <= today <= conference_end:
        return today
    return conference_start


def clamp_event_window(
    start: datetime,
    end: datetime,
    conference_start: datetime,
    conference_end: datetime,
) -> tuple[datetime, datetime]:
    """Normalise a draft event's start/end into the conference window."""
    if start < conference_start:
        start = conference_start
    elif start > conference_end:
        start = conference_end

    if end < start:
        end = start + DEFAULT_EVENT_DURATION
    if end > conference_end:
        end = conference_end
    return start, end
