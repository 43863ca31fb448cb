"""Day Matcher — selects the events shown under a calendar day.

Invariants:
    - Output is an order-preserving subset of the input (no reordering, no duplicates)
    - Only the day-of-month of the local start instant is compared; month and
      year are ignored because every event belongs to the single conference month
    - An event with an unparseable start is dropped and logged, never raised

Design Decisions:
    - Comparison isolated in matches_selected_day so a full-date rule can
      replace it without touching callers
"""

import logging
from datetime import tzinfo
from typing import Sequence, TypeVar

from conference_schedule.core.domain_types import Instant
from conference_schedule.core.errors import InvalidInstantError
from conference_schedule.core.instants import to_local

logger = logging.getLogger(__name__)

E = TypeVar("E")


def matches_selected_day(
    start_time: Instant, selected_day: int, local_tz: tzinfo | None = None,
) -> bool:
    """True when the local day-of-month of start_time equals selected_day.

    Raises InvalidInstantError when start_time cannot be parsed.
    """
    return to_local(start_time, local_tz, "start_time").day == selected_day


def match_events_to_day(
    events: Sequence[E], selected_day: int, local_tz: tzinfo | None = None,
) -> list[E]:
    """Events whose start falls on selected_day (day-of-month only).

    Works on anything with a ``start_time`` attribute (CalendarEvent, ORM rows).
    """
    matched: list[E] = []
    for event in events:
        try:
            if matches_selected_day(event.start_time, selected_day, local_tz):
                matched.append(event)
        except InvalidInstantError as e:
            logger.warning(
                f"Skipping event with invalid start time: {e.message}",
                extra={"event_id": str(getattr(event, "id", "")), "day": selected_day},
            )
    return matched
