"""Event schemas — boundary validation for event create/update payloads."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from conference_schedule.schemas.comment import CommentCreate
from conference_schedule.schemas.event import EventCreate, EventUpdate


def _payload(**overrides):
    data = {
        "title": "Keynote",
        "description": "Opening talk",
        "start_time": "2025-07-17T14:00:00Z",
        "end_time": "2025-07-17T15:00:00Z",
        "location": "Hall A",
    }
    data.update(overrides)
    return data


def test_create_strips_title():
    assert EventCreate(**_payload(title="  Keynote  ")).title == "Keynote"


def test_create_rejects_whitespace_title():
    with pytest.raises(ValidationError):
        EventCreate(**_payload(title="   "))


def test_create_defaults_optional_text_to_empty():
    event = EventCreate(**_payload(description=None, location=None))
    assert event.description == ""
    assert event.location == ""


def test_create_parses_iso_datetimes():
    event = EventCreate(**_payload())
    assert event.start_time == datetime(2025, 7, 17, 14, 0, tzinfo=timezone.utc)


def test_create_allows_end_before_start():
    """Order is repaired by the conference-window clamp, not rejected."""
    event = EventCreate(**_payload(end_time="2025-07-17T13:00:00Z"))
    assert event.end_time < event.start_time


def test_update_accepts_mixed_naive_and_aware_times():
    """Order is checked by the route after localizing both values."""
    event = EventUpdate(**_payload(start_time="2025-07-17T14:00:00"))
    assert event.start_time.tzinfo is None
    assert event.end_time.tzinfo is not None


def test_update_rejects_unparseable_time():
    with pytest.raises(ValidationError):
        EventUpdate(**_payload(start_time="next thursday"))


def test_comment_requires_non_blank_author():
    with pytest.raises(ValidationError):
        CommentCreate(event_id=uuid4(), content="Great talk", author_name="  ")


def test_comment_strips_content():
    comment = CommentCreate(event_id=uuid4(), content=" Great talk ", author_name="Ana")
    assert comment.content == "Great talk"
