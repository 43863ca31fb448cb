"""Shared schema helpers."""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator

from conference_schedule.core.instants import assume_utc

# Stores without timezone support (SQLite) hand back naive UTC datetimes
UtcDateTime = Annotated[datetime, AfterValidator(assume_utc)]


def strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("cannot be empty or whitespace")
    return v
