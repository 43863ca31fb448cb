"""Instants — parse wire date-times and move them between local time and UTC.

Invariants:
    - parse_instant accepts datetime objects or ISO-8601 strings, nothing else
    - Naive datetimes are wall-clock times in the local zone (browser semantics)
    - Every failure surfaces as InvalidInstantError, never ValueError/TypeError

Design Decisions:
    - dateutil.parser.isoparse over datetime.fromisoformat: accepts the "Z"
      suffix and reduced-precision forms browsers emit
    - Local zone resolved by dateutil.tz (tzlocal by default, IANA name when configured)
"""

from datetime import datetime, timezone, tzinfo

from dateutil import parser as dateutil_parser
from dateutil import tz as dateutil_tz

from conference_schedule.core.domain_types import Instant
from conference_schedule.core.errors import InvalidInstantError


def resolve_timezone(name: str | None = None) -> tzinfo:
    """IANA zone for `name`, or the process-local zone when name is empty."""
    if not name:
        return dateutil_tz.tzlocal()
    zone = dateutil_tz.gettz(name)
    if zone is None:
        raise ValueError(f"Unknown timezone: {name}")
    return zone


def parse_instant(value: Instant, field_name: str = "instant") -> datetime:
    """Parse a datetime or ISO-8601 string. Raises InvalidInstantError."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidInstantError(value, field_name)
    try:
        return dateutil_parser.isoparse(value.strip())
    except (ValueError, OverflowError) as e:
        raise InvalidInstantError(value, field_name) from e


def to_local(value: Instant, local_tz: tzinfo | None = None, field_name: str = "instant") -> datetime:
    """Instant as wall-clock time in the local zone."""
    dt = parse_instant(value, field_name)
    zone = local_tz or dateutil_tz.tzlocal()
    if dt.tzinfo is None:
        return dt.replace(tzinfo=zone)
    return _convert(dt, zone, value, field_name)


def to_utc(value: Instant, local_tz: tzinfo | None = None, field_name: str = "instant") -> datetime:
    """Instant converted to UTC; naive values are taken as local time first."""
    return _convert(to_local(value, local_tz, field_name), timezone.utc, value, field_name)


def _convert(dt: datetime, zone: tzinfo, value: Instant, field_name: str) -> datetime:
    # shifting near datetime.min/max leaves the representable range
    try:
        return dt.astimezone(zone)
    except (OverflowError, ValueError) as e:
        raise InvalidInstantError(value, field_name) from e


def assume_utc(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from stores that drop tzinfo."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt
