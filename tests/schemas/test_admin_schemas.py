"""Admin schemas — conference settings and email list validation."""

from datetime import date

import pytest
from pydantic import ValidationError

from conference_schedule.core.domain_types import EmailRole
from conference_schedule.schemas.admin import EmailCreate, SettingsUpdate


def test_settings_accept_plain_dates():
    s = SettingsUpdate(start_date="2025-07-17", end_date="2025-07-22")
    assert s.start_date == date(2025, 7, 17)


def test_settings_accept_browser_datetimes():
    s = SettingsUpdate(
        start_date="2025-07-17T04:00:00.000Z", end_date="2025-07-22T04:00:00.000Z",
    )
    assert (s.start_date, s.end_date) == (date(2025, 7, 17), date(2025, 7, 22))


def test_settings_reject_end_before_start():
    with pytest.raises(ValidationError, match="end_date cannot be before start_date"):
        SettingsUpdate(start_date="2025-07-22", end_date="2025-07-17")


def test_settings_none_text_becomes_empty():
    s = SettingsUpdate(start_date="2025-07-17", end_date="2025-07-17", address=None, notes=None)
    assert s.address == "" and s.notes == ""


def test_email_is_normalized():
    entry = EmailCreate(email="  Ana@Example.ORG ", name="Ana")
    assert entry.email == "ana@example.org"
    assert entry.role is EmailRole.ATTENDEE


@pytest.mark.parametrize("bad", ["not-an-email", "a@b", "two@@signs.org", ""])
def test_email_shape_is_checked(bad):
    with pytest.raises(ValidationError):
        EmailCreate(email=bad, name="Ana")


def test_email_role_must_be_known():
    with pytest.raises(ValidationError):
        EmailCreate(email="ana@example.org", name="Ana", role="keynoter")
