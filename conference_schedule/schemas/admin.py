"""Admin Schemas — conference settings and email list contracts.

Invariants:
    - SettingsUpdate: end_date >= start_date
    - Settings dates accept plain dates or full ISO date-times (date part kept)
    - EmailCreate.email is lower-cased and shape-checked; role is an EmailRole
"""

from datetime import date, datetime
from uuid import UUID

from dateutil import parser as dateutil_parser
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from conference_schedule.core.domain_types import EmailRole
from conference_schedule.schemas.common import UtcDateTime, strip_required

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class SettingsUpdate(BaseModel):
    start_date: date
    end_date: date
    address: str = Field("", max_length=1000)
    notes: str = Field("", max_length=10_000)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def date_part_of_datetime(cls, v):
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and "T" in v:
            try:
                return dateutil_parser.isoparse(v).date()
            except ValueError as e:
                raise ValueError(f"invalid date: {v}") from e
        return v

    @field_validator("address", "notes", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    @model_validator(mode="after")
    def validate_date_order(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class SettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    start_date: date
    end_date: date
    address: str
    notes: str
    updated_at: UtcDateTime


class EmailCreate(BaseModel):
    email: str = Field(max_length=320, pattern=_EMAIL_PATTERN)
    name: str = Field(min_length=1, max_length=200)
    role: EmailRole = EmailRole.ATTENDEE

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_required(v)


class EmailResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    name: str
    role: EmailRole
    created_at: UtcDateTime
