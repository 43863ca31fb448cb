"""ConferenceSettings ORM — singleton row with the conference dates and venue.

Invariants:
    - Exactly one row, id = "default" (SETTINGS_ROW_ID)
    - start_date <= end_date (checked by the admin schema)
"""

from datetime import date, datetime, timezone

from sqlalchemy import String, Text, Date, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from conference_schedule.core.domain_types import SETTINGS_ROW_ID
from conference_schedule.db.base import Base


class ConferenceSettings(Base):
    __tablename__ = "conference_settings"

    id: Mapped[str] = mapped_column(
        String(20), primary_key=True, default=SETTINGS_ROW_ID,
    )
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False, default="")
    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
