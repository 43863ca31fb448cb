"""Event ORM — a scheduled conference session.

Invariants:
    - id is UUID primary key (client-side default)
    - start_time/end_time are timezone-aware; end_time > start_time is expected,
      enforced by schemas, not the table
    - Deleting an event deletes its comments and files (ORM + FK cascade)

Design Decisions:
    - comments/files loaded with selectin: every event response embeds both
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from conference_schedule.db.base import Base


class Event(Base):
    """Event aggregate root — owns comments and attached files."""
    __tablename__ = "events"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    start_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )
    end_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    location: Mapped[str] = mapped_column(String(300), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="event",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="desc(Comment.created_at)",
    )
    files: Mapped[list["EventFile"]] = relationship(
        "EventFile", back_populates="event",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="EventFile.created_at",
    )
