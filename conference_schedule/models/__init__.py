"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Event is the aggregate root for comments and files

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from conference_schedule.models.event import Event  # noqa: F401
from conference_schedule.models.comment import Comment  # noqa: F401
from conference_schedule.models.event_file import EventFile  # noqa: F401
from conference_schedule.models.conference_settings import ConferenceSettings  # noqa: F401
from conference_schedule.models.email_entry import EmailListEntry  # noqa: F401
