"""Attachment Schemas — metadata returned for files attached to events."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, computed_field

from conference_schedule.schemas.common import UtcDateTime


class EventFileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    event_id: UUID
    filename: str
    content_type: str
    size_bytes: int
    created_at: UtcDateTime

    @computed_field
    @property
    def url(self) -> str:
        return f"/api/v1/events/{self.event_id}/files/{self.id}/download"
