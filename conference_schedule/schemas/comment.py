"""Comment Schemas — request/response contracts for event comments.

Invariants:
    - content: 1-5000 chars, stripped, non-empty
    - author_name: 1-100 chars, stripped, non-empty
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from conference_schedule.schemas.common import UtcDateTime, strip_required


class CommentCreate(BaseModel):
    event_id: UUID
    content: str = Field(min_length=1, max_length=5000)
    author_name: str = Field(min_length=1, max_length=100)

    @field_validator("content", "author_name")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return strip_required(v)


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    event_id: UUID
    content: str
    author_name: str
    created_at: UtcDateTime
