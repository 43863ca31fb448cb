"""Comments — notes attached to events.

Invariants:
    - GET requires event_id and returns newest comments first
    - POST on a missing event is a 404
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from conference_schedule.api.dependencies import get_event_or_404
from conference_schedule.infrastructure.database import get_db
from conference_schedule.models.comment import Comment
from conference_schedule.schemas.comment import CommentCreate, CommentResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/comments", tags=["comments"])


@router.get("", response_model=list[CommentResponse])
async def list_comments(
    event_id: UUID = Query(...),
    db: AsyncSession = Depends(get_db),
):
    result = await db.execute(
        select(Comment)
        .where(Comment.event_id == event_id)
        .order_by(Comment.created_at.desc()),
    )
    comments = result.scalars().all()
    logger.info(
        f"Retrieved {len(comments)} comments", extra={"event_id": str(event_id)},
    )
    return [CommentResponse.model_validate(c) for c in comments]


@router.post(
    "", response_model=CommentResponse, status_code=status.HTTP_201_CREATED,
)
async def create_comment(body: CommentCreate, db: AsyncSession = Depends(get_db)):
    await get_event_or_404(body.event_id, db)
    comment = Comment(
        event_id=body.event_id,
        content=body.content,
        author_name=body.author_name,
    )
    db.add(comment)
    await db.commit()
    logger.info("Comment created", extra={"event_id": str(body.event_id)})
    return CommentResponse.model_validate(comment)
