"""Admin Email List — people who receive conference mail.

Invariants:
    - Listed newest first
    - Addresses are unique after lower-casing; a duplicate POST is a 409
    - DELETE on a missing entry is a 404
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from conference_schedule.core.errors import DuplicateResourceError, ResourceNotFoundError
from conference_schedule.infrastructure.database import get_db
from conference_schedule.models.email_entry import EmailListEntry
from conference_schedule.schemas.admin import EmailCreate, EmailResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/admin/emails", tags=["admin"])


@router.get("", response_model=list[EmailResponse])
async def list_emails(db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(EmailListEntry).order_by(EmailListEntry.created_at.desc()),
    )
    return [EmailResponse.model_validate(e) for e in result.scalars().all()]


@router.post(
    "", response_model=EmailResponse, status_code=status.HTTP_201_CREATED,
)
async def add_email(body: EmailCreate, db: AsyncSession = Depends(get_db)):
    entry = EmailListEntry(email=body.email, name=body.name, role=body.role.value)
    db.add(entry)
    try:
        await db.commit()
    except IntegrityError as e:
        # unique index on email; also covers two concurrent POSTs
        await db.rollback()
        raise DuplicateResourceError("Email", body.email) from e
    logger.info(f"Email list entry added ({body.role.value})")
    return EmailResponse.model_validate(entry)


@router.delete("/{entry_id}")
async def delete_email(entry_id: UUID, db: AsyncSession = Depends(get_db)):
    entry = await db.get(EmailListEntry, entry_id)
    if not entry:
        raise ResourceNotFoundError("Email", str(entry_id))
    await db.delete(entry)
    await db.commit()
    logger.info("Email list entry removed")
    return {"message": "Email deleted successfully"}
