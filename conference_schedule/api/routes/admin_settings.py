"""Admin Settings — conference dates, venue address and notes.

Invariants:
    - GET never 404s: the default row is created on first read
    - PUT upserts the single "default" row; end_date before start_date is a 400
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from conference_schedule.api.dependencies import get_or_create_settings
from conference_schedule.infrastructure.database import get_db
from conference_schedule.schemas.admin import SettingsResponse, SettingsUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/admin/settings", tags=["admin"])


@router.get("", response_model=SettingsResponse)
async def get_conference_settings(db: AsyncSession = Depends(get_db)):
    settings_row = await get_or_create_settings(db)
    return SettingsResponse.model_validate(settings_row)


@router.put("", response_model=SettingsResponse)
async def update_conference_settings(
    body: SettingsUpdate, db: AsyncSession = Depends(get_db),
):
    settings_row = await get_or_create_settings(db)
    settings_row.start_date = body.start_date
    settings_row.end_date = body.end_date
    settings_row.address = body.address
    settings_row.notes = body.notes
    settings_row.updated_at = datetime.now(timezone.utc)
    await db.commit()
    logger.info(
        f"Conference settings updated: {body.start_date} to {body.end_date}",
    )
    return SettingsResponse.model_validate(settings_row)
