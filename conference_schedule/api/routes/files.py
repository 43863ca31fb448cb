"""Event Files — upload, list, download and remove event attachments.

Invariants:
    - Uploads larger than max_upload_bytes are rejected with 413, empty ones with 400
    - A stored file never outlives a failed DB commit
    - Download serves the stored bytes with the original filename

Design Decisions:
    - File id generated before storage so the on-disk name and the row agree
"""

import logging
import uuid
from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile, status
from fastapi.responses import FileResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from conference_schedule.api.dependencies import get_event_or_404
from conference_schedule.config import get_settings
from conference_schedule.core.errors import (
    ErrorContext, ResourceNotFoundError, UploadRejectedError,
)
from conference_schedule.infrastructure.database import get_db
from conference_schedule.infrastructure.file_storage import FileStorage, get_storage
from conference_schedule.models.event_file import EventFile
from conference_schedule.schemas.event_file import EventFileResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/events", tags=["files"])


async def _get_file_or_404(
    event_id: UUID, file_id: UUID, db: AsyncSession,
) -> EventFile:
    result = await db.execute(
        select(EventFile).where(
            EventFile.id == file_id, EventFile.event_id == event_id,
        ),
    )
    event_file = result.scalar_one_or_none()
    if not event_file:
        raise ResourceNotFoundError(
            "File", str(file_id), ErrorContext(event_id=str(event_id)),
        )
    return event_file


@router.get("/{event_id}/files", response_model=list[EventFileResponse])
async def list_files(event_id: UUID, db: AsyncSession = Depends(get_db)):
    event = await get_event_or_404(event_id, db)
    return [EventFileResponse.model_validate(f) for f in event.files]


@router.post(
    "/{event_id}/files",
    response_model=EventFileResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_file(
    event_id: UUID,
    file: UploadFile = File(...),
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_storage),
):
    """Attach an uploaded file to an event."""
    await get_event_or_404(event_id, db)
    if not file.filename:
        raise UploadRejectedError("Filename is required")

    file_id = uuid.uuid4()
    stored = await storage.save(
        event_id, file_id, file.filename, file, get_settings().max_upload_bytes,
    )
    event_file = EventFile(
        id=file_id,
        event_id=event_id,
        filename=file.filename,
        path=stored.path,
        content_type=file.content_type or "application/octet-stream",
        size_bytes=stored.size_bytes,
    )
    db.add(event_file)
    try:
        await db.commit()
    except Exception:
        storage.delete(stored.path)
        raise
    logger.info(
        f"File attached ({stored.size_bytes} bytes)",
        extra={"event_id": str(event_id), "filename": file.filename},
    )
    return EventFileResponse.model_validate(event_file)


@router.get("/{event_id}/files/{file_id}/download")
async def download_file(
    event_id: UUID,
    file_id: UUID,
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_storage),
):
    event_file = await _get_file_or_404(event_id, file_id, db)
    path = storage.resolve(event_file.path)
    if not path.is_file():
        raise ResourceNotFoundError("File", str(file_id))
    return FileResponse(
        path, media_type=event_file.content_type, filename=event_file.filename,
    )


@router.delete("/{event_id}/files/{file_id}")
async def delete_file(
    event_id: UUID,
    file_id: UUID,
    db: AsyncSession = Depends(get_db),
    storage: FileStorage = Depends(get_storage),
):
    event_file = await _get_file_or_404(event_id, file_id, db)
    stored_path = event_file.path
    await db.delete(event_file)
    await db.commit()
    storage.delete(stored_path)
    logger.info("File removed", extra={"event_id": str(event_id)})
    return {"message": "File deleted successfully"}
