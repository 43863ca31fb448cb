"""Attachment Storage — event files on the local filesystem under upload_dir.

Invariants:
    - Files live at <root>/<event_id>/<file_id>-<sanitized filename>
    - Stored paths are relative to root; resolve() refuses paths escaping root
    - Uploads are streamed in chunks; size limit checked while streaming
    - Empty or oversized uploads leave nothing on disk

Design Decisions:
    - Chunked read loop over reading the whole body: bounded memory per upload
    - Accepts any object with async read(size) so routes can pass UploadFile directly
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol
from uuid import UUID

from conference_schedule.core.errors import FileStorageError, UploadRejectedError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class AsyncReadable(Protocol):
    async def read(self, size: int = -1) -> bytes: ...


@dataclass(frozen=True)
class StoredFile:
    """Result of a successful save."""
    path: str
    size_bytes: int


def sanitize_filename(filename: str) -> str:
    """Strip directories and anything outside [A-Za-z0-9._-]."""
    name = Path(filename.replace("\\", "/")).name
    name = re.sub(r"[^A-Za-z0-9._-]+", "_", name).strip("._")
    return name or "file"


class FileStorage:
    """Local-disk store for event attachments."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def resolve(self, relative_path: str) -> Path:
        root = self.root.resolve()
        target = (root / relative_path).resolve()
        if root not in target.parents:
            raise FileStorageError(f"Path outside upload directory: {relative_path}")
        return target

    async def save(
        self,
        event_id: UUID,
        file_id: UUID,
        filename: str,
        source: AsyncReadable,
        max_bytes: int,
    ) -> StoredFile:
        relative = f"{event_id}/{file_id}-{sanitize_filename(filename)}"
        target = self.resolve(relative)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            size = 0
            with target.open("wb") as out:
                while True:
                    chunk = await source.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > max_bytes:
                        raise UploadRejectedError(
                            f"File exceeds maximum allowed size ({max_bytes} bytes)",
                            http_status=413,
                        )
                    out.write(chunk)
        except UploadRejectedError:
            target.unlink(missing_ok=True)
            raise
        except OSError as e:
            target.unlink(missing_ok=True)
            logger.error(f"Failed to store attachment: {e}", extra={"filename": filename})
            raise FileStorageError("Could not store attachment") from e

        if size == 0:
            target.unlink(missing_ok=True)
            raise UploadRejectedError("Empty file is not allowed")

        logger.info(
            f"Stored attachment ({size} bytes)",
            extra={"event_id": str(event_id), "filename": filename},
        )
        return StoredFile(path=relative, size_bytes=size)

    def delete(self, relative_path: str) -> None:
        """Remove a stored file; missing files are ignored."""
        target = self.resolve(relative_path)
        try:
            target.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Failed to delete attachment {relative_path}: {e}")
            raise FileStorageError("Could not delete attachment") from e


_storage: FileStorage | None = None


def init_storage(root: str | Path) -> FileStorage:
    global _storage
    _storage = FileStorage(root)
    return _storage


def get_storage() -> FileStorage:
    """FastAPI dependency for attachment storage."""
    if _storage is None:
        raise RuntimeError("File storage not initialized")
    return _storage
