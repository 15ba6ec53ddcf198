from __future__ import annotations

import logging
import random
import time
from pathlib import Path
from typing import Optional

from starlette.datastructures import UploadFile

from app.domain.errors import (
    FileTooLargeError,
    NoFileUploadedError,
    UnsupportedMediaTypeError,
)
from app.domain.fortune_models import StoredPhoto

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


class PhotoIntake:
    """
    PhotoIntake
    -----------
    Accepts a single uploaded photo and spools it to the upload directory.

    Responsibilities:
    - Reject a missing file, a non-image content type, or an oversized file
    - Store the file under a collision-resistant name
    - Delete the stored file once the request is done (best effort)
    """

    def __init__(self, upload_dir: Path, max_bytes: int) -> None:
        self._upload_dir = Path(upload_dir)
        self._max_bytes = max_bytes
        self._limit_mb = max_bytes // (1024 * 1024)

        self._upload_dir.mkdir(parents=True, exist_ok=True)

    async def receive(self, upload: Optional[UploadFile]) -> StoredPhoto:
        if upload is None or not upload.filename:
            raise NoFileUploadedError()

        content_type = (upload.content_type or "").lower()
        if not content_type.startswith("image/"):
            logger.info(
                "Rejected upload %r with content type %r", upload.filename, content_type
            )
            raise UnsupportedMediaTypeError(content_type)

        filename = self._unique_filename(upload.filename)
        path = self._upload_dir / filename
        size = 0

        try:
            with path.open("wb") as out:
                while True:
                    chunk = await upload.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    size += len(chunk)
                    if size > self._max_bytes:
                        raise FileTooLargeError(self._limit_mb)
                    out.write(chunk)
        except BaseException:
            self._remove(path)
            raise

        logger.info(
            "Stored upload %r as %s (%d bytes, %s)",
            upload.filename,
            filename,
            size,
            content_type,
        )

        return StoredPhoto(
            filename=filename,
            path=path,
            content_type=content_type,
            original_filename=upload.filename,
            size_bytes=size,
        )

    def discard(self, photo: StoredPhoto) -> None:
        """Delete the stored file. Never raises."""
        self._remove(photo.path)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _unique_filename(original: str) -> str:
        # <epoch-ms>-<random><ext>, e.g. 1711929600000-482913377.jpg
        suffix = Path(original).suffix.lower()
        return f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}{suffix}"

    @staticmethod
    def _remove(path: Path) -> None:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Failed to delete upload %s: %s", path, e)
