from __future__ import annotations

import logging
import random
import time
import uuid
from typing import Optional

from starlette.datastructures import UploadFile

from app.domain.errors import FortuneProcessingError
from app.domain.fortune_models import FortuneReading
from app.fortunes.catalog import FortuneCatalog
from app.services.photo_inspector import describe_photo, inspect_photo
from app.services.photo_intake import PhotoIntake

logger = logging.getLogger(__name__)


class FortuneOrchestrator:
    """
    Runs one reading end to end:
    - Intake: validate and store the photo (client errors propagate as-is)
    - Inspect: log the image size, never fails
    - Draw: pick a canned fortune from the catalog
    - Discard: the stored photo is always deleted before returning
    """

    def __init__(
        self,
        catalog: FortuneCatalog,
        intake: PhotoIntake,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._catalog = catalog
        self._intake = intake
        self._rng = rng

    @property
    def catalog(self) -> FortuneCatalog:
        return self._catalog

    async def tell(self, upload: Optional[UploadFile]) -> FortuneReading:
        reading_id = str(uuid.uuid4())
        started = time.perf_counter()

        photo = await self._intake.receive(upload)

        try:
            dimensions = inspect_photo(photo.path)
            logger.info("[%s] Photo %s: %s", reading_id, photo.filename, describe_photo(dimensions))

            result = self._catalog.draw(self._rng)

            logger.info(
                "[%s] Fortune drawn in %.1f ms: %s",
                reading_id,
                (time.perf_counter() - started) * 1000,
                result.overall,
            )
            return FortuneReading(
                reading_id=reading_id,
                filename=photo.filename,
                result=result,
            )
        except Exception as e:
            logger.exception("[%s] Fortune processing failed", reading_id)
            raise FortuneProcessingError() from e
        finally:
            self._intake.discard(photo)
