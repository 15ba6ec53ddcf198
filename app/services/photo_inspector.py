from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from app.domain.fortune_models import PhotoDimensions

logger = logging.getLogger(__name__)


def inspect_photo(path: Path) -> Optional[PhotoDimensions]:
    """
    Read the format and pixel size of an image without decoding it fully.

    Only used for logs and the client preview, so this
    MUST NEVER throw: unreadable or corrupted files yield None.
    """
    try:
        with Image.open(path) as img:
            width, height = img.size
            return PhotoDimensions(width=width, height=height, format=img.format)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        logger.warning("Could not read image %s: %s", path, e)
        return None


def describe_photo(dimensions: Optional[PhotoDimensions]) -> str:
    if dimensions is None:
        return "unreadable image"
    return f"{dimensions.format or 'image'} {dimensions.width}x{dimensions.height}"
