from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Optional

FORTUNE_FIELDS = ("overall", "career", "love", "wealth", "health")


@dataclass(frozen=True)
class FortuneResult:
    overall: str   # 整体面相
    career: str    # 事业运势
    love: str      # 感情运势
    wealth: str    # 财运
    health: str    # 健康

    def as_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class StoredPhoto:
    """An accepted upload, spooled to disk until the request finishes."""
    filename: str                     # generated name, echoed to the client
    path: Path
    content_type: str                 # e.g. "image/png"
    original_filename: Optional[str]
    size_bytes: int


@dataclass(frozen=True)
class PhotoDimensions:
    width: int
    height: int
    format: Optional[str] = None      # e.g. "PNG", "JPEG"


@dataclass(frozen=True)
class FortuneReading:
    reading_id: str
    filename: str
    result: FortuneResult
