from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterator, Optional, Tuple

import yaml

from app.domain.fortune_models import FORTUNE_FIELDS, FortuneResult

logger = logging.getLogger(__name__)


class FortuneCatalog:
    """
    FortuneCatalog
    --------------
    Fixed, read-only list of canned fortunes.

    - Loaded once from YAML at application start
    - Never mutated after loading
    - draw() picks an entry uniformly at random
    """

    def __init__(self, fortunes: Tuple[FortuneResult, ...]) -> None:
        if not fortunes:
            raise ValueError("Fortune catalog must contain at least one entry.")
        self._fortunes = tuple(fortunes)

    @classmethod
    def load(cls, path: Path) -> "FortuneCatalog":
        try:
            text = Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise RuntimeError(
                f"Invalid encoding in catalog file: {path}. "
                "The fortune catalog must be UTF-8 encoded."
            ) from e

        data = yaml.safe_load(text)

        if not isinstance(data, dict) or not isinstance(data.get("fortunes"), list):
            raise ValueError(
                f"Invalid fortune catalog in {path}. "
                "Missing required list: fortunes."
            )

        fortunes = tuple(
            cls._parse_entry(entry, index, path)
            for index, entry in enumerate(data["fortunes"])
        )
        catalog = cls(fortunes)

        logger.info(
            "Loaded fortune catalog %s:%s with %d entries from %s",
            data.get("catalog_id", "default"),
            data.get("version", "?"),
            len(catalog),
            path,
        )
        return catalog

    @staticmethod
    def _parse_entry(entry: object, index: int, path: Path) -> FortuneResult:
        if not isinstance(entry, dict):
            raise ValueError(f"Fortune #{index} in {path} must be a mapping.")

        missing = [
            name for name in FORTUNE_FIELDS
            if not isinstance(entry.get(name), str) or not entry[name].strip()
        ]
        if missing:
            raise ValueError(
                f"Fortune #{index} in {path} is missing fields: {', '.join(missing)}"
            )

        return FortuneResult(**{name: entry[name] for name in FORTUNE_FIELDS})

    @property
    def fortunes(self) -> Tuple[FortuneResult, ...]:
        return self._fortunes

    def draw(self, rng: Optional[random.Random] = None) -> FortuneResult:
        return (rng or random).choice(self._fortunes)

    def __contains__(self, item: object) -> bool:
        return item in self._fortunes

    def __iter__(self) -> Iterator[FortuneResult]:
        return iter(self._fortunes)

    def __len__(self) -> int:
        return len(self._fortunes)
