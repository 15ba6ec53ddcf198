"""Unit tests for the reading pipeline: intake -> draw -> discard."""

import random
from io import BytesIO

import pytest
from starlette.datastructures import Headers, UploadFile

from app.domain.errors import FortuneProcessingError, UnsupportedMediaTypeError
from app.orchestrator.fortune_orchestrator import FortuneOrchestrator
from app.services.photo_intake import PhotoIntake


def make_upload(data: bytes, content_type: str = "image/png") -> UploadFile:
    return UploadFile(
        file=BytesIO(data),
        filename="face.png",
        headers=Headers({"content-type": content_type}),
    )


@pytest.fixture
def intake(upload_dir):
    return PhotoIntake(upload_dir, max_bytes=1024 * 1024)


class TestFortuneOrchestrator:

    @pytest.mark.asyncio
    async def test_reading_contains_catalog_entry(self, catalog, intake, png_bytes):
        orchestrator = FortuneOrchestrator(catalog, intake)

        reading = await orchestrator.tell(make_upload(png_bytes))

        assert reading.result in catalog
        assert reading.filename.endswith(".png")
        assert reading.reading_id

    @pytest.mark.asyncio
    async def test_seeded_rng_is_used(self, catalog, intake, png_bytes):
        expected = random.Random(3).choice(catalog.fortunes)
        orchestrator = FortuneOrchestrator(catalog, intake, rng=random.Random(3))

        reading = await orchestrator.tell(make_upload(png_bytes))

        assert reading.result == expected

    @pytest.mark.asyncio
    async def test_photo_discarded_after_reading(self, catalog, intake, upload_dir, png_bytes):
        orchestrator = FortuneOrchestrator(catalog, intake)

        await orchestrator.tell(make_upload(png_bytes))

        assert list(upload_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_rejection_propagates_unchanged(self, catalog, intake):
        orchestrator = FortuneOrchestrator(catalog, intake)

        with pytest.raises(UnsupportedMediaTypeError):
            await orchestrator.tell(make_upload(b"text", content_type="text/plain"))

    @pytest.mark.asyncio
    async def test_draw_failure_is_wrapped_and_photo_discarded(
        self, catalog, intake, upload_dir, png_bytes, monkeypatch
    ):
        def explode(rng=None):
            raise KeyError("no fortunes")

        monkeypatch.setattr(catalog, "draw", explode)
        orchestrator = FortuneOrchestrator(catalog, intake)

        with pytest.raises(FortuneProcessingError) as exc_info:
            await orchestrator.tell(make_upload(png_bytes))

        assert exc_info.value.message == "文件处理失败"
        assert isinstance(exc_info.value.__cause__, KeyError)
        assert list(upload_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_failed_delete_is_not_surfaced(self, catalog, intake, png_bytes, monkeypatch):
        def locked(self, missing_ok=False):
            raise PermissionError("file is locked")

        monkeypatch.setattr("pathlib.Path.unlink", locked)
        orchestrator = FortuneOrchestrator(catalog, intake)

        reading = await orchestrator.tell(make_upload(png_bytes))

        assert reading.result in catalog
