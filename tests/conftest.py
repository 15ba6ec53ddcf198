"""Shared fixtures for the fortune teller test suite."""

from io import BytesIO
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from app.config.settings import Settings
from app.fortunes.catalog import FortuneCatalog
from main import create_app


def make_image_bytes(fmt: str = "PNG", size=(8, 6)) -> bytes:
    buf = BytesIO()
    Image.new("RGB", size, color=(200, 30, 30)).save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def image_factory():
    return make_image_bytes


@pytest.fixture
def png_bytes() -> bytes:
    return make_image_bytes()


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def test_settings(upload_dir: Path) -> Settings:
    return Settings(
        UPLOAD_DIR=upload_dir,
        UPLOAD_LIMIT=1,
        APP_ENV="development",
    )


@pytest.fixture
def catalog(test_settings: Settings) -> FortuneCatalog:
    return FortuneCatalog.load(test_settings.CATALOG_PATH)


@pytest.fixture
def app(test_settings: Settings):
    return create_app(test_settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
