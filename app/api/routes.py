from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile

from app.api.dependencies import get_orchestrator
from app.models.api_responses import (
    ApiStatusResponse,
    ErrorResponse,
    HealthResponse,
    UploadResponse,
)
from app.orchestrator.fortune_orchestrator import FortuneOrchestrator

router = APIRouter(prefix="/api", tags=["fortune"])
logger = logging.getLogger(__name__)


@router.get("", response_model=ApiStatusResponse)
async def api_root():
    return ApiStatusResponse(message="AI Fortune Teller API is running")


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness probe."""
    return HealthResponse(status="healthy", timestamp=datetime.now(timezone.utc))


# -----------------------------------------------------------
# POST /api/upload
# -----------------------------------------------------------
@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_photo(
    request: Request,
    photo: Optional[UploadFile] = File(None, description="Photo to read (image/*)"),
    orchestrator: FortuneOrchestrator = Depends(get_orchestrator),
):
    """
    Accept one photo and answer with a random fortune.

    The photo itself is never looked at beyond its type and size,
    and is deleted before the response is sent.
    """
    logger.info(
        "Upload request: origin=%s content_type=%s",
        request.headers.get("origin"),
        request.headers.get("content-type"),
    )

    reading = await orchestrator.tell(photo)
    return UploadResponse.from_reading(reading)
