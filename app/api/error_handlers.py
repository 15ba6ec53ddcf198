from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.cors import cors_error_headers
from app.config.settings import Settings
from app.domain.errors import FortuneProcessingError, UploadRejectedError

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "服务器内部错误"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Map every error the API can raise onto an `{"error": ...}` body."""

    @app.exception_handler(UploadRejectedError)
    async def upload_rejected_handler(request: Request, exc: UploadRejectedError):
        logger.info("Upload rejected on %s: %s", request.url.path, exc.message)
        return _error(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(FortuneProcessingError)
    async def processing_error_handler(request: Request, exc: FortuneProcessingError):
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        logger.info("Request validation failed on %s: %s", request.url.path, errors)
        return _error(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        message = GENERIC_SERVER_ERROR if settings.is_production else str(exc)
        # Rendered outside the CORS middleware, so allowed origins need the headers here
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": message or GENERIC_SERVER_ERROR},
            headers=cors_error_headers(settings, request.headers.get("origin")),
        )
