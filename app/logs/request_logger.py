import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log origin, method and path of every request, then its status and duration."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        logger.info(
            "%s %s origin=%s content_type=%s",
            request.method,
            request.url.path,
            request.headers.get("origin"),
            request.headers.get("content-type"),
        )

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s -> unhandled error (%.1f ms)",
                request.method,
                request.url.path,
                (time.perf_counter() - started) * 1000,
            )
            raise

        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response
