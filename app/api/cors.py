from __future__ import annotations

import re
from typing import Dict, Optional

from fastapi.middleware.cors import CORSMiddleware
from starlette.datastructures import Headers
from starlette.responses import Response

from app.config.settings import Settings


class FortuneCORSMiddleware(CORSMiddleware):
    """
    CORSMiddleware whose preflight answer is always an empty 200.

    Allowed origins get the CORS headers; anything else gets none and
    the browser blocks the follow-up request itself.
    """

    def preflight_response(self, request_headers: Headers) -> Response:
        origin = request_headers["origin"]

        if not self.is_allowed_origin(origin=origin):
            return Response(status_code=200, headers={"Vary": "Origin"})

        headers = dict(self.preflight_headers)
        headers["Access-Control-Allow-Origin"] = origin
        return Response(status_code=200, headers=headers)


def cors_error_headers(settings: Settings, origin: Optional[str]) -> Dict[str, str]:
    """CORS headers for responses built outside the middleware stack (unhandled 500s)."""
    if not origin:
        return {}

    allowed = origin in settings.cors_origins or bool(
        settings.CORS_ALLOWED_ORIGIN_REGEX
        and re.fullmatch(settings.CORS_ALLOWED_ORIGIN_REGEX, origin)
    )
    if not allowed:
        return {}

    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Vary": "Origin",
    }
