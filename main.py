from fastapi import FastAPI, Request, Response
from typing import Optional
import logging

import uvicorn

from app.api.cors import FortuneCORSMiddleware
from app.api.error_handlers import register_exception_handlers
from app.api.routes import router as fortune_router
from app.config.settings import Settings, settings
from app.fortunes.catalog import FortuneCatalog
from app.logs.request_logger import RequestLoggingMiddleware
from app.orchestrator.fortune_orchestrator import FortuneOrchestrator
from app.services.photo_intake import PhotoIntake

# Configure root logging once
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings
    logger.info("AI Fortune Teller service starting up (env=%s)", app_settings.APP_ENV)

    app = FastAPI(title="AI Fortune Teller API")

    catalog = FortuneCatalog.load(app_settings.CATALOG_PATH)
    intake = PhotoIntake(app_settings.UPLOAD_DIR, app_settings.max_upload_bytes)

    app.state.settings = app_settings
    app.state.orchestrator = FortuneOrchestrator(catalog, intake)

    # OPTIONS without preflight headers; real preflights are answered by FortuneCORSMiddleware
    @app.middleware("http")
    async def answer_options(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200)
        return await call_next(request)

    app.add_middleware(
        FortuneCORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_origin_regex=app_settings.CORS_ALLOWED_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=86400,
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app, app_settings)

    # Register routers
    app.include_router(fortune_router)

    logger.info(
        "Routers registered; upload limit %dMB, %d fortunes in catalog",
        app_settings.UPLOAD_LIMIT,
        len(catalog),
    )
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
