"""FastAPI app entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from transcriptinator.core.config import settings
from transcriptinator.core.logging_config import configure_logging
from transcriptinator.routers import transcriptions, videos

logger = logging.getLogger(__name__)

_FIELD_MESSAGES = {
    "url": "URL is required",
    "urls": "URLs array is required",
}


def _validation_message(exc: RequestValidationError) -> str:
    for error in exc.errors():
        for part in error.get("loc", ()):
            if part in _FIELD_MESSAGES:
                return _FIELD_MESSAGES[part]
    return "Invalid request body"


def provision_directories() -> None:
    """Create the upload and transcript directories when missing."""

    for directory in (settings.uploads_dir, settings.transcripts_dir):
        directory.mkdir(parents=True, exist_ok=True)


def create_app() -> FastAPI:
    """Build FastAPI application."""

    configure_logging(settings.log_level)

    app = FastAPI(title="YTTranscriptinator", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(videos.router)
    app.include_router(transcriptions.router)

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": _validation_message(exc)},
        )

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc) or "Internal server error"},
        )

    @app.on_event("startup")
    async def _startup() -> None:
        provision_directories()
        logger.info("YTTranscriptinator is ready")

    @app.get("/healthz", tags=["health"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
