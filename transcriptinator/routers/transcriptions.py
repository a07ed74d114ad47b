"""API endpoints for producing, listing and downloading transcriptions."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import FileResponse, JSONResponse

from transcriptinator.dependencies import get_orchestrator, get_store
from transcriptinator.schema.transcription import (
    BulkTranscribeResponse,
    TranscribeResponse,
    TranscriptionSummary,
)
from transcriptinator.schema.video import BulkTranscribeRequest, VideoUrlRequest
from transcriptinator.services.artifact_store import ArtifactStore, NotFoundError
from transcriptinator.services.batch_orchestrator import (
    BatchOrchestrator,
    BatchTooLargeError,
    EmptyBatchError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["transcriptions"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/transcribe", response_model=TranscribeResponse)
async def transcribe(
    payload: VideoUrlRequest,
    orchestrator: BatchOrchestrator = Depends(get_orchestrator),
) -> TranscribeResponse | JSONResponse:
    try:
        artifact = await orchestrator.transcribe(payload.url)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error transcribing video %s", payload.url)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    return TranscribeResponse(filename=artifact.filename, title=artifact.title)


@router.post("/bulk-transcribe", response_model=BulkTranscribeResponse)
async def bulk_transcribe(
    payload: BulkTranscribeRequest,
    orchestrator: BatchOrchestrator = Depends(get_orchestrator),
) -> BulkTranscribeResponse | JSONResponse:
    try:
        report = await orchestrator.run_batch(payload.urls)
    except (EmptyBatchError, BatchTooLargeError) as exc:
        return _error(status.HTTP_400_BAD_REQUEST, str(exc))

    return BulkTranscribeResponse(
        results=report.results,
        message=f"Processed {report.total_count} videos",
    )


@router.get("/download/{filename}", response_model=None)
async def download(filename: str, store: ArtifactStore = Depends(get_store)) -> FileResponse | JSONResponse:
    try:
        path = store.path_for(filename)
    except NotFoundError:
        return _error(status.HTTP_404_NOT_FOUND, "File not found")

    return FileResponse(path, media_type="text/plain; charset=utf-8", filename=path.name)


@router.get("/transcriptions", response_model=list[TranscriptionSummary])
async def list_transcriptions(store: ArtifactStore = Depends(get_store)) -> list[TranscriptionSummary] | JSONResponse:
    try:
        return store.list()
    except OSError:
        logger.exception("Error listing transcriptions")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to get transcriptions")
