"""API endpoint exposing video metadata lookups."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from transcriptinator.dependencies import get_fetcher
from transcriptinator.schema.video import VideoMetadata, VideoUrlRequest
from transcriptinator.services.metadata_fetcher import MetadataFetchError, MetadataFetcher
from transcriptinator.services.url_resolver import InvalidUrlError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["videos"])


@router.post("/video-info", response_model=VideoMetadata, response_model_by_alias=True)
async def video_info(
    payload: VideoUrlRequest,
    fetcher: MetadataFetcher = Depends(get_fetcher),
) -> VideoMetadata | JSONResponse:
    try:
        return await fetcher.fetch_metadata(payload.url)
    except (InvalidUrlError, MetadataFetchError) as exc:
        logger.info("Video info lookup failed: %s", exc)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})
