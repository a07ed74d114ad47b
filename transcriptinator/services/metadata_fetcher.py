"""Fetch video title and duration from the YouTube Data API."""

from __future__ import annotations

import logging
import re

import httpx
from pydantic import ValidationError

from transcriptinator.core.config import settings
from transcriptinator.schema.video import VideoMetadata
from transcriptinator.services.url_resolver import resolve

logger = logging.getLogger(__name__)

_ISO_DURATION_RE = re.compile(
    r"^P(?:(?P<days>\d+)D)?(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+)S)?)?$"
)


class MetadataFetchError(RuntimeError):
    """Raised when the video service cannot provide metadata for a video."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Failed to get video info: {message}")


def parse_iso8601_duration(value: str) -> int:
    """Convert a Data API duration such as ``PT1H2M3S`` into seconds."""

    match = _ISO_DURATION_RE.match(value or "")
    if not match or value in ("P", "PT"):
        raise ValueError(f"Unsupported duration format: {value!r}")

    parts = {key: int(number) if number else 0 for key, number in match.groupdict().items()}
    return parts["days"] * 86400 + parts["hours"] * 3600 + parts["minutes"] * 60 + parts["seconds"]


def _extract_fields(item: object) -> tuple[str, str]:
    """Pull the title and raw duration out of one ``videos`` item."""

    if not isinstance(item, dict):
        raise TypeError(f"Unexpected item type: {type(item).__name__}")

    snippet = item.get("snippet") or {}
    details = item.get("contentDetails") or {}
    if not isinstance(snippet, dict) or not isinstance(details, dict):
        raise TypeError("Unexpected snippet or contentDetails shape")

    title = snippet.get("title")
    if not isinstance(title, str):
        raise TypeError("Video title is not a string")
    if not title:
        raise MetadataFetchError("Video has no title")

    raw_duration = details.get("duration") or "P0D"
    if not isinstance(raw_duration, str):
        raise TypeError("Video duration is not a string")
    return title, raw_duration


class MetadataFetcher:
    """Resolve a URL and look up its video through the ``videos`` endpoint."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        api_base: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key if api_key is not None else settings.youtube_api_key
        self._api_base = (api_base or settings.youtube_api_base).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.metadata_timeout_seconds
        self._client = client

    async def fetch_metadata(self, raw_url: str) -> VideoMetadata:
        reference = resolve(raw_url)

        if not self._api_key:
            raise MetadataFetchError("Metadata lookup requires YTT_YOUTUBE_API_KEY")

        params = {
            "part": "snippet,contentDetails",
            "id": reference.video_id,
            "key": self._api_key,
        }
        payload = await self._get_json(f"{self._api_base}/videos", params)

        items = payload.get("items") or []
        if not isinstance(items, list):
            raise MetadataFetchError("Invalid response from YouTube Data API")
        if not items:
            raise MetadataFetchError("Video unavailable")

        try:
            title, raw_duration = _extract_fields(items[0])
            duration = parse_iso8601_duration(raw_duration)
            metadata = VideoMetadata(title=title, video_id=reference.video_id, duration_seconds=duration)
        except (KeyError, AttributeError, TypeError, ValidationError) as exc:
            raise MetadataFetchError("Invalid response from YouTube Data API") from exc
        except ValueError as exc:
            raise MetadataFetchError(str(exc)) from exc

        logger.info("Fetched metadata", extra={"video_id": reference.video_id})
        return metadata

    async def _get_json(self, url: str, params: dict[str, str]) -> dict:
        try:
            if self._client is not None:
                response = await self._client.get(url, params=params, timeout=self._timeout)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Video service request failed: %s", exc)
            raise MetadataFetchError(str(exc) or "Unable to contact YouTube Data API") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise MetadataFetchError("Invalid response from YouTube Data API") from exc

        if not isinstance(payload, dict):
            raise MetadataFetchError("Invalid response from YouTube Data API")
        return payload
