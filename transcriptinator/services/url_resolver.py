"""Utilities for extracting canonical video ids from YouTube URLs."""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlparse

from transcriptinator.schema.video import VideoReference

VIDEO_ID_REGEX = re.compile(r"^[A-Za-z0-9_-]{11}$")
WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

_YOUTUBE_HOSTS = {
    "youtube.com",
    "www.youtube.com",
    "m.youtube.com",
    "music.youtube.com",
    "youtube-nocookie.com",
    "www.youtube-nocookie.com",
}
_SHORT_HOSTS = {"youtu.be", "www.youtu.be"}
_ID_PATH_PREFIXES = {"embed", "v", "e", "shorts", "live"}


class InvalidUrlError(ValueError):
    """Raised when a URL does not carry a recognisable YouTube video id."""


def canonical_watch_url(video_id: str) -> str:
    return WATCH_URL.format(video_id=video_id)


def _candidate_id(raw: str) -> str | None:
    # Scheme-less input such as "youtu.be/abc" parses with an empty netloc.
    parsed = urlparse(raw if "://" in raw else f"https://{raw}")
    host = (parsed.hostname or "").lower()
    parts = [part for part in parsed.path.split("/") if part]

    if host in _SHORT_HOSTS:
        return parts[0] if parts else None

    if host not in _YOUTUBE_HOSTS:
        return None

    if parts and parts[0] == "watch":
        video_ids = parse_qs(parsed.query).get("v")
        return video_ids[0] if video_ids else None

    if len(parts) >= 2 and parts[0] in _ID_PATH_PREFIXES:
        return parts[1]

    return None


def resolve(raw_url: str) -> VideoReference:
    """Resolve a user-supplied URL into a :class:`VideoReference`.

    Supports:
      * Watch pages (``youtube.com/watch?v=<id>``, any query position)
      * Embed style paths (``/embed/<id>``, ``/v/<id>``, ``/shorts/<id>``, ``/live/<id>``)
      * Short links (``youtu.be/<id>``)

    No network call is made.
    """

    if not isinstance(raw_url, str):
        raise InvalidUrlError("Invalid YouTube URL")

    identifier = raw_url.strip()
    if not identifier:
        raise InvalidUrlError("Invalid YouTube URL")

    candidate = _candidate_id(identifier)
    if candidate is None or not VIDEO_ID_REGEX.match(candidate):
        raise InvalidUrlError("Invalid YouTube URL")

    return VideoReference(raw_url=raw_url, video_id=candidate)
