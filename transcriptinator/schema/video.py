"""Pydantic models describing YouTube videos and inbound video requests."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VideoReference(BaseModel):
    """A user-supplied URL paired with the video id extracted from it."""

    model_config = ConfigDict(frozen=True)

    raw_url: str
    video_id: str = Field(..., pattern=r"^[A-Za-z0-9_-]{11}$")


class VideoMetadata(BaseModel):
    """Title and duration reported by the video service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    video_id: str = Field(..., alias="videoId")
    duration_seconds: int = Field(..., ge=0, alias="duration")


class VideoUrlRequest(BaseModel):
    """Inbound payload carrying a single video URL."""

    url: str = Field(..., min_length=1, description="YouTube watch, embed or youtu.be URL")


class BulkTranscribeRequest(BaseModel):
    """Inbound payload carrying an ordered list of video URLs."""

    urls: list[Any]
