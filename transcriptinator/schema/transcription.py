"""Pydantic models for stored transcriptions and batch reports."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TranscriptionArtifact(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    title: str
    content: str
    created_at: datetime


class TranscriptionSummary(BaseModel):
    """Listing entry for a stored transcription file."""

    filename: str
    title: str
    created: datetime


class BatchItemResult(BaseModel):
    index: int = Field(..., ge=1)
    success: bool
    url: Any
    filename: str | None = None
    title: str | None = None
    error: str | None = None


class BatchReport(BaseModel):
    results: list[BatchItemResult]
    total_count: int


class TranscribeResponse(BaseModel):
    success: bool = True
    filename: str
    title: str
    message: str = "Transcription completed successfully"


class BulkTranscribeResponse(BaseModel):
    success: bool = True
    results: list[BatchItemResult]
    message: str
