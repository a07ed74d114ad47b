"""FastAPI dependency providers for the transcription services."""

from __future__ import annotations

from fastapi import Depends

from transcriptinator.core.config import settings
from transcriptinator.services.artifact_store import ArtifactStore
from transcriptinator.services.batch_orchestrator import BatchOrchestrator
from transcriptinator.services.metadata_fetcher import MetadataFetcher
from transcriptinator.services.transcription_engine import PlaceholderTranscriptionEngine, TranscriptionEngine

_store = ArtifactStore(settings.transcripts_dir)


def get_store() -> ArtifactStore:
    """Return the process-wide store so per-file write locks are shared."""

    return _store


def get_fetcher() -> MetadataFetcher:
    return MetadataFetcher()


def get_engine() -> TranscriptionEngine:
    return PlaceholderTranscriptionEngine()


def get_orchestrator(
    fetcher: MetadataFetcher = Depends(get_fetcher),
    engine: TranscriptionEngine = Depends(get_engine),
    store: ArtifactStore = Depends(get_store),
) -> BatchOrchestrator:
    return BatchOrchestrator(fetcher, engine, store)
