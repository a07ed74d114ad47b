"""Sequential transcription of one or many video URLs."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Awaitable, Callable

from transcriptinator.core.config import settings
from transcriptinator.schema.transcription import BatchItemResult, BatchReport, TranscriptionArtifact
from transcriptinator.services.artifact_store import ArtifactStore
from transcriptinator.services.metadata_fetcher import MetadataFetcher
from transcriptinator.services.transcription_engine import TranscriptionEngine

logger = logging.getLogger(__name__)


class EmptyBatchError(ValueError):
    """Raised when a batch contains no URLs."""


class BatchTooLargeError(ValueError):
    """Raised when a batch exceeds the configured maximum size."""


class BatchOrchestrator:
    """Runs fetch, transcribe and save for each URL, one at a time."""

    def __init__(
        self,
        fetcher: MetadataFetcher,
        engine: TranscriptionEngine,
        store: ArtifactStore,
        *,
        delay_seconds: float | None = None,
        max_batch_size: int | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._fetcher = fetcher
        self._engine = engine
        self._store = store
        if delay_seconds is None:
            delay_seconds = max(settings.batch_delay_ms, 0) / 1000.0
        self._delay_seconds = delay_seconds
        self._max_batch_size = max_batch_size if max_batch_size is not None else settings.batch_max_size
        self._sleep = sleep

    async def transcribe(self, url: str) -> TranscriptionArtifact:
        """Fetch metadata for ``url``, produce its transcription and store it."""

        metadata = await self._fetcher.fetch_metadata(url)
        content = await self._engine.transcribe(metadata)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._store.save, metadata.title, content)

    async def run_batch(self, urls: Sequence[object]) -> BatchReport:
        """Process ``urls`` in order; one failing item, non-string entries included, never stops the rest."""

        if not urls:
            raise EmptyBatchError("URLs array is required")
        if self._max_batch_size is not None and len(urls) > self._max_batch_size:
            raise BatchTooLargeError(f"Batch exceeds the maximum of {self._max_batch_size} URLs")

        results: list[BatchItemResult] = []
        total = len(urls)

        for index, url in enumerate(urls, start=1):
            try:
                artifact = await self.transcribe(url)
            except Exception as exc:  # noqa: BLE001
                logger.warning(
                    "Batch item failed: %s",
                    exc,
                    extra={"index": index, "url": url},
                )
                results.append(BatchItemResult(index=index, success=False, url=url, error=str(exc)))
            else:
                logger.info("Batch item transcribed", extra={"index": index, "artifact": artifact.filename})
                results.append(
                    BatchItemResult(
                        index=index,
                        success=True,
                        url=url,
                        filename=artifact.filename,
                        title=artifact.title,
                    )
                )

            if index < total and self._delay_seconds > 0:
                await self._sleep(self._delay_seconds)

        logger.info(
            "Batch finished",
            extra={"total": total, "succeeded": sum(1 for result in results if result.success)},
        )
        return BatchReport(results=results, total_count=total)
