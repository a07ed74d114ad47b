"""Transcription backends that turn video metadata into text."""

from __future__ import annotations

from abc import ABC, abstractmethod

from transcriptinator.schema.video import VideoMetadata

_PLACEHOLDER_TEMPLATE = """Transcription for: {title}

This is a mock transcription. In a real implementation, you would:
1. Use a proper speech-to-text service like Google Cloud Speech-to-Text, Azure Speech, or AWS Transcribe
2. Process the audio file to extract the actual spoken content
3. Return the accurate transcription

For demonstration purposes, this mock transcription shows the structure of what would be returned.

The video "{title}" would be transcribed here with the actual spoken content from the video.

This is a placeholder text that demonstrates how the final transcription would look when properly implemented with a real speech-to-text service."""


class TranscriptionEngine(ABC):
    """Base class for speech-to-text backends."""

    @abstractmethod
    async def transcribe(self, metadata: VideoMetadata) -> str:
        """Return the transcription text for the given video.

        Backends signal failure by raising; the batch orchestrator records the
        message against the item.
        """
        ...


class PlaceholderTranscriptionEngine(TranscriptionEngine):
    """Returns a fixed template naming the video; performs no audio work."""

    async def transcribe(self, metadata: VideoMetadata) -> str:
        return _PLACEHOLDER_TEMPLATE.format(title=metadata.title)
