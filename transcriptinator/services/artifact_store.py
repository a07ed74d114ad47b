"""Filesystem store for transcription text files."""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path

from transcriptinator.schema.transcription import TranscriptionArtifact, TranscriptionSummary

logger = logging.getLogger(__name__)

_UNSAFE_CHARS_RE = re.compile(r"[^a-zA-Z0-9]")
ARTIFACT_SUFFIX = ".txt"


class NotFoundError(LookupError):
    """Raised when a requested transcription file does not exist."""


class InvalidFilenameError(NotFoundError):
    """Raised for download names that could escape the store directory."""


def sanitize_title(title: str) -> str:
    """Replace every non-alphanumeric character with ``_`` and lower-case."""

    return _UNSAFE_CHARS_RE.sub("_", title).lower()


def filename_for(title: str) -> str:
    return f"{sanitize_title(title)}{ARTIFACT_SUFFIX}"


def _validate_filename(filename: str) -> str:
    if (
        not filename
        or filename in (".", "..")
        or "/" in filename
        or "\\" in filename
        or "\x00" in filename
    ):
        raise InvalidFilenameError(f"Invalid filename: {filename!r}")
    return filename


class ArtifactStore:
    """Reads and writes ``<sanitized-title>.txt`` files under a root directory."""

    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)
        # filename -> (lock, number of writers holding or waiting on it)
        self._locks: dict[str, tuple[threading.Lock, int]] = {}
        self._locks_guard = threading.Lock()

    @contextmanager
    def _writer(self, filename: str) -> Iterator[None]:
        """Serialise writers of one file; save() may run from worker threads."""

        with self._locks_guard:
            lock, users = self._locks.get(filename, (None, 0))
            if lock is None:
                lock = threading.Lock()
            self._locks[filename] = (lock, users + 1)

        try:
            with lock:
                yield
        finally:
            with self._locks_guard:
                _, users = self._locks[filename]
                if users <= 1:
                    del self._locks[filename]
                else:
                    self._locks[filename] = (lock, users - 1)

    def save(self, title: str, content: str) -> TranscriptionArtifact:
        """Write ``content`` for ``title``, replacing any file with the same name."""

        filename = filename_for(title)
        self.root.mkdir(parents=True, exist_ok=True)
        path = self.root / filename

        with self._writer(filename):
            existed = path.exists()
            path.write_text(content, encoding="utf-8")
            created_at = datetime.now(timezone.utc)

        if existed:
            logger.info("Overwrote transcription %s", filename)
        else:
            logger.info("Saved transcription %s", filename)
        return TranscriptionArtifact(filename=filename, title=title, content=content, created_at=created_at)

    def list(self) -> list[TranscriptionSummary]:
        """Return stored transcriptions, newest first."""

        if not self.root.is_dir():
            return []

        entries: list[TranscriptionSummary] = []
        for path in self.root.iterdir():
            if path.suffix != ARTIFACT_SUFFIX or not path.is_file():
                continue
            modified = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
            entries.append(
                TranscriptionSummary(
                    filename=path.name,
                    title=path.stem.replace("_", " "),
                    created=modified,
                )
            )

        entries.sort(key=lambda entry: entry.created, reverse=True)
        return entries

    def path_for(self, filename: str) -> Path:
        """Return the on-disk path of an existing artifact."""

        path = self.root / _validate_filename(filename)
        if not path.is_file():
            raise NotFoundError("File not found")
        return path

    def read(self, filename: str) -> bytes:
        return self.path_for(filename).read_bytes()
