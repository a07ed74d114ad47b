"""Tests for the filesystem transcription store."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from transcriptinator.services.artifact_store import (
    ArtifactStore,
    InvalidFilenameError,
    NotFoundError,
    filename_for,
    sanitize_title,
)


def test_sanitize_title_replaces_non_alphanumerics() -> None:
    assert sanitize_title("My Video! #1") == "my_video___1"
    assert filename_for("My Video! #1") == "my_video___1.txt"
    assert sanitize_title("Ünïcode – dash") == "_n_code___dash"


def test_save_writes_content_and_returns_artifact(tmp_path: Path) -> None:
    store = ArtifactStore(tmp_path / "transcripts")

    artifact = store.save("My Video! #1", "hello")

    assert artifact.filename == "my_video___1.txt"
    assert artifact.title == "My Video! #1"
    assert artifact.content == "hello"
    assert artifact.created_at.tzinfo is not None
    assert (tmp_path / "transcripts" / "my_video___1.txt").read_text(encoding="utf-8") == "hello"


def test_save_overwrites_colliding_titles(tmp_path: Path) -> None:
    store = ArtifactStore(tmp_path)

    first = store.save("Hello, World", "first")
    second = store.save("hello  world", "second")

    assert first.filename == second.filename == "hello__world.txt"
    assert [entry.filename for entry in store.list()] == ["hello__world.txt"]
    assert store.read("hello__world.txt") == b"second"


def test_list_is_empty_for_missing_or_empty_root(tmp_path: Path) -> None:
    assert ArtifactStore(tmp_path / "missing").list() == []
    assert ArtifactStore(tmp_path).list() == []


def test_list_orders_newest_first_and_skips_other_files(tmp_path: Path) -> None:
    store = ArtifactStore(tmp_path)
    for index, title in enumerate(["first one", "second one", "third one"], start=1):
        artifact = store.save(title, title)
        stamp = 1_700_000_000 + index * 60
        os.utime(tmp_path / artifact.filename, (stamp, stamp))

    (tmp_path / "notes.md").write_text("ignored")
    (tmp_path / "folder.txt").mkdir()

    entries = store.list()

    assert [entry.filename for entry in entries] == ["third_one.txt", "second_one.txt", "first_one.txt"]
    assert [entry.title for entry in entries] == ["third one", "second one", "first one"]
    assert entries[0].created > entries[1].created > entries[2].created


def test_read_missing_file_raises_not_found(tmp_path: Path) -> None:
    store = ArtifactStore(tmp_path)
    with pytest.raises(NotFoundError):
        store.read("nonexistent.txt")


@pytest.mark.parametrize("filename", ["../secret.txt", "a/b.txt", "..\\secret.txt", "..", ".", ""])
def test_read_rejects_path_traversal(tmp_path: Path, filename: str) -> None:
    (tmp_path / "secret.txt").write_text("nope")
    store = ArtifactStore(tmp_path / "transcripts")

    with pytest.raises(InvalidFilenameError):
        store.read(filename)


def test_path_for_returns_existing_file(tmp_path: Path) -> None:
    store = ArtifactStore(tmp_path)
    artifact = store.save("Demo", "text")
    assert store.path_for(artifact.filename) == tmp_path / "demo.txt"


def test_save_releases_per_file_locks(tmp_path: Path) -> None:
    store = ArtifactStore(tmp_path)

    store.save("Demo", "one")
    store.save("Other", "two")

    assert store._locks == {}


def test_concurrent_saves_to_one_file_leave_a_whole_write(tmp_path: Path) -> None:
    store = ArtifactStore(tmp_path)
    contents = [str(index) * 50_000 for index in range(8)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        artifacts = list(pool.map(lambda content: store.save("Same Title", content), contents))

    assert {artifact.filename for artifact in artifacts} == {"same_title.txt"}
    assert store.read("same_title.txt").decode("utf-8") in contents
    assert store._locks == {}
