"""Tests for the storage backends."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from leanlens.exceptions import StorageError
from leanlens.storage import FileStorageBackend, InMemoryStorageBackend, StorageBackend


@pytest.fixture(params=["memory", "file"])
def backend(request, tmp_path: Path) -> StorageBackend:
    if request.param == "memory":
        return InMemoryStorageBackend()
    return FileStorageBackend(tmp_path / "store.json")


class TestBackendContract:
    def test_is_storage_backend(self, backend: StorageBackend) -> None:
        assert isinstance(backend, StorageBackend)

    def test_set_get(self, backend: StorageBackend) -> None:
        backend.set_item("a", "1")
        assert backend.get_item("a") == "1"

    def test_overwrite(self, backend: StorageBackend) -> None:
        backend.set_item("a", "1")
        backend.set_item("a", "2")
        assert backend.get_item("a") == "2"

    def test_missing_key(self, backend: StorageBackend) -> None:
        assert backend.get_item("missing") is None

    def test_remove(self, backend: StorageBackend) -> None:
        backend.set_item("a", "1")
        backend.remove_item("a")
        backend.remove_item("never-there")
        assert backend.get_item("a") is None

    def test_keys(self, backend: StorageBackend) -> None:
        backend.set_item("a", "1")
        backend.set_item("b", "2")
        assert sorted(backend.keys()) == ["a", "b"]


class TestFileStorageBackend:
    def test_persists_across_instances(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "store.json"
        FileStorageBackend(path).set_item("k", "v")
        assert FileStorageBackend(path).get_item("k") == "v"
        assert json.loads(path.read_text()) == {"k": "v"}

    def test_corrupt_file_treated_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("{not json")
        backend = FileStorageBackend(path)
        assert backend.keys() == []
        backend.set_item("k", "v")
        assert backend.get_item("k") == "v"

    def test_non_object_treated_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("[1, 2]")
        assert FileStorageBackend(path).keys() == []

    def test_unwritable_location_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        backend = FileStorageBackend(blocker / "store.json")
        with pytest.raises(StorageError):
            backend.set_item("k", "v")
