"""Key-value storage backends.

Defines the :class:`StorageBackend` protocol and two concrete adapters:
:class:`InMemoryStorageBackend` for tests and one-off runs, and
:class:`FileStorageBackend`, which keeps the whole key space in a single
JSON document on disk.  Values are opaque strings; the repository layer
owns serialization.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol, runtime_checkable

from leanlens.exceptions import StorageError

logger = logging.getLogger(__name__)


@runtime_checkable
class StorageBackend(Protocol):
    """Protocol for string key-value stores used by :class:`AssessmentRepository`."""

    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""
        ...

    def get_item(self, key: str) -> str | None:
        """Return the value for *key*, or ``None`` if missing."""
        ...

    def remove_item(self, key: str) -> None:
        """Delete *key*; missing keys are ignored."""
        ...

    def keys(self) -> list[str]:
        """Return all stored keys."""
        ...


class InMemoryStorageBackend:
    """Dict-backed storage; contents vanish with the instance."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)


class FileStorageBackend:
    """Storage persisted as one JSON object in *path*.

    The file is re-read on every call and rewritten through a temporary
    file, so separate processes see each other's writes (last write wins).
    An unreadable or corrupt file is treated as empty.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable store %s: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store %s: expected a JSON object", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, items: dict[str, str]) -> None:
        tmp_name: str | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".store-", suffix=".json")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(items, fh, indent=2)
            os.replace(tmp_name, self._path)
        except OSError as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Cannot write store {self._path}: {exc}") from exc

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if key in items:
            del items[key]
            self._write(items)

    def keys(self) -> list[str]:
        return list(self._read())
