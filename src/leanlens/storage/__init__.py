"""Persistence layer -- namespaced storage for processes and analyses."""

from leanlens.storage.backends import FileStorageBackend, InMemoryStorageBackend, StorageBackend
from leanlens.storage.repository import AssessmentRepository

__all__ = [
    "AssessmentRepository",
    "FileStorageBackend",
    "InMemoryStorageBackend",
    "StorageBackend",
]
