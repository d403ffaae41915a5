"""Namespaced persistence for processes, analyses, and assessments.

Every record is stored as JSON under ``<namespace>:<kind>:<id>``, where
*kind* is ``assessment``, ``process`` or ``analysis``.  Analyses are keyed
by the id of the process they describe.  The namespace keeps leanlens data
apart from anything else sharing the same backend, and
:meth:`AssessmentRepository.clear_all_data` only touches keys under it.

Loads never raise: a missing key or a record that no longer parses
returns ``None``.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeVar

from pydantic import ValidationError

from leanlens.config import get_config
from leanlens.models import Process, ProcessAnalysis, ProcessAssessment
from leanlens.models.base import LeanLensModel
from leanlens.storage.backends import FileStorageBackend, InMemoryStorageBackend, StorageBackend
from leanlens.types import AssessmentId, ProcessId

logger = logging.getLogger(__name__)

RecordKind = Literal["assessment", "process", "analysis"]

_M = TypeVar("_M", bound=LeanLensModel)


class AssessmentRepository:
    """High-level save/load API over a :class:`StorageBackend`.

    Parameters:
        backend: Storage to use.  Defaults to an :class:`InMemoryStorageBackend`.
        namespace: Key prefix.  Defaults to ``storage_namespace`` from
            :func:`~leanlens.config.get_config`.
    """

    def __init__(self, backend: StorageBackend | None = None, *, namespace: str | None = None) -> None:
        self._backend = backend if backend is not None else InMemoryStorageBackend()
        self._namespace = namespace or get_config().storage_namespace

    @classmethod
    def from_config(cls) -> AssessmentRepository:
        """Build a repository using the configured backend and namespace."""
        config = get_config()
        backend: StorageBackend
        if config.storage_backend == "file":
            backend = FileStorageBackend(config.storage_path)
        else:
            backend = InMemoryStorageBackend()
        return cls(backend, namespace=config.storage_namespace)

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    # -- Keys --------------------------------------------------------------

    def _key(self, kind: RecordKind, record_id: str) -> str:
        return f"{self._namespace}:{kind}:{record_id}"

    def _save(self, kind: RecordKind, record_id: str, record: LeanLensModel) -> None:
        self._backend.set_item(self._key(kind, record_id), record.to_json())

    def _load(self, kind: RecordKind, record_id: str, model: type[_M]) -> _M | None:
        if not record_id:
            return None
        raw = self._backend.get_item(self._key(kind, record_id))
        if raw is None:
            return None
        try:
            return model.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Discarding malformed %s record '%s': %s", kind, record_id, exc)
            return None

    def _delete(self, kind: RecordKind, record_id: str) -> None:
        self._backend.remove_item(self._key(kind, record_id))

    # -- Assessments -------------------------------------------------------

    def save_assessment(self, assessment: ProcessAssessment) -> None:
        self._save("assessment", assessment.id, assessment)

    def load_assessment(self, assessment_id: AssessmentId) -> ProcessAssessment | None:
        return self._load("assessment", assessment_id, ProcessAssessment)

    def delete_assessment(self, assessment_id: AssessmentId) -> None:
        self._delete("assessment", assessment_id)

    def list_saved_assessments(self) -> list[AssessmentId]:
        """Return the ids of all stored assessments in this namespace."""
        prefix = self._key("assessment", "")
        return [AssessmentId(key[len(prefix) :]) for key in self._backend.keys() if key.startswith(prefix)]

    # -- Processes ---------------------------------------------------------

    def save_process(self, process: Process) -> None:
        self._save("process", process.id, process)

    def load_process(self, process_id: ProcessId) -> Process | None:
        return self._load("process", process_id, Process)

    def delete_process(self, process_id: ProcessId) -> None:
        self._delete("process", process_id)

    # -- Analyses ----------------------------------------------------------

    def save_analysis(self, analysis: ProcessAnalysis) -> None:
        self._save("analysis", analysis.process_id, analysis)

    def load_analysis(self, process_id: ProcessId) -> ProcessAnalysis | None:
        return self._load("analysis", process_id, ProcessAnalysis)

    def delete_analysis(self, process_id: ProcessId) -> None:
        self._delete("analysis", process_id)

    # -- Utilities ---------------------------------------------------------

    def clear_all_data(self) -> int:
        """Remove every key in this namespace and return how many were removed."""
        prefix = f"{self._namespace}:"
        doomed = [key for key in self._backend.keys() if key.startswith(prefix)]
        for key in doomed:
            self._backend.remove_item(key)
        logger.info("Cleared %d records from namespace '%s'", len(doomed), self._namespace)
        return len(doomed)
