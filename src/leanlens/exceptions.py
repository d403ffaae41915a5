"""Exception hierarchy for leanlens.

The analysis engine itself never raises over its documented input domain;
these errors belong to the collaborators around it (file intake and
on-disk storage).
"""

from __future__ import annotations


class LeanLensError(Exception):
    """Base class for all leanlens errors."""


class ProcessLoadError(LeanLensError):
    """A process description could not be read, parsed, or validated."""


class StorageError(LeanLensError):
    """The storage backend could not persist data."""
