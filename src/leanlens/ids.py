"""Identifier factories.

Each call returns a fresh random UUID4 string typed as the matching
identifier kind.
"""

from __future__ import annotations

import uuid

from leanlens.types import AssessmentId, ProcessId, StepId


def create_process_id() -> ProcessId:
    return ProcessId(str(uuid.uuid4()))


def create_step_id() -> StepId:
    return StepId(str(uuid.uuid4()))


def create_assessment_id() -> AssessmentId:
    return AssessmentId(str(uuid.uuid4()))
