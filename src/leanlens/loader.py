"""Load process descriptions from YAML or JSON files.

Accepts the same loose shapes a person filling in the intake form would
produce: comma-separated strings for inputs, outputs, tools and
stakeholders, newline-separated pain points, and missing ids (generated on
load).  Keys may be snake_case or camelCase.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from leanlens.exceptions import ProcessLoadError
from leanlens.ids import create_process_id, create_step_id
from leanlens.models import Process
from leanlens.types import ProcessFrequency

logger = logging.getLogger(__name__)

_COMMA_FIELDS = ("inputs", "outputs", "tools")
_LINE_FIELDS = ("pain_points", "painPoints")


def _split(value: Any, sep: str) -> Any:
    if isinstance(value, str):
        return [part.strip() for part in value.split(sep) if part.strip()]
    if isinstance(value, list):
        return [str(part).strip() for part in value if str(part).strip()]
    return value


def _normalize_step(raw: Any) -> Any:
    if not isinstance(raw, dict):
        return raw
    step = dict(raw)
    if not step.get("id"):
        step["id"] = create_step_id()
    for field in _COMMA_FIELDS:
        if field in step:
            step[field] = _split(step[field], ",")
    for field in _LINE_FIELDS:
        if field in step:
            step[field] = _split(step[field], "\n")
    return step


def parse_process(data: dict[str, Any]) -> Process:
    """Build a :class:`Process` from a loosely-shaped mapping.

    Raises:
        ProcessLoadError: If the data does not describe a valid process.
    """
    if not isinstance(data, dict):
        raise ProcessLoadError("Process description must be a mapping")
    if isinstance(data.get("process"), dict):
        data = data["process"]
    data = dict(data)
    if not data.get("id"):
        data["id"] = create_process_id()
    if not data.get("frequency"):
        data["frequency"] = ProcessFrequency.AD_HOC
    if "stakeholders" in data:
        data["stakeholders"] = _split(data["stakeholders"], ",")
    steps = data.get("steps") or []
    if not isinstance(steps, list):
        raise ProcessLoadError("'steps' must be a list")
    data["steps"] = [_normalize_step(step) for step in steps]
    try:
        return Process.model_validate(data)
    except ValidationError as exc:
        raise ProcessLoadError(f"Invalid process description: {exc}") from exc


def validate_process(process: Process) -> None:
    """Check the intake rules the analysis engine relies on.

    Raises:
        ProcessLoadError: If the process has no name or no named step.
    """
    if not process.name.strip():
        raise ProcessLoadError("Process name is required")
    if not any(step.name.strip() for step in process.steps):
        raise ProcessLoadError(f"Process '{process.name}' needs at least one named step")


def load_process(path: str | Path) -> Process:
    """Read, parse, and validate a process description file."""
    path = Path(path)
    if not path.exists():
        raise ProcessLoadError(f"Process file not found: {path}")
    try:
        raw = path.read_text(encoding="utf-8")
        if path.suffix in {".yaml", ".yml"}:
            data = yaml.safe_load(raw) or {}
        elif path.suffix == ".json":
            data = json.loads(raw)
        else:
            raise ProcessLoadError(f"Unsupported process format: {path.suffix}")
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ProcessLoadError(f"Cannot read process file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ProcessLoadError(f"Process file {path} must contain a mapping")

    process = parse_process(data)
    validate_process(process)
    logger.info("Loaded process '%s' (%d steps) from %s", process.name, len(process.steps), path)
    return process
