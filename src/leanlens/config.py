from __future__ import annotations

import threading
from typing import Literal

from pydantic_settings import BaseSettings

_lock = threading.Lock()
_instance: LeanLensConfig | None = None


class LeanLensConfig(BaseSettings):
    model_config = {"env_prefix": "LEANLENS_"}

    storage_namespace: str = "leanlens"
    storage_backend: Literal["in_memory", "file"] = "file"
    storage_path: str = ".leanlens/store.json"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"


def get_config() -> LeanLensConfig:
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = LeanLensConfig()
    return _instance


def reset_config() -> None:
    global _instance
    with _lock:
        _instance = None
