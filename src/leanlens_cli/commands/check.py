"""``leanlens check`` -- Verify environment and configuration."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

from rich.console import Console

from leanlens.config import get_config
from leanlens_cli.ui.panels import status_table

_PASS = "[green]PASS[/green]"
_FAIL = "[red]FAIL[/red]"
_SKIP = "[yellow]SKIP[/yellow]"


def _check_python_version() -> tuple[str, str, str]:
    """Check that Python >= 3.11."""
    version = sys.version_info
    version_str = f"{version.major}.{version.minor}.{version.micro}"
    if version >= (3, 11):
        return ("Python version", _PASS, version_str)
    return ("Python version", _FAIL, f"{version_str} (requires >=3.11)")


def _check_module(module_name: str, label: str) -> tuple[str, str, str]:
    """Check whether a Python module is importable."""
    try:
        mod = importlib.import_module(module_name)
        version = getattr(mod, "__version__", "installed")
        return (label, _PASS, str(version))
    except ImportError:
        return (label, _FAIL, "not installed")


def _check_store() -> tuple[str, str, str]:
    config = get_config()
    if config.storage_backend == "in_memory":
        return ("Storage", _SKIP, "in-memory (nothing is persisted)")
    path = Path(config.storage_path)
    if path.exists():
        return ("Storage", _PASS, str(path))
    return ("Storage", _SKIP, f"not created yet: {path}")


def check() -> None:
    """Check the local environment and storage configuration."""
    console = Console()

    rows: list[tuple[str, str, str]] = [
        _check_python_version(),
        _check_module("leanlens", "leanlens"),
        _check_module("pydantic", "pydantic"),
        _check_module("pydantic_settings", "pydantic-settings"),
        _check_module("yaml", "pyyaml"),
        _check_module("typer", "typer"),
        _check_module("rich", "rich"),
        _check_store(),
        ("Namespace", _PASS, get_config().storage_namespace),
    ]

    console.print()
    status_table("Environment Check", rows, console=console)
    console.print()
