"""Text matching and arithmetic helpers shared by the analyzers and scorer."""

from __future__ import annotations

import math
from collections.abc import Iterable


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Return ``True`` if any keyword is a case-insensitive substring of *text*."""
    lowered = text.lower()
    return any(kw.lower() in lowered for kw in keywords)


def join_text(*parts: str | Iterable[str]) -> str:
    """Flatten strings and string lists into one space-separated blob."""
    pieces: list[str] = []
    for part in parts:
        if isinstance(part, str):
            pieces.append(part)
        else:
            pieces.extend(part)
    return " ".join(pieces)


def normalize_role(role: str) -> str:
    return role.strip().lower()


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up.

    Python's :func:`round` rounds halves to even, which would move scores
    such as 62.5 down instead of up.
    """
    return math.floor(value + 0.5)
