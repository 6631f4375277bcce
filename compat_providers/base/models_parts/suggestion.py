"""
Follow-up question suggested by a backend.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Suggestion:
    content: str


__all__ = ["Suggestion"]
