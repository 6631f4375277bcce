"""
Aggregate of a completed event sequence.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .completion_metrics import CompletionMetrics
from .usage import Usage


@dataclass
class CompletionResult:
    """Full text and reasoning rebuilt from a sequence of chunks.

    ``usage`` and ``metrics`` are the last snapshots seen; ``citations`` keeps
    first-seen order without duplicates.
    """

    text: str = ""
    reasoning_content: str = ""
    usage: Optional[Usage] = None
    citations: List[str] = field(default_factory=list)
    metrics: CompletionMetrics = field(default_factory=CompletionMetrics)
    chunk_count: int = 0


__all__ = ["CompletionResult"]
