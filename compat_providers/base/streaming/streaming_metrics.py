"""Summary of one normalized stream, used for logging and returned to callers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from ..models import CompletionMetrics, Usage


@dataclass
class StreamSummary:
    """Outcome of :meth:`StreamNormalizer.run`.

    ``cancelled`` is True when the pause flag ended the stream early.
    """

    emitted: int = 0
    cancelled: bool = False
    usage: Optional[Usage] = None
    metrics: Optional[CompletionMetrics] = None


def build_token_usage(usage: Optional[Usage]) -> Dict[str, Optional[int]]:
    """Return the canonical ``{"prompt", "completion", "total"}`` log mapping."""
    if usage is None:
        return {"prompt": None, "completion": None, "total": None}
    return {
        "prompt": usage.prompt_tokens,
        "completion": usage.completion_tokens,
        "total": usage.total_tokens,
    }


__all__ = ["StreamSummary", "build_token_usage"]
