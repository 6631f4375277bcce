"""
Latency and token metrics attached to every completion event.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class CompletionMetrics:
    """Metrics snapshot; all durations are milliseconds since request start.

    Attributes:
        completion_tokens: Completion token count when the backend reported it.
        time_completion_millsec: Elapsed time at this event.
        time_first_token_millsec: Time to the first delta; 0 until known and
            always 0 for non-streaming responses.
        time_thinking_millsec: Time spent before the first post-reasoning
            content delta; 0 when no such delta has arrived.
    """

    completion_tokens: Optional[int] = None
    time_completion_millsec: int = 0
    time_first_token_millsec: int = 0
    time_thinking_millsec: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["CompletionMetrics"]
