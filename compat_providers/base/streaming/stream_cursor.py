"""Per-call timing state for the stream normalizer.

A cursor is created for each completion call and advanced once per decoded
chunk. Timestamps are milliseconds from a monotonic clock
(``time.perf_counter``); exported metrics are durations relative to
``start_time_millsec``.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from ...config.defaults import THINK_END_MARKER
from ..models import CompletionMetrics
from .chunk_shapes import ChunkDelta


def now_millsec() -> float:
    """Current monotonic time in milliseconds."""
    return time.perf_counter() * 1000.0


@dataclass
class StreamCursor:
    """Timing state threaded through each chunk of one stream.

    Attributes:
        start_time_millsec: Clock value when the request was issued.
        time_first_token_millsec: Duration to the first delta; latched once.
        time_first_content_millsec: Clock value of the first post-reasoning
            content delta; latched once, ``None`` until then.
        has_reasoning_content: A structured reasoning delta has been seen.
    """

    start_time_millsec: float
    time_first_token_millsec: int = 0
    time_first_content_millsec: Optional[float] = None
    has_reasoning_content: bool = False
    first_token_seen: bool = False

    @classmethod
    def start(cls) -> "StreamCursor":
        return cls(start_time_millsec=now_millsec())

    def reasoning_just_ended(self, delta: ChunkDelta) -> bool:
        """Return True when ``delta`` is the first content after reasoning.

        With a structured reasoning channel any non-empty content qualifies;
        otherwise only the literal closing ``</think>`` marker does.
        """
        if self.has_reasoning_content:
            return bool(delta.content)
        return delta.content == THINK_END_MARKER

    def advance(self, delta: ChunkDelta, now: float) -> None:
        if delta.reasoning_content:
            self.has_reasoning_content = True
        if delta.has_token and not self.first_token_seen:
            self.first_token_seen = True
            self.time_first_token_millsec = self._elapsed(now)
        if self.time_first_content_millsec is None and self.reasoning_just_ended(delta):
            self.time_first_content_millsec = now

    @property
    def time_thinking_millsec(self) -> int:
        if self.time_first_content_millsec is None:
            return 0
        return self._elapsed(self.time_first_content_millsec)

    def metrics(self, now: float, completion_tokens: Optional[int] = None) -> CompletionMetrics:
        """Snapshot metrics at ``now``."""
        return CompletionMetrics(
            completion_tokens=completion_tokens,
            time_completion_millsec=self._elapsed(now),
            time_first_token_millsec=self.time_first_token_millsec,
            time_thinking_millsec=self.time_thinking_millsec,
        )

    def _elapsed(self, now: float) -> int:
        return max(0, int(round(now - self.start_time_millsec)))


__all__ = ["StreamCursor", "now_millsec"]
