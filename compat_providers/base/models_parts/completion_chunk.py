"""
Normalized completion event delivered to ``on_chunk`` callbacks.

Both the streaming and the non-streaming paths emit this one type, so callers
never branch on the transport mode.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from .completion_metrics import CompletionMetrics
from .usage import Usage

ChunkKind = Literal["text", "reasoning", "citations", "usage", "terminal"]


@dataclass(frozen=True)
class CompletionChunk:
    """One normalized event.

    Attributes:
        text: Content delta (stream) or full text (non-stream).
        reasoning_content: Reasoning delta, when the backend exposes one.
        usage: Running usage snapshot, when present on this chunk.
        citations: Vendor citation URLs, when present on this chunk.
        metrics: Metrics snapshot at emission time.
        is_final: True only for the single event of a non-streaming call.
    """

    text: str = ""
    reasoning_content: Optional[str] = None
    usage: Optional[Usage] = None
    citations: Optional[List[str]] = None
    metrics: CompletionMetrics = field(default_factory=CompletionMetrics)
    is_final: bool = False

    @property
    def kind(self) -> ChunkKind:
        if self.is_final:
            return "terminal"
        if self.reasoning_content:
            return "reasoning"
        if self.text:
            return "text"
        if self.citations:
            return "citations"
        return "usage"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "text": self.text,
            "reasoning_content": self.reasoning_content,
            "usage": self.usage.to_dict() if self.usage else None,
            "citations": list(self.citations) if self.citations else None,
            "metrics": self.metrics.to_dict(),
        }


__all__ = ["CompletionChunk", "ChunkKind"]
