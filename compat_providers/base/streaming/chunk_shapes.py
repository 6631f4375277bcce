"""Decoding of backend response shapes at the boundary.

Backends disagree on where optional data lives: reasoning arrives as
``delta.reasoning_content`` (DeepSeek and most compatible servers) or
``delta.reasoning`` (OpenRouter); citations ride on the chunk root
(Perplexity-style); usage may appear on any chunk. Everything is decoded here
once, from SDK objects or plain mappings, into :class:`ChunkDelta` /
:class:`ResponseShape` with explicit optional fields. Nothing downstream inspects
raw payloads.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from ..models import Usage


def _field(obj: Any, name: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _first_choice(obj: Any) -> Any:
    choices = _field(obj, "choices")
    if not choices:
        return None
    try:
        return choices[0]
    except (IndexError, KeyError, TypeError):
        return None


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _citations(obj: Any) -> Optional[List[str]]:
    raw = _field(obj, "citations")
    if not raw or isinstance(raw, (str, bytes)):
        return None
    urls = [c for c in raw if isinstance(c, str)]
    return urls or None


@dataclass(frozen=True)
class ChunkDelta:
    """One decoded stream chunk.

    ``content`` keeps the empty string distinct from ``None`` only in the sense
    that both count as "no content"; see :attr:`has_token`.
    """

    content: Optional[str] = None
    reasoning_content: Optional[str] = None
    usage: Optional[Usage] = None
    citations: Optional[List[str]] = None
    finish_reason: Optional[str] = None

    @property
    def has_token(self) -> bool:
        """True when the chunk carries a content or reasoning delta."""
        return bool(self.content) or bool(self.reasoning_content)

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to report for this chunk."""
        return not self.has_token and self.usage is None and not self.citations


@dataclass(frozen=True)
class ResponseShape:
    """Decoded non-streaming response."""

    text: str = ""
    reasoning_content: Optional[str] = None
    usage: Optional[Usage] = None
    citations: Optional[List[str]] = None
    has_message: bool = False


def decode_chunk(chunk: Any) -> ChunkDelta:
    """Decode one streamed chunk (SDK ``ChatCompletionChunk`` or mapping)."""
    choice = _first_choice(chunk)
    delta = _field(choice, "delta")
    reasoning = _text(_field(delta, "reasoning_content")) or _text(_field(delta, "reasoning"))
    return ChunkDelta(
        content=_text(_field(delta, "content")),
        reasoning_content=reasoning or None,
        usage=Usage.from_raw(_field(chunk, "usage")),
        citations=_citations(chunk),
        finish_reason=_text(_field(choice, "finish_reason")),
    )


def decode_response(response: Any) -> ResponseShape:
    """Decode a complete (non-streaming) chat completion response."""
    choice = _first_choice(response)
    message = _field(choice, "message")
    reasoning = _text(_field(message, "reasoning_content")) or _text(_field(message, "reasoning"))
    return ResponseShape(
        text=_text(_field(message, "content")) or "",
        reasoning_content=reasoning or None,
        usage=Usage.from_raw(_field(response, "usage")),
        citations=_citations(response),
        has_message=message is not None,
    )


__all__ = ["ChunkDelta", "ResponseShape", "decode_chunk", "decode_response"]
