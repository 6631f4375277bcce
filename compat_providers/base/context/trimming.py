"""Context window selection.

The request context is the newest ``context_count + 1`` turns (the prior
turns plus the one being answered), cut at the last context-clear marker and
without turns that have nothing to send.
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from ..models import Message

T = TypeVar("T")


def take_right(items: Sequence[T], n: int) -> List[T]:
    """Return the last ``n`` items (none for ``n <= 0``)."""
    if n <= 0:
        return []
    return list(items[-n:])


def filter_context_messages(messages: Sequence[Message]) -> List[Message]:
    """Drop turns before the last clear marker, the marker itself and empty turns."""
    start = 0
    for index, message in enumerate(messages):
        if message.is_context_clear:
            start = index + 1
    return [m for m in messages[start:] if m.content.strip() or m.has_files()]


def select_context(messages: Sequence[Message], context_count: int) -> List[Message]:
    return filter_context_messages(take_right(messages, context_count + 1))


__all__ = ["take_right", "filter_context_messages", "select_context"]
