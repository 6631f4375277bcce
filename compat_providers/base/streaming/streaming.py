"""Callback delivery and event accumulation helpers."""
from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Iterable, Union

from ..models import CompletionChunk, CompletionResult

ChunkCallback = Callable[[CompletionChunk], Union[None, Awaitable[None]]]


async def deliver(callback: Callable[..., Any], *args: Any) -> None:
    """Invoke ``callback`` and await its result when it is awaitable.

    The stream does not advance until the callback has returned, so a slow
    consumer applies backpressure to the transport.
    """
    result = callback(*args)
    if inspect.isawaitable(result):
        await result


def accumulate_chunks(events: Iterable[CompletionChunk]) -> CompletionResult:
    """Rebuild the full answer from a sequence of normalized events."""
    result = CompletionResult()
    for evt in events:
        result.chunk_count += 1
        if evt.text:
            result.text += evt.text
        if evt.reasoning_content:
            result.reasoning_content += evt.reasoning_content
        if evt.usage is not None:
            result.usage = evt.usage
        for url in evt.citations or ():
            if url not in result.citations:
                result.citations.append(url)
        result.metrics = evt.metrics
    return result


__all__ = ["ChunkCallback", "deliver", "accumulate_chunks"]
