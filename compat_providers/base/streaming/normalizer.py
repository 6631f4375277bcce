"""Stream normalizer.

Turns a raw token stream into ``CompletionChunk`` events with latency metrics.

Phases: *pre-token* until the first delta, *reasoning* while thinking deltas
arrive, *content* from the first post-reasoning content delta on. Every chunk
that carries a delta, usage or citations produces exactly one event; chunks
with none of these (role-only preambles, empty keep-alives) produce nothing.
The loop ends when the transport is exhausted or when the cancellation monitor
reports a stop; neither case emits an extra terminal event.

Transport errors raised while iterating propagate to the caller unchanged.
"""
from __future__ import annotations

import inspect
import logging
from contextlib import suppress
from typing import Any, AsyncIterable, Optional

from ..cancellation_parts.monitor import CancellationMonitor
from ..errors import classify_exception
from ..logging import LogContext, get_logger, normalized_log_event
from ..models import CompletionChunk
from .chunk_shapes import decode_chunk
from .stream_cursor import StreamCursor, now_millsec
from .streaming import ChunkCallback, deliver
from .streaming_finalize import finalize_stream
from .streaming_metrics import StreamSummary, build_token_usage


async def _close_stream(stream: Any) -> None:
    """Release the native stream (``AsyncStream.close`` / async generator ``aclose``)."""
    for name in ("aclose", "close"):
        close_fn = getattr(stream, name, None)
        if callable(close_fn):
            with suppress(Exception):
                result = close_fn()
                if inspect.isawaitable(result):
                    await result
            return


class StreamNormalizer:
    """Consumes one stream and emits normalized events through ``on_chunk``."""

    def __init__(self, *, ctx: Optional[LogContext] = None, logger: Optional[logging.Logger] = None) -> None:
        self._ctx = ctx or LogContext()
        self._logger = logger or get_logger("compat_providers.stream")

    async def run(
        self,
        stream: AsyncIterable[Any],
        on_chunk: ChunkCallback,
        monitor: Optional[CancellationMonitor] = None,
        *,
        cursor: Optional[StreamCursor] = None,
    ) -> StreamSummary:
        """Consume ``stream`` until exhausted or stopped.

        Args:
            stream: Async iterable of SDK chunks or chunk mappings.
            on_chunk: Receives each event; awaited when it returns an awaitable.
            monitor: Checked before each chunk is consumed.
            cursor: Timing state; pass the one started when the request was
                issued so latency includes the time to open the stream.
        """
        cursor = cursor or StreamCursor.start()
        summary = StreamSummary()
        normalized_log_event(self._logger, "stream.start", self._ctx, phase="start")
        try:
            async for raw in stream:
                if monitor is not None and monitor.should_stop():
                    summary.cancelled = True
                    break
                delta = decode_chunk(raw)
                if delta.is_empty:
                    continue
                now = now_millsec()
                cursor.advance(delta, now)
                completion_tokens = delta.usage.completion_tokens if delta.usage else None
                event = CompletionChunk(
                    text=delta.content or "",
                    reasoning_content=delta.reasoning_content,
                    usage=delta.usage,
                    citations=delta.citations,
                    metrics=cursor.metrics(now, completion_tokens),
                )
                if delta.usage is not None:
                    summary.usage = delta.usage
                summary.metrics = event.metrics
                summary.emitted += 1
                if self._logger.isEnabledFor(logging.DEBUG):
                    normalized_log_event(
                        self._logger,
                        "stream.delta",
                        self._ctx,
                        phase="delta",
                        emitted=True,
                        kind=event.kind,
                        level=logging.DEBUG,
                    )
                await deliver(on_chunk, event)
        except Exception as exc:
            normalized_log_event(
                self._logger,
                "stream.error",
                self._ctx,
                phase="error",
                error_code=classify_exception(exc).value,
                emitted=summary.emitted > 0,
                tokens=build_token_usage(summary.usage),
                level=logging.WARNING,
                error=str(exc)[:260],
            )
            raise
        finally:
            await _close_stream(stream)
        return finalize_stream(logger=self._logger, ctx=self._ctx, summary=summary)


__all__ = ["StreamNormalizer"]
