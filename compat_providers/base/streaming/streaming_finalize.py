"""Consolidated end-of-stream logging.

No event is delivered to the caller when a stream ends; the last delta already
carries the final metrics. This module only records the outcome.
"""
from __future__ import annotations

import logging

from ..logging import LogContext, normalized_log_event
from .streaming_metrics import StreamSummary, build_token_usage


def finalize_stream(*, logger: logging.Logger, ctx: LogContext, summary: StreamSummary) -> StreamSummary:
    metrics = summary.metrics
    normalized_log_event(
        logger,
        "stream.cancelled" if summary.cancelled else "stream.end",
        ctx,
        phase="finalize",
        emitted=summary.emitted > 0,
        tokens=build_token_usage(summary.usage),
        emitted_count=summary.emitted,
        time_first_token_millsec=metrics.time_first_token_millsec if metrics else None,
        time_thinking_millsec=metrics.time_thinking_millsec if metrics else None,
        time_completion_millsec=metrics.time_completion_millsec if metrics else None,
    )
    return summary


__all__ = ["finalize_stream"]
