"""Streaming primitives: chunk decoding, timing cursor and the normalizer."""

from .chunk_shapes import ChunkDelta, ResponseShape, decode_chunk, decode_response
from .normalizer import StreamNormalizer
from .stream_cursor import StreamCursor, now_millsec
from .streaming import ChunkCallback, accumulate_chunks, deliver
from .streaming_finalize import finalize_stream
from .streaming_metrics import StreamSummary, build_token_usage

__all__ = [
    "ChunkCallback",
    "ChunkDelta",
    "ResponseShape",
    "StreamCursor",
    "StreamNormalizer",
    "StreamSummary",
    "accumulate_chunks",
    "build_token_usage",
    "decode_chunk",
    "decode_response",
    "deliver",
    "finalize_stream",
    "now_millsec",
]
