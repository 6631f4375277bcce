"""
Map exceptions to :class:`ErrorCode` values for logging.

Classification never changes what is raised; callers use the code purely as a
structured log field (``check.error``, ``models.error``, ``stream.error``).
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

import openai

from .error_code import ErrorCode
from .provider_error import ProviderError
from ..cancellation_parts.cancelled_error import CancelledError


def _extract_status(exc: Exception) -> Optional[int]:
    """Return an HTTP status code carried by ``exc`` if any.

    Checks ``status_code``, ``status`` and ``response.status_code`` in order.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.UNAVAILABLE,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify ``exc`` into an :class:`ErrorCode`.

    Precedence:
        1. ``ProviderError`` passthrough.
        2. Cancellation (ours and asyncio's).
        3. SDK timeout / connection errors.
        4. HTTP status mapping.
        5. ``UNKNOWN``.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (CancelledError, asyncio.CancelledError)):
        return ErrorCode.CANCELLED
    # APITimeoutError subclasses APIConnectionError; check it first.
    if isinstance(exc, (openai.APITimeoutError, TimeoutError, asyncio.TimeoutError)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, openai.APIConnectionError):
        return ErrorCode.CONNECTION
    status = _extract_status(exc)  # type: ignore[arg-type]
    if status is not None:
        if status in _HTTP_STATUS_MAP:
            return _HTTP_STATUS_MAP[status]
        if status >= 500:
            return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


__all__ = ["classify_exception"]
