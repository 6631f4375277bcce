"""
Normalized failure categories.

Values are lowercase snake_case and appear verbatim in structured logs
(``error_code`` key), so treat them as a stable contract.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Failure category attached to :class:`ProviderError` and log events."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    CONNECTION = "connection"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    MISSING_MODEL = "missing_model"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
