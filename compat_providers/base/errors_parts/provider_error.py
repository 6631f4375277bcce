"""
Structured error raised by the provider core itself.

Transport failures coming out of the OpenAI SDK are *not* wrapped in this type;
they propagate unchanged. ``ProviderError`` covers conditions the core detects
on its own (no model configured, malformed custom parameters, bad settings).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Failure detected by the provider core.

    Attributes:
        code: Normalized :class:`ErrorCode` for the failure.
        message: Human-readable description.
        provider: Provider id the operation targeted (e.g. ``"deepseek"``).
        model: Model id involved, when known.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["ProviderError"]
