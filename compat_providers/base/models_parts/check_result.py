"""
Outcome of a provider health check.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CheckResult:
    """``valid`` is True when the check request returned a message; ``error`` holds the failure otherwise."""

    valid: bool
    error: Optional[BaseException] = None


__all__ = ["CheckResult"]
