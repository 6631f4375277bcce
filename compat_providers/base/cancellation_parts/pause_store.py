"""In-memory keyed pause flags.

One flag per stream key, so pausing one conversation never stops another.
"""

from __future__ import annotations

from threading import Lock
from typing import Dict


class InMemoryPauseStore:
    """Default ``PauseStore``; safe to ``pause`` from another thread."""

    def __init__(self) -> None:
        self._flags: Dict[str, bool] = {}
        self._lock = Lock()

    def get(self, key: str) -> bool:
        with self._lock:
            return self._flags.get(key, False)

    def pause(self, key: str) -> None:
        with self._lock:
            self._flags[key] = True

    def resume(self, key: str) -> None:
        """Clear the flag for ``key`` (call before reusing the key for a new stream)."""
        with self._lock:
            self._flags.pop(key, None)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return bool(self._flags.get(key))  # type: ignore[arg-type]


__all__ = ["InMemoryPauseStore"]
