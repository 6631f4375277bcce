"""Cancellation monitor gating the stream loop.

The stream normalizer asks :meth:`CancellationMonitor.should_stop` before it
consumes each chunk. Once the pause flag for the monitor's key is set, the
loop ends without emitting further events and without raising.
"""

from __future__ import annotations

from typing import Optional

from ..interfaces import PauseStore
from .cancellation_token import CancellationToken


class CancellationMonitor:
    """Reads the pause flag for one stream key (and optionally a token)."""

    def __init__(self, store: PauseStore, key: str, *, token: Optional[CancellationToken] = None) -> None:
        self._store = store
        self._key = key
        self._token = token
        self._stopped = False

    @property
    def key(self) -> str:
        return self._key

    @property
    def stopped(self) -> bool:
        """True once ``should_stop`` has returned True; stays True afterwards."""
        return self._stopped

    def should_stop(self) -> bool:
        if self._stopped:
            return True
        if self._store.get(self._key) or (self._token is not None and self._token.cancelled):
            self._stopped = True
        return self._stopped


__all__ = ["CancellationMonitor"]
