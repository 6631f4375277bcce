"""Cooperative cancellation token.

The token is polled (``raise_if_cancelled``) or observed through callbacks
(``add_callback``). Image generation registers a callback that cancels the
in-flight request task so the abort takes effect without waiting for the
server.
"""

from __future__ import annotations

from threading import Lock
from typing import Callable, List, Optional

from .cancelled_error import CancelledError
from .state import State

CancelCallback = Callable[[Optional[str]], None]


class CancellationToken:
    """Thread-safe cancellation flag with cascading children and callbacks."""

    def __init__(self, *, parent: "CancellationToken | None" = None) -> None:
        self._state = State()
        self._lock = Lock()
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:
        return self._state.cancelled

    @property
    def reason(self) -> str | None:
        return self._state.reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation; runs callbacks and cascades to children once."""
        with self._lock:
            if self._state.cancelled:
                return
            self._state.cancelled = True
            self._state.reason = reason
            children = list(self._children)
            callbacks = list(self._state.callbacks)
            self._state.callbacks.clear()
        for callback in callbacks:
            callback(reason)
        for child in children:
            child.cancel(reason)

    def add_callback(self, callback: CancelCallback) -> Callable[[], None]:
        """Register ``callback(reason)`` to run on cancel; returns an unregister function.

        Runs immediately when the token is already cancelled.
        """
        with self._lock:
            if not self._state.cancelled:
                self._state.callbacks.append(callback)
                run_now = False
            else:
                run_now = True
            reason = self._state.reason
        if run_now:
            callback(reason)

        def _remove() -> None:
            with self._lock:
                if callback in self._state.callbacks:
                    self._state.callbacks.remove(callback)

        return _remove

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        with self._lock:
            self._children.append(token)
            should_cancel = self._state.cancelled
            reason = self._state.reason
        if should_cancel:
            token.cancel(reason)
        return token

    def raise_if_cancelled(self) -> None:
        if self._state.cancelled:
            raise CancelledError(self._state.reason or "operation cancelled")

    def child(self) -> "CancellationToken":
        return CancellationToken(parent=self)

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self._state.cancelled}, reason={self._state.reason!r})"


__all__ = ["CancellationToken"]
