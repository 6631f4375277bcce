"""Cooperative cancellation public surface.

- ``CancellationMonitor`` + a keyed ``PauseStore`` stop chat streams quietly.
- ``CancellationToken`` aborts image generation and raises ``CancelledError``.
"""

from .cancellation_parts.cancellation_token import CancellationToken
from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.monitor import CancellationMonitor
from .cancellation_parts.pause_store import InMemoryPauseStore

__all__ = ["CancellationToken", "CancelledError", "CancellationMonitor", "InMemoryPauseStore"]
