"""Cancellation error type.

Raised when an operation observes a cooperative cancellation request through a
:class:`CancellationToken`. Pause-flag cancellation of chat streams does not
raise; it simply stops the stream.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Deliberately not a subclass of :class:`asyncio.CancelledError`, so callers
    can tell a user abort apart from task teardown.
    """


__all__ = ["CancelledError"]
