"""PauseStore Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class PauseStore(Protocol):
    """Keyed pause flags; ``get`` returns True once the stream should stop."""

    def get(self, key: str) -> bool:  # pragma: no cover - interface
        ...


__all__ = ["PauseStore"]
