"""SettingsStore Protocol (single-class module).

Any mapping with ``get(key, default)`` (a plain ``dict`` included) satisfies it.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SettingsStore(Protocol):
    def get(self, key: str, default: Any = None) -> Any:  # pragma: no cover - interface
        ...


__all__ = ["SettingsStore"]
