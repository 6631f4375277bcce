"""
Narrow interfaces to the collaborators the provider core consumes.

Protocols live one per module under ``compat_providers.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import CompletionClient, FileReader, PauseStore, SettingsStore

__all__ = ["CompletionClient", "FileReader", "PauseStore", "SettingsStore"]
