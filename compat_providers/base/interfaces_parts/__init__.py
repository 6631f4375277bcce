"""Single-class Protocol modules re-exported by ``base.interfaces``."""

from .completion_client import CompletionClient
from .file_reader import FileReader
from .pause_store import PauseStore
from .settings_store import SettingsStore

__all__ = ["CompletionClient", "FileReader", "PauseStore", "SettingsStore"]
