"""Constructor bundle for :class:`OpenAICompatibleProvider`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from ..dto import ProviderSettings
from ..interfaces import CompletionClient, FileReader, PauseStore, SettingsStore
from ..models import Model

ClientFactory = Callable[[], Awaitable[CompletionClient]]


@dataclass(frozen=True)
class ProviderInit:
    """Everything a provider instance needs.

    Attributes:
        settings: Validated connection settings.
        client: Ready SDK client; when ``None`` ``client_factory`` builds one
            on first use.
        client_factory: Async builder for the SDK client.
        file_reader: Source of attachment contents.
        settings_store: Application settings (topic naming prompt...).
        pause_store: Keyed pause flags consulted while streaming.
        default_model: Model used when an assistant has none.
        logger_name: Structured logger name.
    """

    settings: ProviderSettings
    client: Optional[CompletionClient] = None
    client_factory: Optional[ClientFactory] = None
    file_reader: Optional[FileReader] = None
    settings_store: Optional[SettingsStore] = None
    pause_store: Optional[PauseStore] = None
    default_model: Optional[Model] = None
    logger_name: str = "compat_providers.provider"


__all__ = ["ProviderInit", "ClientFactory"]
