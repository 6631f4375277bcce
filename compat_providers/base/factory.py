"""Provider factory and SDK client construction.

Purpose
-------
Turn a provider id (or validated :class:`ProviderSettings`) into a ready
:class:`OpenAICompatibleProvider`. The SDK client is built lazily on first use
so constructing a provider performs no I/O.

Client selection
----------------
- Azure OpenAI (``type == "azure-openai"``):
  - hosts under ``ai.azure.com/models`` use the plain ``AsyncOpenAI`` client
    against the formatted host
    with the API key, or a token fetched from ``token_provider``;
  - otherwise ``AsyncAzureOpenAI`` with the API key, or with
    ``azure_ad_token_provider`` when no key is configured.
- Everything else: ``AsyncOpenAI`` against the formatted API host.

All clients share pooled ``httpx.AsyncClient`` instances from
``base.http``.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Optional, Union

from openai import AsyncAzureOpenAI, AsyncOpenAI

from ..config.defaults import AZURE_AI_MODELS_HOST_MARKER, AZURE_DEFAULT_API_VERSION
from ..config.env import env_prefix
from .capabilities import get_provider_capabilities
from .dto import ProviderSettings
from .errors import ErrorCode, ProviderError
from .http import get_async_http_client
from .interfaces import CompletionClient, FileReader, PauseStore, SettingsStore
from .models import Model
from .openai_style_parts import OpenAICompatibleProvider, ProviderInit
from .utils.text import format_api_host

TokenProvider = Callable[[], Awaitable[str]]


class UnknownProviderError(ProviderError):
    """Raised when a provider id has no usable API host or credentials."""


def _is_azure(settings: ProviderSettings) -> bool:
    return settings.type == "azure-openai" or get_provider_capabilities(settings.id).azure


async def build_client(
    settings: ProviderSettings, *, token_provider: Optional[TokenProvider] = None
) -> CompletionClient:
    """Create the async SDK client for ``settings``."""
    host = settings.api_host or ""
    headers: Dict[str, str] = dict(settings.headers)

    if _is_azure(settings):
        http_client = get_async_http_client(host or None, "azure", timeout=settings.timeout_seconds)
        if AZURE_AI_MODELS_HOST_MARKER in host:
            api_key = settings.api_key
            if not api_key and token_provider is not None:
                api_key = await token_provider()
            return AsyncOpenAI(
                api_key=api_key or "",
                base_url=format_api_host(host),
                default_headers=headers,
                http_client=http_client,
            )
        api_version = settings.api_version or AZURE_DEFAULT_API_VERSION
        if settings.api_key:
            return AsyncAzureOpenAI(
                api_key=settings.api_key,
                api_version=api_version,
                azure_endpoint=host,
                default_headers=headers,
                http_client=http_client,
            )
        if token_provider is None:
            raise ProviderError(
                code=ErrorCode.AUTH,
                message="azure-openai needs an api_key or a token_provider",
                provider=settings.id,
            )
        return AsyncAzureOpenAI(
            azure_ad_token_provider=token_provider,
            api_version=api_version,
            azure_endpoint=host,
            default_headers=headers,
            http_client=http_client,
        )

    if not host:
        raise UnknownProviderError(
            code=ErrorCode.VALIDATION,
            message="no api_host configured",
            provider=settings.id,
        )
    base_url = format_api_host(host)
    return AsyncOpenAI(
        # Local servers accept any key; the SDK only rejects None.
        api_key=settings.api_key or "",
        base_url=base_url,
        default_headers=headers,
        http_client=get_async_http_client(base_url, "chat", timeout=settings.timeout_seconds),
    )


class ProviderFactory:
    """Create :class:`OpenAICompatibleProvider` instances from configuration."""

    @classmethod
    def create(
        cls,
        provider: Union[str, ProviderSettings],
        *,
        file_reader: Optional[FileReader] = None,
        settings_store: Optional[SettingsStore] = None,
        pause_store: Optional[PauseStore] = None,
        default_model: Optional[Model] = None,
        client: Optional[CompletionClient] = None,
        token_provider: Optional[TokenProvider] = None,
        **overrides: Any,
    ) -> OpenAICompatibleProvider:
        """Build a provider.

        Parameters
        ----------
        provider:
            Provider id resolved through ``ProviderSettings.from_config`` (with
            ``overrides`` applied last), or ready settings.
        client:
            Pre-built SDK client; skips :func:`build_client`.
        token_provider:
            Async callable returning an Azure AD token.

        Raises
        ------
        UnknownProviderError
            When the provider has no API host configured.
        """
        if isinstance(provider, ProviderSettings):
            settings = provider.model_copy(update=overrides) if overrides else provider
        else:
            settings = ProviderSettings.from_config(provider, **overrides)

        if client is None and not settings.api_host:
            raise UnknownProviderError(
                code=ErrorCode.VALIDATION,
                message=f"unknown provider {settings.id!r}: set api_host or {env_prefix(settings.id)}_BASE_URL",
                provider=settings.id,
            )

        async def _factory() -> CompletionClient:
            return await build_client(settings, token_provider=token_provider)

        return OpenAICompatibleProvider(
            ProviderInit(
                settings=settings,
                client=client,
                client_factory=None if client is not None else _factory,
                file_reader=file_reader,
                settings_store=settings_store,
                pause_store=pause_store,
                default_model=default_model,
                logger_name=f"compat_providers.{settings.id}",
            )
        )


def create_provider(provider: Union[str, ProviderSettings], **kwargs: Any) -> OpenAICompatibleProvider:
    """Shortcut for :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


__all__ = ["ProviderFactory", "UnknownProviderError", "build_client", "create_provider", "TokenProvider"]
