"""Provider factory and SDK client selection."""
from __future__ import annotations

import asyncio

import pytest
from openai import AsyncAzureOpenAI, AsyncOpenAI

import compat_providers
from compat_providers.base.dto import ProviderSettings
from compat_providers.base.errors import ErrorCode, ProviderError
from compat_providers.base.factory import ProviderFactory, UnknownProviderError, build_client
from compat_providers.base.http import aclose_all_clients
from compat_providers.tests.helpers import FakeClient


def _build(settings, **kwargs):
    async def go():
        try:
            return await build_client(settings, **kwargs)
        finally:
            await aclose_all_clients()

    return asyncio.run(go())


def test_plain_host_gets_v1_suffix():
    client = _build(ProviderSettings(id="lmstudio", api_host="http://localhost:1234"))
    assert isinstance(client, AsyncOpenAI)
    assert str(client.base_url) == "http://localhost:1234/v1/"


def test_trailing_slash_host_used_verbatim():
    client = _build(ProviderSettings(id="openrouter", api_host="https://openrouter.ai/api/v1/", api_key="k"))
    assert str(client.base_url) == "https://openrouter.ai/api/v1/"
    assert client.api_key == "k"


def test_azure_with_key_uses_azure_client():
    settings = ProviderSettings(
        id="azure-openai", type="azure-openai", api_host="https://res.openai.azure.com", api_key="az"
    )
    assert isinstance(_build(settings), AsyncAzureOpenAI)


def test_azure_with_token_provider():
    async def token():
        return "aad-token"

    settings = ProviderSettings(id="azure-openai", api_host="https://res.openai.azure.com")
    assert isinstance(_build(settings, token_provider=token), AsyncAzureOpenAI)


def test_azure_without_credentials_fails():
    settings = ProviderSettings(id="azure-openai", api_host="https://res.openai.azure.com")
    with pytest.raises(ProviderError) as exc_info:
        _build(settings)
    assert exc_info.value.code is ErrorCode.AUTH


def test_azure_models_host_uses_plain_client_with_token():
    async def token():
        return "aad-token"

    settings = ProviderSettings(id="azure-openai", api_host="https://x.services.ai.azure.com/models")
    client = _build(settings, token_provider=token)
    assert type(client) is AsyncOpenAI
    assert client.api_key == "aad-token"
    assert str(client.base_url) == "https://x.services.ai.azure.com/models/v1/"


def test_unknown_provider_without_host(monkeypatch):
    monkeypatch.delenv("MYSTERY_BASE_URL", raising=False)
    with pytest.raises(UnknownProviderError) as exc_info:
        ProviderFactory.create("mystery")
    assert "MYSTERY_BASE_URL" in exc_info.value.message


def test_create_by_id_builds_client_lazily(monkeypatch):
    monkeypatch.delenv("DEEPSEEK_BASE_URL", raising=False)
    provider = compat_providers.create("deepseek", api_key="sk-test-value")
    assert provider.provider_id == "deepseek"
    assert not provider.capabilities.supports_files
    assert provider.settings.api_host == "https://api.deepseek.com"

    async def go():
        try:
            return await provider.get_client()
        finally:
            await aclose_all_clients()

    client = asyncio.run(go())
    assert str(client.base_url) == "https://api.deepseek.com/v1/"


def test_injected_client_is_used_as_is():
    fake = FakeClient()
    provider = ProviderFactory.create(ProviderSettings(id="groq"), client=fake)
    assert asyncio.run(provider.get_client()) is fake
