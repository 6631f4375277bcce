"""OpenAI-compatible provider implementation split into focused modules."""

from .provider import OpenAICompatibleProvider
from .provider_init import ClientFactory, ProviderInit

__all__ = ["OpenAICompatibleProvider", "ClientFactory", "ProviderInit"]
