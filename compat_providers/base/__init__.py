"""
Provider core: contracts, data model, request building and stream normalization.

Layout (leaf first):
- ``models`` / ``interfaces``: data model and collaborator protocols
- ``capabilities``: provider dialect table and model predicates
- ``encoding`` / ``params`` / ``context``: request construction
- ``streaming`` / ``cancellation``: response normalization
- ``openai_style_parts``: the provider orchestrator
- ``factory``: settings -> provider
"""

from .cancellation import CancellationMonitor, CancellationToken, CancelledError, InMemoryPauseStore
from .capabilities import PROVIDER_CAPABILITIES, ProviderCapabilities, get_provider_capabilities
from .dto import ImageGenerationParams, ProviderSettings
from .encoding import MessageEncoder
from .errors import ErrorCode, ProviderError, classify_exception
from .factory import ProviderFactory, UnknownProviderError, build_client, create_provider
from .interfaces import CompletionClient, FileReader, PauseStore, SettingsStore
from .models import (
    Assistant,
    AssistantSettings,
    CheckResult,
    CompletionChunk,
    CompletionMetrics,
    CompletionResult,
    CustomParameter,
    FileAttachment,
    Message,
    Model,
    ModelDescriptor,
    Suggestion,
    Usage,
)
from .openai_style_parts import OpenAICompatibleProvider, ProviderInit
from .params import ParameterResolver, RequestParameters
from .streaming import StreamCursor, StreamNormalizer, accumulate_chunks

__all__ = [
    "Assistant",
    "AssistantSettings",
    "CancellationMonitor",
    "CancellationToken",
    "CancelledError",
    "CheckResult",
    "CompletionChunk",
    "CompletionClient",
    "CompletionMetrics",
    "CompletionResult",
    "CustomParameter",
    "ErrorCode",
    "FileAttachment",
    "FileReader",
    "ImageGenerationParams",
    "InMemoryPauseStore",
    "Message",
    "MessageEncoder",
    "Model",
    "ModelDescriptor",
    "OpenAICompatibleProvider",
    "PROVIDER_CAPABILITIES",
    "ParameterResolver",
    "PauseStore",
    "ProviderCapabilities",
    "ProviderError",
    "ProviderFactory",
    "ProviderInit",
    "ProviderSettings",
    "RequestParameters",
    "SettingsStore",
    "StreamCursor",
    "StreamNormalizer",
    "Suggestion",
    "UnknownProviderError",
    "Usage",
    "accumulate_chunks",
    "build_client",
    "classify_exception",
    "create_provider",
    "get_provider_capabilities",
]
