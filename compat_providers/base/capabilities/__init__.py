"""Provider dialect table and model capability predicates."""

from __future__ import annotations

from .models import (
    is_embedding_model,
    is_o1_family,
    is_openai_web_search_model,
    is_reasoning_model,
    is_supported_model,
    is_vision_model,
    is_web_search_model,
    requires_leading_user_message,
    supports_stream_output,
    uses_developer_role,
)
from .providers import (
    DEFAULT_CAPABILITIES,
    PROVIDER_CAPABILITIES,
    ProviderCapabilities,
    get_provider_capabilities,
)
from .web_search import get_web_search_params

__all__ = [
    "ProviderCapabilities",
    "DEFAULT_CAPABILITIES",
    "PROVIDER_CAPABILITIES",
    "get_provider_capabilities",
    "get_web_search_params",
    "is_embedding_model",
    "is_o1_family",
    "is_openai_web_search_model",
    "is_reasoning_model",
    "is_supported_model",
    "is_vision_model",
    "is_web_search_model",
    "requires_leading_user_message",
    "supports_stream_output",
    "uses_developer_role",
]
