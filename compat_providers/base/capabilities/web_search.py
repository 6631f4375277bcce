"""Web search request fields per provider dialect."""

from __future__ import annotations

from typing import Any, Dict

from ..models import Assistant, Model
from .models import is_openai_web_search_model, is_web_search_model
from .providers import ProviderCapabilities, get_provider_capabilities


def get_web_search_params(
    assistant: Assistant, model: Model, capabilities: ProviderCapabilities | None = None
) -> Dict[str, Any]:
    """Return the request fields that switch web search on (or explicitly off).

    Empty when the model cannot search. OpenAI search-preview models take
    ``web_search_options``; other providers use their own fields from the
    capability table.
    """
    if not is_web_search_model(model):
        return {}
    caps = capabilities or get_provider_capabilities(model.provider)
    if not assistant.enable_web_search:
        return caps.search_params(enabled=False)
    if is_openai_web_search_model(model):
        return {"web_search_options": {}}
    return caps.search_params(enabled=True)


__all__ = ["get_web_search_params"]
