"""Provider capability descriptor table.

Every provider-specific branch in request building reads one
:class:`ProviderCapabilities` entry from :data:`PROVIDER_CAPABILITIES` instead
of comparing provider ids inline. Unknown providers get
:data:`DEFAULT_CAPABILITIES` (a plain OpenAI-compatible endpoint).
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping, Optional, Tuple

ModelListingShape = Literal["openai", "github", "together"]


@dataclass(frozen=True, eq=False)
class ProviderCapabilities:
    """Static facts about one provider's API dialect.

    Attributes:
        supports_files: Accepts multi-part (list) message content. When False
            attachments are inlined into the text.
        supports_reasoning_effort: Accepts ``reasoning_effort``.
        include_reasoning_models: Model id substrings that need
            ``include_reasoning: true`` to receive the reasoning stream.
        model_listing: Shape of the ``/models`` response.
        embedding_input_as_list: Embeddings endpoint rejects a bare string.
        web_search_params: Request fields enabling web search, when the
            provider has a dialect of its own.
        web_search_disabled_params: Fields sent when search is off for a
            web-search capable model.
        azure: Use the Azure OpenAI client.
    """

    supports_files: bool = True
    supports_reasoning_effort: bool = True
    include_reasoning_models: Tuple[str, ...] = ()
    model_listing: ModelListingShape = "openai"
    embedding_input_as_list: bool = False
    web_search_params: Optional[Mapping[str, Any]] = None
    web_search_disabled_params: Optional[Mapping[str, Any]] = None
    azure: bool = False

    def wants_include_reasoning(self, model_id: str) -> bool:
        return any(fragment in model_id for fragment in self.include_reasoning_models)

    def search_params(self, enabled: bool) -> Dict[str, Any]:
        """Return a fresh copy of the web search fields for ``enabled``."""
        params = self.web_search_params if enabled else self.web_search_disabled_params
        return copy.deepcopy(dict(params)) if params else {}


DEFAULT_CAPABILITIES = ProviderCapabilities()

_NO_FILES = ProviderCapabilities(supports_files=False)

PROVIDER_CAPABILITIES: Dict[str, ProviderCapabilities] = {
    "deepseek": _NO_FILES,
    "baichuan": _NO_FILES,
    "minimax": _NO_FILES,
    "doubao": _NO_FILES,
    "groq": ProviderCapabilities(supports_reasoning_effort=False),
    "openrouter": ProviderCapabilities(
        include_reasoning_models=("deepseek-r1",),
        web_search_params={"plugins": [{"id": "web"}]},
    ),
    "github": ProviderCapabilities(model_listing="github"),
    "together": ProviderCapabilities(model_listing="together"),
    "baidu-cloud": ProviderCapabilities(embedding_input_as_list=True),
    "azure-openai": ProviderCapabilities(azure=True),
    "dashscope": ProviderCapabilities(
        web_search_params={"enable_search": True, "search_options": {"forced_search": True}},
    ),
    "hunyuan": ProviderCapabilities(
        web_search_params={"enable_enhancement": True, "citation": True, "search_info": True},
        web_search_disabled_params={"enable_enhancement": False},
    ),
    "grok": ProviderCapabilities(
        web_search_params={"search_parameters": {"mode": "auto", "return_citations": True}},
    ),
}


def get_provider_capabilities(provider_id: Optional[str]) -> ProviderCapabilities:
    """Return the descriptor for ``provider_id`` (case-insensitive)."""
    return PROVIDER_CAPABILITIES.get((provider_id or "").lower(), DEFAULT_CAPABILITIES)


__all__ = [
    "ProviderCapabilities",
    "DEFAULT_CAPABILITIES",
    "PROVIDER_CAPABILITIES",
    "get_provider_capabilities",
]
