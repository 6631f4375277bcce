"""Model capability predicates.

Explicit flags on :class:`~compat_providers.base.models.Model` win; when a flag
is ``None`` it is inferred from the model id with the patterns below.
"""

from __future__ import annotations

import re
from typing import Optional

from ...config.defaults import DEEPSEEK_REASONER_MODEL_ID
from ..models import Model

REASONING_MODEL_REGEX = re.compile(
    r"^(o\d+(?:-[\w-]+)?"
    r"|.*\b(?:reasoner|thinking)\b.*"
    r"|.*-r\d+.*"
    r"|.*\bqwq(?:-[\w-]+)?\b.*"
    r"|.*\bhunyuan-t1(?:-[\w-]+)?\b.*"
    r"|.*\bgrok-3-mini(?:-[\w-]+)?\b.*)$",
    re.IGNORECASE,
)

VISION_MODEL_REGEX = re.compile(
    r"(?:llava|vision|-vl\b|-vl-|vl-|gpt-4o(?!-audio)|gpt-4\.1|gpt-4-turbo|chatgpt-4o"
    r"|claude-3|gemini|pixtral|qvq|minicpm-v|internvl|^o1(?!-mini|-preview)|^o3|^o4)",
    re.IGNORECASE,
)

EMBEDDING_MODEL_REGEX = re.compile(
    r"(?:^text-|embed|bge-|e5-|llm2vec|retrieval|uae-|gte-|jina-clip|jina-embeddings|voyage-)",
    re.IGNORECASE,
)

# Ids no chat UI can drive: speech, transcription, rerank, moderation,
# image-only and embedding models.
NOT_SUPPORTED_MODEL_REGEX = re.compile(
    r"(?:^tts|rerank|whisper|speech|moderation|dall-e|^flux|stable-diffusion|embed)",
    re.IGNORECASE,
)

OPENAI_WEB_SEARCH_MODEL_IDS = frozenset({"gpt-4o-search-preview", "gpt-4o-mini-search-preview"})

DEVELOPER_ROLE_MODEL_IDS = frozenset({"o1", "o1-2024-12-17"})


def _flag(value: Optional[bool], inferred: bool) -> bool:
    return inferred if value is None else bool(value)


def is_reasoning_model(model: Optional[Model]) -> bool:
    if model is None:
        return False
    return _flag(model.reasoning, bool(REASONING_MODEL_REGEX.match(model.id)))


def is_vision_model(model: Optional[Model]) -> bool:
    if model is None:
        return False
    if is_embedding_model(model):
        return False
    return _flag(model.vision, bool(VISION_MODEL_REGEX.search(model.id)))


def is_embedding_model(model: Optional[Model]) -> bool:
    if model is None:
        return False
    return _flag(model.embedding, bool(EMBEDDING_MODEL_REGEX.search(model.id)))


def is_openai_web_search_model(model: Optional[Model]) -> bool:
    return model is not None and model.id in OPENAI_WEB_SEARCH_MODEL_IDS


def is_web_search_model(model: Optional[Model]) -> bool:
    if model is None:
        return False
    return _flag(model.web_search, is_openai_web_search_model(model))


def is_o1_family(model_id: str) -> bool:
    """``o1*`` models take ``max_completion_tokens`` and cannot stream."""
    return model_id.startswith("o1")


def uses_developer_role(model_id: str) -> bool:
    """Models whose system prompt must be sent as a ``developer`` message."""
    return model_id in DEVELOPER_ROLE_MODEL_IDS or model_id.startswith("o3")


def requires_leading_user_message(model_id: str) -> bool:
    """Models that reject a conversation whose first turn is not from the user."""
    return model_id == DEEPSEEK_REASONER_MODEL_ID


def supports_stream_output(model: Model) -> bool:
    return model.streaming and not is_o1_family(model.id)


def is_supported_model(model_id: Optional[str]) -> bool:
    """Return True for ids a chat client can use (see ``NOT_SUPPORTED_MODEL_REGEX``)."""
    if not model_id:
        return False
    return not NOT_SUPPORTED_MODEL_REGEX.search(model_id)


__all__ = [
    "is_reasoning_model",
    "is_vision_model",
    "is_embedding_model",
    "is_openai_web_search_model",
    "is_web_search_model",
    "is_o1_family",
    "uses_developer_role",
    "requires_leading_user_message",
    "supports_stream_output",
    "is_supported_model",
]
