"""Parameter resolver.

Computes request parameters from assistant settings, model capabilities and
the provider's dialect. Rules are applied in a fixed order and later rules win:

1. ``temperature`` / ``top_p`` / ``max_tokens`` from the settings.
2. Reasoning models: no sampling fields; ``reasoning_effort`` when the
   provider accepts it.
3. Provider overrides (OpenRouter ``include_reasoning`` for R1 models).
4. ``o1*``: ``max_completion_tokens`` replaces ``max_tokens``; no streaming.
5. ``o1`` / ``o1-2024-12-17`` / ``o3*``: system prompt sent as ``developer``.
6. ``deepseek-reasoner``: the conversation must open with a user turn.
7. Web search fields, then caller custom parameters.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from ...config.defaults import DEVELOPER_FORMATTING_PREFIX
from ..capabilities import (
    ProviderCapabilities,
    get_provider_capabilities,
    get_web_search_params,
    is_o1_family,
    is_reasoning_model,
    requires_leading_user_message,
    supports_stream_output,
    uses_developer_role,
)
from ..errors import ErrorCode, ProviderError
from ..models import Assistant, Model
from .request_parameters import RequestParameters

UNDEFINED_JSON_VALUE = "undefined"


class ParameterResolver:
    """Resolve request parameters for one provider."""

    def __init__(
        self,
        provider_id: str,
        capabilities: Optional[ProviderCapabilities] = None,
        *,
        keep_alive_time: Optional[Any] = None,
    ) -> None:
        self.provider_id = provider_id
        self.capabilities = capabilities or get_provider_capabilities(provider_id)
        self.keep_alive_time = keep_alive_time

    def resolve(
        self,
        assistant: Assistant,
        model: Model,
        messages: Optional[List[Dict[str, Any]]] = None,
    ) -> RequestParameters:
        settings = assistant.settings
        params = RequestParameters(
            model=model.id,
            messages=list(messages or []),
            stream=self.supports_stream_output(assistant, model),
            temperature=settings.temperature,
            top_p=settings.top_p,
            max_tokens=settings.max_tokens,
            keep_alive=self.keep_alive_time,
        )

        if is_reasoning_model(model):
            params.temperature = None
            params.top_p = None
            if self.capabilities.supports_reasoning_effort:
                params.reasoning_effort = settings.reasoning_effort

        if self.capabilities.wants_include_reasoning(model.id):
            params.include_reasoning = True

        if is_o1_family(model.id):
            params.max_tokens = None
            params.max_completion_tokens = settings.max_tokens

        params.extra.update(get_web_search_params(assistant, model, self.capabilities))
        params.extra.update(self.custom_parameters(assistant))
        return params

    def supports_stream_output(self, assistant: Assistant, model: Model) -> bool:
        return assistant.settings.stream_output and supports_stream_output(model)

    def resolve_system_message(self, assistant: Assistant, model: Model) -> Optional[Dict[str, Any]]:
        """Return the system (or developer) message, ``None`` when there is nothing to send."""
        if uses_developer_role(model.id):
            content = DEVELOPER_FORMATTING_PREFIX
            if assistant.prompt:
                content += "\n" + assistant.prompt
            return {"role": "developer", "content": content}
        if assistant.prompt:
            return {"role": "system", "content": assistant.prompt}
        return None

    def ensure_leading_user_message(
        self, model: Model, encoded_context: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        """Prepend an empty user turn when the model needs one."""
        if not requires_leading_user_message(model.id):
            return encoded_context
        if encoded_context and encoded_context[0].get("role") == "user":
            return encoded_context
        return [{"role": "user", "content": ""}, *encoded_context]

    def custom_parameters(self, assistant: Assistant) -> Dict[str, Any]:
        """Decode the assistant's custom parameters in order (later entries win)."""
        out: Dict[str, Any] = {}
        for param in assistant.settings.custom_parameters:
            name = (param.name or "").strip()
            if not name:
                continue
            value = param.value
            if param.type == "json" and isinstance(value, str):
                if value == UNDEFINED_JSON_VALUE:
                    value = None
                else:
                    try:
                        value = json.loads(value)
                    except ValueError as exc:
                        raise ProviderError(
                            code=ErrorCode.VALIDATION,
                            message=f"custom parameter {name!r} is not valid JSON: {exc}",
                            provider=self.provider_id,
                            model=assistant.model.id if assistant.model else None,
                        ) from exc
            out[name] = value
        return out


__all__ = ["ParameterResolver", "UNDEFINED_JSON_VALUE"]
