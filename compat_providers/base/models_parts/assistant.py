"""
Assistant configuration DTOs.

An :class:`Assistant` bundles the system prompt, the model and the per-assistant
sampling settings used to build every request.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional, Tuple

from ...config.defaults import DEFAULT_CONTEXT_COUNT
from .model import Model

ReasoningEffort = Literal["low", "medium", "high"]
CustomParameterType = Literal["string", "number", "boolean", "json"]


@dataclass(frozen=True)
class CustomParameter:
    """Caller supplied request field merged last into the request body.

    ``type == "json"`` values are JSON text decoded at resolution time; the
    literal text ``"undefined"`` removes the field from the request instead.
    """

    name: str
    value: Any
    type: CustomParameterType = "string"


@dataclass(frozen=True)
class AssistantSettings:
    """Sampling and context settings for one assistant.

    Attributes:
        context_count: Number of prior turns kept (the newest turn is added).
        max_tokens: Output token cap, ``None`` for provider default.
        temperature: Sampling temperature, ``None`` for provider default.
        top_p: Nucleus sampling, ``None`` for provider default.
        reasoning_effort: Reasoning budget hint for reasoning models.
        stream_output: Request a streamed response when the model allows it.
        custom_parameters: Ordered extra request fields, later entries win.
    """

    context_count: int = DEFAULT_CONTEXT_COUNT
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    reasoning_effort: Optional[ReasoningEffort] = None
    stream_output: bool = True
    custom_parameters: Tuple[CustomParameter, ...] = ()


@dataclass(frozen=True)
class Assistant:
    """System prompt plus model plus settings."""

    id: str
    prompt: str = ""
    model: Optional[Model] = None
    settings: AssistantSettings = field(default_factory=AssistantSettings)
    enable_web_search: bool = False


__all__ = ["Assistant", "AssistantSettings", "CustomParameter", "ReasoningEffort"]
