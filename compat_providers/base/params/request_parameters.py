"""Resolved request parameters.

``to_body()`` is the JSON body the backend receives. ``to_kwargs()`` splits the
same body into what ``AsyncCompletions.create`` accepts as keyword arguments
plus an ``extra_body`` mapping for vendor fields the SDK does not know
(``include_reasoning``, ``keep_alive``, ``enable_search``...). Fields left as
``None`` are never sent.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

SDK_CHAT_FIELDS = frozenset(
    {
        "model",
        "messages",
        "frequency_penalty",
        "logit_bias",
        "logprobs",
        "max_completion_tokens",
        "max_tokens",
        "metadata",
        "modalities",
        "n",
        "parallel_tool_calls",
        "presence_penalty",
        "reasoning_effort",
        "response_format",
        "seed",
        "service_tier",
        "stop",
        "store",
        "stream",
        "stream_options",
        "temperature",
        "tool_choice",
        "tools",
        "top_logprobs",
        "top_p",
        "user",
        "web_search_options",
    }
)


@dataclass
class RequestParameters:
    """Per-request fields computed from assistant settings and model.

    ``extra`` holds web search fields and caller custom parameters. It is
    merged last; a ``None`` value there removes the field from the body.
    """

    model: str
    messages: List[Dict[str, Any]] = field(default_factory=list)
    stream: bool = False
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_tokens: Optional[int] = None
    max_completion_tokens: Optional[int] = None
    reasoning_effort: Optional[str] = None
    include_reasoning: Optional[bool] = None
    keep_alive: Optional[Any] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "model": self.model,
            "messages": self.messages,
            "stream": self.stream,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "max_tokens": self.max_tokens,
            "max_completion_tokens": self.max_completion_tokens,
            "reasoning_effort": self.reasoning_effort,
            "include_reasoning": self.include_reasoning,
            "keep_alive": self.keep_alive,
        }
        body = {k: v for k, v in body.items() if v is not None}
        for key, value in self.extra.items():
            if value is None:
                body.pop(key, None)
            else:
                body[key] = value
        return body

    def to_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {}
        extra_body: Dict[str, Any] = {}
        for key, value in self.to_body().items():
            (kwargs if key in SDK_CHAT_FIELDS else extra_body)[key] = value
        if extra_body:
            kwargs["extra_body"] = extra_body
        return kwargs


__all__ = ["RequestParameters", "SDK_CHAT_FIELDS"]
