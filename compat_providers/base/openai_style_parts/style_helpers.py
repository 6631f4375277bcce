"""
Helpers shared by the OpenAI-compatible provider operations.

Pure functions only: building message lists, reading raw JSON responses from
vendor endpoints and post-processing generated titles. No network I/O.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from ...config.defaults import SUMMARY_MESSAGE_WINDOW, TOPIC_NAME_MAX_LENGTH
from ..context import take_right
from ..models import Message, ModelDescriptor, Suggestion
from ..utils.text import remove_special_characters, strip_leading_think_block

WireMessage = Dict[str, Any]


def raw_field(obj: Any, name: str) -> Any:
    """Read ``name`` from a decoded JSON mapping or an SDK object."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def build_chat_messages(system_message: Optional[WireMessage], context: Iterable[WireMessage]) -> List[WireMessage]:
    """``[system?, *context]`` with an absent system message left out."""
    return [m for m in (system_message, *context) if m]


def build_translate_messages(prompt: str, content: str) -> List[WireMessage]:
    if content:
        return [{"role": "system", "content": prompt}, {"role": "user", "content": content}]
    return [{"role": "user", "content": prompt}]


def render_summary_conversation(messages: Sequence[Message]) -> str:
    """Render the newest turns as ``User: ...`` / ``Assistant: ...`` lines.

    The window is taken first and preset turns are dropped from it afterwards.
    """
    window = [m for m in take_right(messages, SUMMARY_MESSAGE_WINDOW) if not m.is_preset]
    lines = [f"User: {m.content}" if m.role == "user" else f"Assistant: {m.content}" for m in window]
    return "\n".join(lines)


def clean_topic_name(text: str) -> str:
    text = strip_leading_think_block(text or "")
    return remove_special_characters(text[:TOPIC_NAME_MAX_LENGTH])


class ThinkFilter:
    """Drops ``<think>...</think>`` deltas from a reasoning model's text stream.

    A delta containing ``<think>`` opens the block and one containing
    ``</think>`` closes it; both delimiting deltas are dropped.
    """

    def __init__(self) -> None:
        self._thinking = False

    def feed(self, delta: str) -> str:
        if "<think>" in delta:
            self._thinking = True
        visible = "" if self._thinking else delta
        if "</think>" in delta:
            self._thinking = False
        return visible


def suggestion_request_body(messages: Sequence[Message], model_id: str) -> Dict[str, Any]:
    return {
        "messages": [{"role": m.role, "content": m.content} for m in messages if m.role == "user"],
        "model": model_id,
        "max_tokens": 0,
        "temperature": 0,
        "n": 0,
    }


def parse_suggestions(response: Any) -> List[Suggestion]:
    questions = raw_field(response, "questions") or []
    return [Suggestion(content=q) for q in questions if q]


def parse_image_urls(response: Any) -> List[str]:
    urls: List[str] = []
    for item in raw_field(response, "data") or []:
        url = raw_field(item, "url")
        if url:
            urls.append(url)
    return urls


def _listing_rows(response: Any) -> List[Any]:
    if isinstance(response, list):
        return response
    for key in ("body", "data"):
        rows = raw_field(response, key)
        if isinstance(rows, list):
            return rows
    return []


def parse_model_listing(shape: str, response: Any) -> List[ModelDescriptor]:
    """Map a ``/models`` response to descriptors according to the provider's shape.

    ``github`` rows carry ``name/summary/publisher``; ``together`` rows carry
    ``id/display_name/organization``; everything else is the OpenAI shape.
    """
    out: List[ModelDescriptor] = []
    for row in _listing_rows(response):
        if shape == "github":
            model_id, description, owner = (
                raw_field(row, "name"),
                raw_field(row, "summary"),
                raw_field(row, "publisher"),
            )
        elif shape == "together":
            model_id, description, owner = (
                raw_field(row, "id"),
                raw_field(row, "display_name"),
                raw_field(row, "organization"),
            )
        else:
            model_id, description, owner = raw_field(row, "id"), raw_field(row, "description"), raw_field(row, "owned_by")
        if not model_id:
            continue
        out.append(ModelDescriptor(id=str(model_id), owned_by=owner, description=description))
    return out


__all__ = [
    "raw_field",
    "build_chat_messages",
    "build_translate_messages",
    "render_summary_conversation",
    "clean_topic_name",
    "ThinkFilter",
    "suggestion_request_body",
    "parse_suggestions",
    "parse_image_urls",
    "parse_model_listing",
]
