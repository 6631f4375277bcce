"""Context window selection helpers."""

from .trimming import filter_context_messages, select_context, take_right

__all__ = ["filter_context_messages", "select_context", "take_right"]
