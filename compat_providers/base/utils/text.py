"""Small text helpers for titles and prompts."""
from __future__ import annotations

import re
import unicodedata

_LEADING_THINK_BLOCK = re.compile(r"^<think>.*?</think>", re.DOTALL)


def remove_special_characters(text: str) -> str:
    """Drop newlines, double quotes and every Unicode punctuation or mark character."""
    text = text.replace("\n", "").replace('"', "")
    return "".join(ch for ch in text if unicodedata.category(ch)[0] not in ("P", "M"))


def strip_leading_think_block(text: str) -> str:
    """Remove a ``<think>...</think>`` block at the very start of ``text``."""
    return _LEADING_THINK_BLOCK.sub("", text, count=1)


def format_api_host(host: str) -> str:
    """Return the SDK base URL for ``host``.

    Hosts ending in ``/`` (and Volcengine's ``/api/v3``) are used verbatim;
    otherwise ``/v1/`` is appended.
    """
    if host.endswith("/") or host.endswith("volces.com/api/v3"):
        return host
    return f"{host}/v1/"


__all__ = ["remove_special_characters", "strip_leading_think_block", "format_api_host"]
