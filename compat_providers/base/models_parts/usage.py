"""
Token usage counters reported by a backend.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    return None


@dataclass(frozen=True)
class Usage:
    """Prompt/completion/total token counts; any may be unknown."""

    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    @classmethod
    def from_raw(cls, raw: Any) -> Optional["Usage"]:
        """Build from an SDK usage object or a plain mapping.

        Returns ``None`` when ``raw`` carries no counters at all. ``total_tokens``
        is derived when absent and both parts are known.
        """
        if raw is None:
            return None
        if isinstance(raw, Mapping):
            get = raw.get
        else:
            def get(name: str, default: Any = None) -> Any:
                return getattr(raw, name, default)
        prompt = _as_int(get("prompt_tokens"))
        completion = _as_int(get("completion_tokens"))
        total = _as_int(get("total_tokens"))
        if prompt is None and completion is None and total is None:
            return None
        if total is None and prompt is not None and completion is not None:
            total = prompt + completion
        return cls(prompt_tokens=prompt, completion_tokens=completion, total_tokens=total)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["Usage"]
