"""
Model DTO with capability flags.

Flags left as ``None`` are inferred from the model id by
``compat_providers.base.capabilities.models``; explicit values always win.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Model:
    """A model offered by a provider.

    Attributes:
        id: Model id sent on the wire.
        provider: Provider id owning the model (``"openrouter"``).
        name: Display name.
        group: Display grouping.
        vision: Accepts image input.
        reasoning: Emits a reasoning sub-stream / accepts reasoning controls.
        streaming: False when the model must be called non-streaming.
        embedding: Embedding-only model.
        web_search: Can ground answers with web search.
    """

    id: str
    provider: str
    name: Optional[str] = None
    group: Optional[str] = None
    vision: Optional[bool] = None
    reasoning: Optional[bool] = None
    streaming: bool = True
    embedding: Optional[bool] = None
    web_search: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["Model"]
