"""
Model listing entry returned by ``models()``.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ModelDescriptor:
    """One entry of a provider model listing (OpenAI ``/models`` shape)."""

    id: str
    object: str = "model"
    owned_by: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


__all__ = ["ModelDescriptor"]
