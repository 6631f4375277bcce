"""Image generation request DTO."""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ImageGenerationParams(BaseModel):
    """Parameters for ``/images/generations`` on compatible backends.

    ``seed`` is accepted as text (as typed into a UI field) and sent as an
    integer; an empty seed is omitted.
    """

    model: str
    prompt: str
    negative_prompt: Optional[str] = None
    image_size: Optional[str] = None
    batch_size: int = Field(default=1, ge=1)
    seed: Optional[str] = None
    num_inference_steps: Optional[int] = None
    guidance_scale: Optional[float] = None
    prompt_enhancement: Optional[bool] = None

    def to_body(self) -> Dict[str, Any]:
        body = self.model_dump(exclude_none=True)
        body.pop("seed", None)
        if self.seed:
            body["seed"] = int(self.seed)
        return body


__all__ = ["ImageGenerationParams"]
