"""Pydantic DTOs validated at the public boundary."""

from .image_params import ImageGenerationParams
from .provider_settings import ProviderSettings

__all__ = ["ImageGenerationParams", "ProviderSettings"]
