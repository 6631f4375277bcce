"""Typed provider connection settings.

Built from ``config.get_provider_config`` (defaults, config file, environment,
overrides) and validated with Pydantic at the factory boundary.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...config import get_provider_config
from ..capabilities import get_provider_capabilities


class ProviderSettings(BaseModel):
    """Connection settings for one OpenAI-compatible provider.

    Attributes
    ----------
    id:
        Provider id (``"openrouter"``, ``"azure-openai"``...). Selects the
        capability descriptor.
    type:
        API dialect; ``"azure-openai"`` selects the Azure client, anything else
        the plain OpenAI client.
    api_key:
        Credential. Optional for local servers and Azure token auth.
    api_host:
        Base host. A trailing ``/`` keeps it verbatim, otherwise ``/v1/`` is
        appended.
    api_version:
        Azure API version.
    headers:
        Extra static headers for every request.
    keep_alive_time:
        Sent as ``keep_alive`` on chat requests (LM Studio, Ollama).
    timeout_seconds:
        Transport timeout for the pooled HTTP client.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    type: str = "openai"
    api_key: Optional[str] = None
    api_host: Optional[str] = None
    api_version: Optional[str] = None
    headers: Mapping[str, str] = Field(default_factory=dict)
    keep_alive_time: Optional[Any] = None
    timeout_seconds: Optional[float] = None

    @field_validator("api_version", mode="before")
    @classmethod
    def _version_as_text(cls, value: Any) -> Any:
        # YAML reads an unquoted 2024-10-21 as a date.
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @classmethod
    def from_config(cls, provider_id: str, **overrides: Any) -> "ProviderSettings":
        """Load settings for ``provider_id`` through the config merge chain."""
        cfg = get_provider_config(provider_id, overrides or None)
        if get_provider_capabilities(cfg["id"]).azure and "type" not in cfg:
            cfg["type"] = "azure-openai"
        return cls.model_validate(cfg)


__all__ = ["ProviderSettings"]
