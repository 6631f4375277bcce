"""Configuration layer for the provider core.

Merge order for ``get_provider_config(provider)`` (later wins):

1. Built-in defaults (``api_host`` from ``defaults.PROVIDER_DEFAULT_API_HOSTS``)
2. Optional external file named by ``COMPAT_PROVIDERS_CONFIG_FILE``
   (JSON, or YAML when it does not parse as JSON)
3. Environment: ``<PROVIDER>_API_KEY``, ``<PROVIDER>_BASE_URL``,
   ``<PROVIDER>_API_VERSION``
4. Explicit overrides passed by the caller (``None`` values ignored)

External file example::

    deepseek:
      api_key: sk-...
    azure-openai:
      api_host: https://my-resource.openai.azure.com
      api_version: 2024-10-21
    lmstudio:
      keep_alive_time: 300
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import PROVIDER_DEFAULT_API_HOSTS
from .env import env_overrides

CONFIG_FILE_ENV = "COMPAT_PROVIDERS_CONFIG_FILE"

_FILE_CACHE: Optional[Dict[str, Any]] = None
_FILE_CACHE_PATH: Optional[str] = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE, _FILE_CACHE_PATH
    path = os.getenv(CONFIG_FILE_ENV)
    if _FILE_CACHE is not None and _FILE_CACHE_PATH == path:
        return _FILE_CACHE
    data: Any = {}
    if path and Path(path).is_file():
        text = Path(path).read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except ValueError:
            data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE, _FILE_CACHE_PATH = data, path
    return data


def reset_config_cache() -> None:
    """Forget the parsed external file so the next lookup re-reads it."""
    global _FILE_CACHE, _FILE_CACHE_PATH
    _FILE_CACHE = None
    _FILE_CACHE_PATH = None


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged configuration mapping for ``provider``."""
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {"id": name}

    if host := PROVIDER_DEFAULT_API_HOSTS.get(name):
        cfg["api_host"] = host

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


__all__ = ["CONFIG_FILE_ENV", "get_provider_config", "reset_config_cache"]
