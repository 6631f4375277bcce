"""Environment variable conventions for provider credentials and hosts.

Provider ids map to an upper-case prefix with ``-`` turned into ``_``
(``azure-openai`` -> ``AZURE_OPENAI``). Recognized suffixes are ``API_KEY``,
``BASE_URL`` and ``API_VERSION``. A few providers accept alias variables for
the key; the canonical name always wins.
"""
from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

ENV_FIELD_SUFFIXES: Dict[str, str] = {
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "api_host": "BASE_URL",
    "api_version": "API_VERSION",
}

# Provider -> extra accepted key variables, checked after the canonical one.
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "azure-openai": ("AZURE_API_KEY",),
    "grok": ("XAI_API_KEY",),
    "dashscope": ("DASHSCOPE_KEY",),
}


def env_prefix(provider: str) -> str:
    """Return the environment prefix for ``provider``."""
    return (provider or "").strip().upper().replace("-", "_")


def is_placeholder(val: Optional[str]) -> bool:
    """Return True when ``val`` looks like a placeholder rather than a credential.

    Case-insensitive: contains ``placeholder``, ``changeme`` or ``example``, or
    starts with ``test_``.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v or v.startswith("test_")


def get_env_var_candidates(provider: str) -> Iterable[str]:
    """Yield acceptable API key variable names, canonical first."""
    canonical = f"{env_prefix(provider)}_API_KEY"
    yield canonical
    for alias in ENV_ALIASES.get((provider or "").lower(), ()):
        if alias != canonical:
            yield alias


def resolve_provider_key(provider: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, variable_name)`` for the first non-empty key variable.

    ``(None, None)`` when nothing usable is set. Placeholder values are skipped.
    """
    for name in get_env_var_candidates(provider):
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val, name
    return None, None


def env_overrides(provider: str) -> Dict[str, str]:
    """Collect ``api_key`` / ``api_host`` / ``api_version`` from the environment."""
    prefix = env_prefix(provider)
    out: Dict[str, str] = {}
    for field, suffix in ENV_FIELD_SUFFIXES.items():
        if field == "api_key":
            key, _ = resolve_provider_key(provider)
            if key:
                out[field] = key
            continue
        val = os.getenv(f"{prefix}_{suffix}")
        if val:
            out[field] = val
    return out


__all__ = [
    "ENV_FIELD_SUFFIXES",
    "ENV_ALIASES",
    "env_prefix",
    "is_placeholder",
    "get_env_var_candidates",
    "resolve_provider_key",
    "env_overrides",
]
