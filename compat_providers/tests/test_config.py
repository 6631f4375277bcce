"""Configuration merge chain: defaults, config file, environment, overrides."""
from __future__ import annotations

import json

from compat_providers.base.dto import ProviderSettings
from compat_providers.config import CONFIG_FILE_ENV, get_provider_config, reset_config_cache
from compat_providers.config.env import (
    env_overrides,
    env_prefix,
    get_env_var_candidates,
    is_placeholder,
    resolve_provider_key,
)


def _clear(monkeypatch, *names):
    for name in names:
        monkeypatch.delenv(name, raising=False)


def test_env_prefix():
    assert env_prefix("azure-openai") == "AZURE_OPENAI"
    assert env_prefix("deepseek") == "DEEPSEEK"


def test_candidates_canonical_first():
    assert list(get_env_var_candidates("grok")) == ["GROK_API_KEY", "XAI_API_KEY"]


def test_placeholders():
    assert is_placeholder("sk-PLACEHOLDER")
    assert is_placeholder("test_key")
    assert not is_placeholder("sk-live-123")
    assert not is_placeholder(None)


def test_alias_used_when_canonical_missing(monkeypatch):
    _clear(monkeypatch, "GROK_API_KEY")
    monkeypatch.setenv("XAI_API_KEY", "xai-secret")
    assert resolve_provider_key("grok") == ("xai-secret", "XAI_API_KEY")


def test_placeholder_canonical_skipped(monkeypatch):
    monkeypatch.setenv("GROK_API_KEY", "changeme")
    monkeypatch.setenv("XAI_API_KEY", "xai-real")
    assert resolve_provider_key("grok") == ("xai-real", "XAI_API_KEY")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("AZURE_OPENAI_API_KEY", "az-key")
    monkeypatch.setenv("AZURE_OPENAI_BASE_URL", "https://res.openai.azure.com")
    monkeypatch.setenv("AZURE_OPENAI_API_VERSION", "2025-01-01")
    assert env_overrides("azure-openai") == {
        "api_key": "az-key",
        "api_host": "https://res.openai.azure.com",
        "api_version": "2025-01-01",
    }


def test_default_host(monkeypatch):
    _clear(monkeypatch, "OPENROUTER_API_KEY", "OPENROUTER_BASE_URL", "OPENROUTER_API_VERSION")
    cfg = get_provider_config("OpenRouter")
    assert cfg == {"id": "openrouter", "api_host": "https://openrouter.ai/api/v1/"}


def test_yaml_file_then_env_then_overrides(monkeypatch, tmp_path):
    _clear(monkeypatch, "DEEPSEEK_API_KEY", "DEEPSEEK_BASE_URL", "DEEPSEEK_API_VERSION")
    path = tmp_path / "providers.yaml"
    path.write_text("deepseek:\n  api_key: from-file\n  keep_alive_time: 30\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    reset_config_cache()

    cfg = get_provider_config("deepseek")
    assert cfg["api_key"] == "from-file"
    assert cfg["keep_alive_time"] == 30
    assert cfg["api_host"] == "https://api.deepseek.com"

    monkeypatch.setenv("DEEPSEEK_API_KEY", "from-env")
    assert get_provider_config("deepseek")["api_key"] == "from-env"
    cfg = get_provider_config("deepseek", {"api_key": "explicit", "api_host": None})
    assert cfg["api_key"] == "explicit"
    assert cfg["api_host"] == "https://api.deepseek.com"


def test_json_file(monkeypatch, tmp_path):
    _clear(monkeypatch, "LMSTUDIO_API_KEY", "LMSTUDIO_BASE_URL", "LMSTUDIO_API_VERSION")
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"lmstudio": {"api_host": "http://10.0.0.5:1234"}}), encoding="utf-8")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    reset_config_cache()
    assert get_provider_config("lmstudio")["api_host"] == "http://10.0.0.5:1234"


def test_missing_file_is_ignored(monkeypatch, tmp_path):
    _clear(monkeypatch, "GROQ_API_KEY", "GROQ_BASE_URL", "GROQ_API_VERSION")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(tmp_path / "nope.yaml"))
    reset_config_cache()
    assert get_provider_config("groq")["api_host"] == "https://api.groq.com/openai"


def test_settings_from_config(monkeypatch):
    _clear(monkeypatch, "AZURE_OPENAI_API_KEY", "AZURE_API_KEY", "AZURE_OPENAI_API_VERSION")
    monkeypatch.setenv("AZURE_OPENAI_BASE_URL", "https://res.openai.azure.com")
    settings = ProviderSettings.from_config("azure-openai", api_key="k")
    assert settings.type == "azure-openai"
    assert settings.api_host == "https://res.openai.azure.com"
    assert settings.api_key == "k"


def test_yaml_azure_api_version_is_text(monkeypatch, tmp_path):
    _clear(monkeypatch, "AZURE_OPENAI_API_KEY", "AZURE_API_KEY", "AZURE_OPENAI_BASE_URL", "AZURE_OPENAI_API_VERSION")
    path = tmp_path / "providers.yaml"
    path.write_text(
        "azure-openai:\n  api_host: https://res.openai.azure.com\n  api_version: 2024-10-21\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(CONFIG_FILE_ENV, str(path))
    reset_config_cache()

    settings = ProviderSettings.from_config("azure-openai")
    assert settings.api_version == "2024-10-21"
    assert settings.type == "azure-openai"
