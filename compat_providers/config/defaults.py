"""compat_providers.config.defaults
================================

Small, stable constants shared across the provider core. No I/O and no
imports from other ``compat_providers`` modules so every layer can depend on
it without cycles.
"""

from __future__ import annotations

from typing import Dict

# ---- Request encoding ----
# Separates inlined attachment blocks when a provider cannot take file parts.
FILE_DIVIDER = "\n\n---\n\n"
# Header line written before each inlined attachment body.
FILE_HEADER_TEMPLATE = "file: {name}\n\n{content}"

# ---- Reasoning ----
# Literal content of the chunk that closes an inline reasoning block.
THINK_END_MARKER = "</think>"
# System prompt prefix for models that take a ``developer`` role message.
DEVELOPER_FORMATTING_PREFIX = "Formatting re-enabled"
# Model that rejects conversations not opened by the user.
DEEPSEEK_REASONER_MODEL_ID = "deepseek-reasoner"

# ---- Context window ----
DEFAULT_CONTEXT_COUNT = 5

# ---- Topic naming (summaries) ----
DEFAULT_TOPIC_NAMING_PROMPT = (
    "Summarize the conversation into a short title without punctuation or symbols. "
    "Output only the title string and nothing else."
)
TOPIC_NAMING_PROMPT_SETTING = "topicNamingPrompt"
SUMMARY_MESSAGE_WINDOW = 5
SUMMARY_MAX_TOKENS = 1000
TOPIC_NAME_MAX_LENGTH = 50

# ---- Health check / embeddings ----
CHECK_MESSAGE_TEXT = "hi"
EMBEDDING_SAMPLE_TEXT = "hi"

# ---- HTTP transport ----
DEFAULT_HTTP_TIMEOUT_SECONDS = 600.0
DEFAULT_MAX_CONNECTIONS = 20
DEFAULT_MAX_KEEPALIVE = 10

# ---- Azure ----
AZURE_DEFAULT_API_VERSION = "2024-10-21"
# Hosts containing this marker use the plain OpenAI client (model inference endpoints).
AZURE_AI_MODELS_HOST_MARKER = "ai.azure.com/models"

# ---- Provider API hosts ----
# A trailing "/" means the host is used verbatim; otherwise "/v1/" is appended.
PROVIDER_DEFAULT_API_HOSTS: Dict[str, str] = {
    "openai": "https://api.openai.com",
    "openrouter": "https://openrouter.ai/api/v1/",
    "deepseek": "https://api.deepseek.com",
    "groq": "https://api.groq.com/openai",
    "github": "https://models.inference.ai.azure.com/",
    "together": "https://api.together.xyz",
    "dashscope": "https://dashscope.aliyuncs.com/compatible-mode/v1/",
    "silicon": "https://api.siliconflow.cn",
    "baichuan": "https://api.baichuan-ai.com",
    "minimax": "https://api.minimax.chat/v1/",
    "doubao": "https://ark.cn-beijing.volces.com/api/v3/",
    "grok": "https://api.x.ai",
    "hunyuan": "https://api.hunyuan.cloud.tencent.com",
    "baidu-cloud": "https://qianfan.baidubce.com/v2/",
    "lmstudio": "http://localhost:1234",
    "ollama": "http://localhost:11434",
}


__all__ = [
    "FILE_DIVIDER",
    "FILE_HEADER_TEMPLATE",
    "THINK_END_MARKER",
    "DEVELOPER_FORMATTING_PREFIX",
    "DEEPSEEK_REASONER_MODEL_ID",
    "DEFAULT_CONTEXT_COUNT",
    "DEFAULT_TOPIC_NAMING_PROMPT",
    "TOPIC_NAMING_PROMPT_SETTING",
    "SUMMARY_MESSAGE_WINDOW",
    "SUMMARY_MAX_TOKENS",
    "TOPIC_NAME_MAX_LENGTH",
    "CHECK_MESSAGE_TEXT",
    "EMBEDDING_SAMPLE_TEXT",
    "DEFAULT_HTTP_TIMEOUT_SECONDS",
    "DEFAULT_MAX_CONNECTIONS",
    "DEFAULT_MAX_KEEPALIVE",
    "AZURE_DEFAULT_API_VERSION",
    "AZURE_AI_MODELS_HOST_MARKER",
    "PROVIDER_DEFAULT_API_HOSTS",
]
