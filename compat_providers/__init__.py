"""compat_providers package

One streaming protocol for the family of OpenAI-compatible chat backends
(OpenAI, Azure OpenAI, OpenRouter, DeepSeek, Groq and friends).

Typical use::

    provider = create("deepseek", file_reader=reader)
    await provider.completions(
        messages=history,
        assistant=assistant,
        on_chunk=render,
    )

Public API (re-exported):
    - Version: ``__version__``
    - Factory: :func:`create`, :class:`ProviderFactory`
    - Provider: :class:`OpenAICompatibleProvider`
    - Data model: :class:`Message`, :class:`Assistant`, :class:`Model`,
      :class:`CompletionChunk` and friends
    - Errors: :class:`ProviderError`, :class:`ErrorCode`, :class:`CancelledError`
"""

from typing import Any, Union

from .base import *  # noqa: F401,F403
from .base import __all__ as _base_all
from .base.dto import ProviderSettings
from .base.factory import ProviderFactory
from .base.openai_style_parts import OpenAICompatibleProvider

__version__ = "0.1.0"


def create(provider: Union[str, ProviderSettings], **kwargs: Any) -> OpenAICompatibleProvider:
    """Create a provider by id (``"openrouter"``) or from ready settings."""
    return ProviderFactory.create(provider, **kwargs)


__all__ = ["__version__", "create", *_base_all]
