"""CompletionClient Protocol (single-class module).

Structural view of the OpenAI SDK async client surface the provider core
uses. ``openai.AsyncOpenAI`` and ``openai.AsyncAzureOpenAI`` satisfy it; tests
pass ``SimpleNamespace`` fakes with the same attribute paths.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable


class _ChatCompletions(Protocol):  # pragma: no cover - structural hint only
    async def create(self, **params: Any) -> Any:
        """Return a response object, or an async iterable of chunks when ``stream=True``."""
        ...


class _Chat(Protocol):  # pragma: no cover - structural hint only
    completions: _ChatCompletions


class _Models(Protocol):  # pragma: no cover - structural hint only
    def list(self) -> Any:
        """Return an awaitable page exposing ``data``."""
        ...


class _Embeddings(Protocol):  # pragma: no cover - structural hint only
    async def create(self, *, model: str, input: Any, **params: Any) -> Any:
        ...


@runtime_checkable
class CompletionClient(Protocol):
    """OpenAI-shaped async client.

    ``post``/``get`` are the SDK's raw request helpers; with ``cast_to=object``
    they return decoded JSON, used for vendor endpoints the SDK has no typed
    method for (``/advice_questions``, ``/images/generations`` on some
    backends, non-standard ``/models`` listings).
    """

    chat: _Chat
    models: _Models
    embeddings: _Embeddings

    async def post(
        self, path: str, *, cast_to: Any, body: Optional[Mapping[str, Any]] = None, **options: Any
    ) -> Any:  # pragma: no cover - interface
        ...

    async def get(self, path: str, *, cast_to: Any, **options: Any) -> Any:  # pragma: no cover - interface
        ...


__all__ = ["CompletionClient"]
