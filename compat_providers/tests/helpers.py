"""Fakes shared across the test suite.

SDK objects are modelled with ``SimpleNamespace`` so attribute access matches
the OpenAI SDK (``chunk.choices[0].delta.content``) without network I/O.
"""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any, Callable, Dict, Iterable, List, Optional

from compat_providers.base.dto import ProviderSettings
from compat_providers.base.factory import ProviderFactory
from compat_providers.base.models import Assistant, AssistantSettings, Model


def make_usage(prompt: int = 3, completion: int = 5) -> SimpleNamespace:
    return SimpleNamespace(prompt_tokens=prompt, completion_tokens=completion, total_tokens=prompt + completion)


def make_chunk(
    content: Optional[str] = None,
    *,
    reasoning_content: Optional[str] = None,
    reasoning: Optional[str] = None,
    usage: Any = None,
    citations: Optional[List[str]] = None,
    finish_reason: Optional[str] = None,
) -> SimpleNamespace:
    delta = SimpleNamespace(content=content)
    if reasoning_content is not None:
        delta.reasoning_content = reasoning_content
    if reasoning is not None:
        delta.reasoning = reasoning
    chunk = SimpleNamespace(
        choices=[SimpleNamespace(delta=delta, finish_reason=finish_reason)],
        usage=usage,
    )
    if citations is not None:
        chunk.citations = citations
    return chunk


def make_response(content: Optional[str] = "", *, usage: Any = None, reasoning_content: Optional[str] = None) -> SimpleNamespace:
    message = SimpleNamespace(role="assistant", content=content)
    if reasoning_content is not None:
        message.reasoning_content = reasoning_content
    return SimpleNamespace(choices=[SimpleNamespace(message=message, finish_reason="stop")], usage=usage)


async def astream(chunks: Iterable[Any], clock: Any = None, step_ms: float = 0.0):
    """Yield ``chunks`` asynchronously, advancing ``clock`` before each one."""
    for chunk in chunks:
        if clock is not None and step_ms:
            clock.advance(step_ms)
        yield chunk


class FakeCompletions:
    """``client.chat.completions`` replacement recording every call.

    Each queued result is returned once (the last one repeats). Callables are
    invoked with the params so streams can be rebuilt per call; exceptions are
    raised.
    """

    def __init__(self, *results: Any) -> None:
        self.calls: List[Dict[str, Any]] = []
        self._results = list(results)

    async def create(self, **params: Any) -> Any:
        self.calls.append(params)
        result = self._results.pop(0) if len(self._results) > 1 else self._results[0]
        if isinstance(result, BaseException):
            raise result
        if callable(result):
            return result(params)
        return result


class FakeClient:
    def __init__(
        self,
        *results: Any,
        models: Any = None,
        embeddings: Any = None,
        raw: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.completions = FakeCompletions(*(results or (make_response("ok"),)))
        self.chat = SimpleNamespace(completions=self.completions)
        self.models = SimpleNamespace(list=self._list_models)
        self.embeddings = SimpleNamespace(create=self._create_embedding)
        self._models = models
        self._embeddings = embeddings
        self._raw = raw or {}
        self.raw_calls: List[Dict[str, Any]] = []
        self.embedding_calls: List[Dict[str, Any]] = []

    async def _list_models(self) -> Any:
        if isinstance(self._models, BaseException):
            raise self._models
        return self._models

    async def _create_embedding(self, **params: Any) -> Any:
        self.embedding_calls.append(params)
        return self._embeddings

    async def _request(self, method: str, path: str, body: Any) -> Any:
        self.raw_calls.append({"method": method, "path": path, "body": body})
        result = self._raw[path]
        if isinstance(result, BaseException):
            raise result
        if callable(result):
            result = result(body)
            if hasattr(result, "__await__"):
                result = await result
        return result

    async def post(self, path: str, *, cast_to: Any, body: Any = None, **options: Any) -> Any:
        return await self._request("post", path, body)

    async def get(self, path: str, *, cast_to: Any, **options: Any) -> Any:
        return await self._request("get", path, None)


class FakeFileReader:
    def __init__(self, texts: Optional[Dict[str, str]] = None, images: Optional[Dict[str, str]] = None) -> None:
        self.texts = texts or {}
        self.images = images or {}
        self.reads: List[str] = []

    async def read(self, key: str) -> str:
        self.reads.append(key)
        return self.texts[key]

    async def read_as_inline_image(self, key: str) -> str:
        self.reads.append(key)
        return self.images[key]


class Recorder:
    """Collects ``on_chunk`` events; optional hook runs after each one."""

    def __init__(self, hook: Optional[Callable[[int], None]] = None) -> None:
        self.events: List[Any] = []
        self._hook = hook

    def __call__(self, event: Any) -> None:
        self.events.append(event)
        if self._hook is not None:
            self._hook(len(self.events))


def make_provider(client: Any, provider_id: str = "openai", **kwargs: Any):
    settings = ProviderSettings(id=provider_id, api_host="http://localhost:1234")
    return ProviderFactory.create(settings, client=client, **kwargs)


def make_assistant(model_id: str = "gpt-4o-mini", provider: str = "openai", prompt: str = "You are terse.", **settings: Any) -> Assistant:
    return Assistant(
        id="assistant-1",
        prompt=prompt,
        model=Model(id=model_id, provider=provider),
        settings=AssistantSettings(**settings),
    )
