"""OpenAI-compatible provider: completion orchestration and auxiliary operations.

One instance serves one configured provider (OpenAI, Azure OpenAI, OpenRouter,
DeepSeek, Groq and other near-compatible backends). Differences between
backends are read from the provider capability table; nothing in this module
compares provider ids.

Error semantics:
- Transport failures raised by the SDK propagate unchanged from
  ``completions``, ``translate``, ``summaries``, ``generate_text``,
  ``suggestions``, ``generate_image`` and ``get_embedding_dimensions``.
- ``check`` and ``models`` never raise; failures are logged and reported as
  ``CheckResult(valid=False)`` / ``[]``.
- Pausing a stream (``pause``) ends it quietly: no further events, no error.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import uuid
from typing import Any, Awaitable, Callable, List, Optional, Sequence, Union

from ...config.defaults import (
    CHECK_MESSAGE_TEXT,
    DEFAULT_TOPIC_NAMING_PROMPT,
    EMBEDDING_SAMPLE_TEXT,
    SUMMARY_MAX_TOKENS,
    TOPIC_NAMING_PROMPT_SETTING,
)
from ..cancellation import CancellationMonitor, CancellationToken, CancelledError, InMemoryPauseStore
from ..capabilities import get_provider_capabilities, is_o1_family, is_reasoning_model, is_supported_model
from ..context import select_context
from ..dto import ImageGenerationParams
from ..encoding import MessageEncoder
from ..errors import ErrorCode, ProviderError, classify_exception
from ..interfaces import CompletionClient
from ..logging import LogContext, get_logger, normalized_log_event
from ..models import (
    Assistant,
    CheckResult,
    CompletionChunk,
    Message,
    Model,
    ModelDescriptor,
    Suggestion,
)
from ..params import ParameterResolver, RequestParameters
from ..streaming import ChunkCallback, StreamCursor, StreamNormalizer, decode_chunk, decode_response, deliver, now_millsec
from ..streaming.streaming_metrics import build_token_usage
from ..utils.text import strip_leading_think_block
from .provider_init import ProviderInit
from .style_helpers import (
    ThinkFilter,
    build_chat_messages,
    build_translate_messages,
    clean_topic_name,
    parse_image_urls,
    parse_model_listing,
    parse_suggestions,
    raw_field,
    render_summary_conversation,
    suggestion_request_body,
)

FilterCallback = Callable[[List[Message]], Union[None, Awaitable[None]]]
ResponseCallback = Callable[[str], Union[None, Awaitable[None]]]


class _UnavailableFileReader:
    """File reader used when none is configured; every read fails."""

    async def read(self, key: str) -> str:
        raise FileNotFoundError(f"no file reader configured (requested {key!r})")

    async def read_as_inline_image(self, key: str) -> str:
        raise FileNotFoundError(f"no file reader configured (requested {key!r})")


class OpenAICompatibleProvider:
    """Chat provider speaking the OpenAI Chat Completions dialect."""

    def __init__(self, init: ProviderInit) -> None:
        if init.client is None and init.client_factory is None:
            raise ProviderError(
                code=ErrorCode.VALIDATION,
                message="either client or client_factory is required",
                provider=init.settings.id,
            )
        self.settings = init.settings
        self.provider_id = init.settings.id
        self.capabilities = get_provider_capabilities(self.provider_id)
        self._client = init.client
        self._client_factory = init.client_factory
        self._client_lock = asyncio.Lock()
        self._settings_store = init.settings_store if init.settings_store is not None else {}
        self._pause_store = init.pause_store if init.pause_store is not None else InMemoryPauseStore()
        self._default_model = init.default_model
        self._logger = get_logger(init.logger_name)
        self.encoder = MessageEncoder(init.file_reader or _UnavailableFileReader(), self.capabilities)
        self.resolver = ParameterResolver(
            self.provider_id,
            self.capabilities,
            keep_alive_time=init.settings.keep_alive_time,
        )

    # ----- plumbing -----

    @property
    def default_model(self) -> Optional[Model]:
        return self._default_model

    @property
    def pause_store(self) -> Any:
        return self._pause_store

    def pause(self, stream_key: str) -> None:
        """Set the pause flag for ``stream_key`` (requires a store with ``pause``)."""
        self._pause_store_method("pause")(stream_key)

    def resume(self, stream_key: str) -> None:
        """Clear the pause flag for ``stream_key`` (requires a store with ``resume``)."""
        self._pause_store_method("resume")(stream_key)

    def _pause_store_method(self, name: str) -> Callable[[str], None]:
        method = getattr(self._pause_store, name, None)
        if not callable(method):
            raise ProviderError(
                code=ErrorCode.VALIDATION,
                message=f"configured pause store has no {name}()",
                provider=self.provider_id,
            )
        return method

    async def get_client(self) -> CompletionClient:
        if self._client is not None:
            return self._client
        async with self._client_lock:
            if self._client is None:
                assert self._client_factory is not None  # nosec B101 - enforced in __init__
                self._client = await self._client_factory()
        return self._client

    def _require_model(self, model: Optional[Model]) -> Model:
        resolved = model or self._default_model
        if resolved is None:
            raise ProviderError(
                code=ErrorCode.MISSING_MODEL,
                message="No model found",
                provider=self.provider_id,
            )
        return resolved

    def _ctx(self, model: Optional[Model], stream_key: Optional[str] = None) -> LogContext:
        return LogContext(provider=self.provider_id, model=model.id if model else None, stream_key=stream_key)

    async def _create(self, params: RequestParameters) -> Any:
        client = await self.get_client()
        return await client.chat.completions.create(**params.to_kwargs())

    # ----- chat completion -----

    async def completions(
        self,
        *,
        messages: Sequence[Message],
        assistant: Assistant,
        on_chunk: ChunkCallback,
        on_filter_messages: Optional[FilterCallback] = None,
        stream_key: Optional[str] = None,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> None:
        """Run one chat completion and deliver normalized events to ``on_chunk``.

        Args:
            messages: Conversation so far, oldest first; the last turn is the
                one being answered.
            assistant: Prompt, model and settings.
            on_chunk: Receives every event. Awaited when it returns an awaitable.
            on_filter_messages: Receives the context actually sent, once.
            stream_key: Identity of the conversation being answered (topic id).
                ``pause(stream_key)`` stops this stream only. A stale flag on
                the key is cleared when the call starts. Without a key the
                call gets a private one and only ``cancellation_token`` stops
                it.
            cancellation_token: Also stops the stream when cancelled.

        Non-streaming calls deliver exactly one ``is_final`` event with the
        full text and ``time_first_token_millsec == 0``. Streaming calls
        deliver one event per chunk and end quietly when paused.
        """
        model = self._require_model(assistant.model)
        key = stream_key or f"completion-{uuid.uuid4().hex}"
        resume_fn = getattr(self._pause_store, "resume", None)
        if stream_key and callable(resume_fn):
            resume_fn(key)
        ctx = self._ctx(model, key)

        context = select_context(messages, assistant.settings.context_count)
        if on_filter_messages is not None:
            await deliver(on_filter_messages, context)

        encoded = await self.encoder.encode_all(context, model)
        encoded = self.resolver.ensure_leading_user_message(model, encoded)
        system_message = self.resolver.resolve_system_message(assistant, model)
        params = self.resolver.resolve(assistant, model, build_chat_messages(system_message, encoded))

        normalized_log_event(
            self._logger,
            "completion.start",
            ctx,
            phase="start",
            stream=params.stream,
            message_count=len(params.messages),
            reasoning=is_reasoning_model(model),
        )
        cursor = StreamCursor.start()
        response = await self._create(params)

        if not params.stream:
            await self._emit_single(response, cursor, on_chunk, ctx)
            return

        monitor = CancellationMonitor(self._pause_store, key, token=cancellation_token)
        await StreamNormalizer(ctx=ctx, logger=self._logger).run(response, on_chunk, monitor, cursor=cursor)

    async def _emit_single(self, response: Any, cursor: StreamCursor, on_chunk: ChunkCallback, ctx: LogContext) -> None:
        shape = decode_response(response)
        usage = shape.usage
        event = CompletionChunk(
            text=shape.text,
            reasoning_content=shape.reasoning_content,
            usage=usage,
            citations=shape.citations,
            metrics=cursor.metrics(now_millsec(), usage.completion_tokens if usage else None),
            is_final=True,
        )
        normalized_log_event(
            self._logger,
            "completion.end",
            ctx,
            phase="finalize",
            emitted=True,
            tokens=build_token_usage(usage),
            time_completion_millsec=event.metrics.time_completion_millsec,
        )
        await deliver(on_chunk, event)

    # ----- one-shot text operations -----

    async def translate(
        self,
        message: Message,
        assistant: Assistant,
        on_response: Optional[ResponseCallback] = None,
    ) -> str:
        """Translate ``message`` with the assistant's prompt.

        Streams only when ``on_response`` is given and the model can stream;
        ``on_response`` then receives the accumulated text after each delta.
        Reasoning models have their ``<think>`` block removed from the text.
        """
        model = self._require_model(assistant.model)
        stream = on_response is not None and not is_o1_family(model.id)
        params = RequestParameters(
            model=model.id,
            messages=build_translate_messages(assistant.prompt, message.content),
            stream=stream,
            temperature=assistant.settings.temperature,
            keep_alive=self.settings.keep_alive_time,
        )
        response = await self._create(params)
        if not stream:
            text = decode_response(response).text
            return strip_leading_think_block(text) if is_reasoning_model(model) else text

        think_filter = ThinkFilter() if is_reasoning_model(model) else None
        text = ""
        async for raw in response:
            delta = decode_chunk(raw).content or ""
            if think_filter is not None:
                delta = think_filter.feed(delta)
            if not delta:
                continue
            text += delta
            await deliver(on_response, text)
        return text

    async def summaries(
        self, messages: Sequence[Message], assistant: Assistant, model: Optional[Model] = None
    ) -> str:
        """Name the conversation: a short title without punctuation."""
        model = self._require_model(model or assistant.model)
        prompt = self._settings_store.get(TOPIC_NAMING_PROMPT_SETTING) or DEFAULT_TOPIC_NAMING_PROMPT
        params = RequestParameters(
            model=model.id,
            messages=[
                {"role": "system", "content": prompt},
                {"role": "user", "content": render_summary_conversation(messages)},
            ],
            stream=False,
            max_tokens=SUMMARY_MAX_TOKENS,
            keep_alive=self.settings.keep_alive_time,
        )
        response = await self._create(params)
        return clean_topic_name(decode_response(response).text)

    async def generate_text(self, prompt: str, content: str, model: Optional[Model] = None) -> str:
        """One non-streaming call: ``prompt`` as system message, ``content`` as user message."""
        model = self._require_model(model)
        params = RequestParameters(
            model=model.id,
            messages=[{"role": "system", "content": prompt}, {"role": "user", "content": content}],
            stream=False,
            keep_alive=self.settings.keep_alive_time,
        )
        return decode_response(await self._create(params)).text

    async def suggestions(self, messages: Sequence[Message], assistant: Assistant) -> List[Suggestion]:
        """Ask the backend's ``/advice_questions`` endpoint for follow-up questions."""
        if assistant.model is None:
            return []
        client = await self.get_client()
        response = await client.post(
            "/advice_questions",
            body=suggestion_request_body(messages, assistant.model.id),
            cast_to=object,
        )
        return parse_suggestions(response)

    # ----- health and discovery -----

    async def check(self, model: Optional[Model]) -> CheckResult:
        """Check the backend with a tiny non-streaming request; never raises."""
        if model is None:
            error = ProviderError(code=ErrorCode.MISSING_MODEL, message="No model found", provider=self.provider_id)
            return CheckResult(valid=False, error=error)
        params = RequestParameters(
            model=model.id,
            messages=[{"role": "user", "content": CHECK_MESSAGE_TEXT}],
            stream=False,
        )
        try:
            response = await self._create(params)
        except Exception as exc:  # noqa: BLE001 - reported through CheckResult
            normalized_log_event(
                self._logger,
                "check.error",
                self._ctx(model),
                phase="check",
                error_code=classify_exception(exc).value,
                level=logging.WARNING,
                error=str(exc)[:260],
            )
            return CheckResult(valid=False, error=exc)
        return CheckResult(valid=decode_response(response).has_message)

    async def models(self) -> List[ModelDescriptor]:
        """List the provider's chat-capable models; ``[]`` on any failure."""
        try:
            client = await self.get_client()
            shape = self.capabilities.model_listing
            if shape == "openai":
                page = client.models.list()
                if inspect.isawaitable(page):
                    page = await page
                descriptors = parse_model_listing(shape, raw_field(page, "data") or [])
            else:
                descriptors = parse_model_listing(shape, await client.get("/models", cast_to=object))
        except Exception as exc:  # noqa: BLE001 - listing degrades to empty
            normalized_log_event(
                self._logger,
                "models.error",
                self._ctx(None),
                phase="models",
                error_code=classify_exception(exc).value,
                level=logging.WARNING,
                error=str(exc)[:260],
            )
            return []
        return [d for d in descriptors if is_supported_model(d.id)]

    async def get_embedding_dimensions(self, model: Model) -> int:
        client = await self.get_client()
        sample: Any = [EMBEDDING_SAMPLE_TEXT] if self.capabilities.embedding_input_as_list else EMBEDDING_SAMPLE_TEXT
        response = await client.embeddings.create(model=model.id, input=sample)
        first = (raw_field(response, "data") or [None])[0]
        return len(raw_field(first, "embedding") or [])

    # ----- images -----

    async def generate_image(
        self,
        params: ImageGenerationParams,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> List[str]:
        """Generate images and return their URLs.

        Cancelling ``cancellation_token`` aborts the in-flight request and raises
        :class:`CancelledError`.
        """
        client = await self.get_client()
        body = params.to_body()
        if cancellation_token is None:
            return parse_image_urls(await client.post("/images/generations", body=body, cast_to=object))

        cancellation_token.raise_if_cancelled()
        task = asyncio.ensure_future(client.post("/images/generations", body=body, cast_to=object))
        loop = asyncio.get_running_loop()
        unregister = cancellation_token.add_callback(lambda _reason: loop.call_soon_threadsafe(task.cancel))
        try:
            response = await task
        except asyncio.CancelledError:
            if not cancellation_token.cancelled:
                raise
            normalized_log_event(
                self._logger,
                "image.cancelled",
                LogContext(provider=self.provider_id, model=params.model),
                phase="image",
                error_code=ErrorCode.CANCELLED.value,
                reason=cancellation_token.reason,
            )
            raise CancelledError(cancellation_token.reason or "image generation cancelled") from None
        finally:
            unregister()
        return parse_image_urls(response)


__all__ = ["OpenAICompatibleProvider"]
