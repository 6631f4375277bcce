"""End-to-end completion orchestration against a fake SDK client."""
from __future__ import annotations

import asyncio
import json

import httpx
import openai
import pytest

from compat_providers.base.cancellation import CancellationToken
from compat_providers.base.errors import ErrorCode, ProviderError
from compat_providers.base.models import Assistant, FileAttachment, Message, Model
from compat_providers.config.defaults import DEVELOPER_FORMATTING_PREFIX, FILE_DIVIDER
from compat_providers.tests.helpers import (
    FakeClient,
    FakeFileReader,
    Recorder,
    astream,
    make_assistant,
    make_chunk,
    make_provider,
    make_response,
    make_usage,
)


def _run(provider, messages, assistant, on_chunk, **kwargs):
    asyncio.run(provider.completions(messages=messages, assistant=assistant, on_chunk=on_chunk, **kwargs))


def test_streaming_completion(fake_clock):
    chunks = [make_chunk("Hel"), make_chunk("lo"), make_chunk(usage=make_usage(4, 2))]
    client = FakeClient(lambda params: astream(chunks, fake_clock, 15))
    rec = Recorder()
    _run(make_provider(client), [Message(role="user", content="Hi")], make_assistant(), rec)

    assert [e.text for e in rec.events] == ["Hel", "lo", ""]
    assert rec.events[0].metrics.time_first_token_millsec == 15
    assert rec.events[-1].metrics.time_first_token_millsec == 15
    assert rec.events[-1].usage.completion_tokens == 2
    assert not any(e.is_final for e in rec.events)

    sent = client.completions.calls[0]
    assert sent["stream"] is True
    assert sent["model"] == "gpt-4o-mini"
    assert sent["messages"] == [
        {"role": "system", "content": "You are terse."},
        {"role": "user", "content": "Hi"},
    ]


def test_non_streaming_completion_emits_one_final_event(fake_clock):
    def respond(params):
        fake_clock.advance(120)
        return make_response("Full answer", usage=make_usage(3, 7))

    client = FakeClient(respond)
    rec = Recorder()
    assistant = make_assistant(stream_output=False)
    _run(make_provider(client), [Message(role="user", content="Hi")], assistant, rec)

    assert len(rec.events) == 1
    event = rec.events[0]
    assert event.is_final
    assert event.kind == "terminal"
    assert event.text == "Full answer"
    assert event.metrics.time_first_token_millsec == 0
    assert event.metrics.time_completion_millsec == 120
    assert event.metrics.completion_tokens == 7
    assert client.completions.calls[0]["stream"] is False


def test_o1_dated_model_gets_developer_message():
    client = FakeClient(make_response("ok"))
    assistant = make_assistant("o1-2024-12-17", prompt="Use tables.", max_tokens=64)
    _run(make_provider(client), [Message(role="user", content="Compare")], assistant, Recorder())

    sent = client.completions.calls[0]
    assert sent["messages"][0] == {"role": "developer", "content": DEVELOPER_FORMATTING_PREFIX + "\nUse tables."}
    assert sent["stream"] is False
    assert sent["max_completion_tokens"] == 64
    assert "max_tokens" not in sent
    assert "temperature" not in sent


def test_deepseek_reasoner_conversation_opened_by_user():
    client = FakeClient(lambda params: astream([make_chunk("ok")]))
    assistant = make_assistant("deepseek-reasoner", provider="deepseek")
    messages = [Message(role="assistant", content="Hello, how can I help?"), Message(role="user", content="Explain")]
    _run(make_provider(client, "deepseek"), messages, assistant, Recorder())

    assert client.completions.calls[0]["messages"] == [
        {"role": "system", "content": "You are terse."},
        {"role": "user", "content": ""},
        {"role": "assistant", "content": "Hello, how can I help?"},
        {"role": "user", "content": "Explain"},
    ]


def test_pause_before_third_chunk_ends_stream_quietly(fake_clock):
    chunks = [make_chunk(f"part{i} ") for i in range(10)]
    client = FakeClient(lambda params: astream(chunks, fake_clock, 5))
    provider = make_provider(client)
    assistant = make_assistant()

    def pause_after_two(count):
        if count == 2:
            provider.pause("topic-1")

    rec = Recorder(pause_after_two)
    _run(provider, [Message(role="user", content="Go")], assistant, rec, stream_key="topic-1")
    assert len(rec.events) == 2


def test_pause_is_keyed_per_stream():
    client = FakeClient(lambda params: astream([make_chunk("a"), make_chunk("b")]))
    provider = make_provider(client)
    provider.pause("another-topic")
    rec = Recorder()
    _run(provider, [Message(role="user", content="Go")], make_assistant(), rec, stream_key="this-topic")
    assert len(rec.events) == 2


def test_paused_key_is_cleared_when_next_completion_starts():
    client = FakeClient(lambda params: astream([make_chunk("a"), make_chunk("b")]))
    provider = make_provider(client)
    provider.pause("topic-1")

    first = Recorder()
    _run(provider, [Message(role="user", content="Go")], make_assistant(), first, stream_key="topic-1")
    second = Recorder()
    _run(provider, [Message(role="user", content="Again")], make_assistant(), second, stream_key="topic-1")

    assert len(first.events) == 2
    assert len(second.events) == 2


def test_pause_during_stream_does_not_leak_into_next_completion():
    chunks = [make_chunk(f"part{i} ") for i in range(5)]
    client = FakeClient(lambda params: astream(chunks))
    provider = make_provider(client)

    def pause_after_one(count):
        if count == 1:
            provider.pause("topic-1")

    first = Recorder(pause_after_one)
    _run(provider, [Message(role="user", content="Go")], make_assistant(), first, stream_key="topic-1")
    second = Recorder()
    _run(provider, [Message(role="user", content="Again")], make_assistant(), second, stream_key="topic-1")

    assert len(first.events) == 1
    assert len(second.events) == 5


def test_resume_clears_pause_flag():
    provider = make_provider(FakeClient())
    provider.pause("k")
    assert provider.pause_store.get("k") is True
    provider.resume("k")
    assert provider.pause_store.get("k") is False


def test_calls_without_key_do_not_share_flags():
    client = FakeClient(lambda params: astream([make_chunk("a"), make_chunk("b")]))
    provider = make_provider(client)
    assistant = make_assistant()
    provider.pause(assistant.id)
    rec = Recorder()
    _run(provider, [Message(role="user", content="Go")], assistant, rec)
    assert len(rec.events) == 2


def test_cancellation_token_stops_stream():
    chunks = [make_chunk(f"part{i} ") for i in range(6)]
    client = FakeClient(lambda params: astream(chunks))
    token = CancellationToken()

    def cancel_after_two(count):
        if count == 2:
            token.cancel("user")

    rec = Recorder(cancel_after_two)
    _run(make_provider(client), [Message(role="user", content="Go")], make_assistant(), rec, cancellation_token=token)
    assert len(rec.events) == 2


def test_async_callbacks_and_filtered_context():
    client = FakeClient(lambda params: astream([make_chunk("a")]))
    seen = {}

    async def on_filter(context):
        seen["context"] = [m.content for m in context]

    async def on_chunk(event):
        seen.setdefault("texts", []).append(event.text)

    messages = [
        Message(role="user", content="old"),
        Message(role="user", content="", is_context_clear=True),
        Message(role="user", content="new"),
    ]
    _run(make_provider(client), messages, make_assistant(), on_chunk, on_filter_messages=on_filter)
    assert seen == {"context": ["new"], "texts": ["a"]}
    assert client.completions.calls[0]["messages"][-1] == {"role": "user", "content": "new"}


def test_string_only_provider_inlines_attachments():
    client = FakeClient(make_response("done"))
    reader = FakeFileReader(texts={"n1.txt": "line one"})
    provider = make_provider(client, "deepseek", file_reader=reader)
    files = (FileAttachment(id="n1", ext=".txt", type="text", origin_name="notes.txt"),)
    assistant = make_assistant("deepseek-chat", provider="deepseek", stream_output=False)
    _run(provider, [Message(role="user", content="Read", files=files)], assistant, Recorder())

    content = client.completions.calls[0]["messages"][-1]["content"]
    assert content == "Read" + FILE_DIVIDER + "file: notes.txt\n\nline one" + FILE_DIVIDER


def test_default_model_used_when_assistant_has_none():
    client = FakeClient(make_response("ok"))
    provider = make_provider(client, default_model=Model(id="fallback-model", provider="openai", streaming=False))
    assistant = Assistant(id="a2")
    _run(provider, [Message(role="user", content="Hi")], assistant, Recorder())
    assert client.completions.calls[0]["model"] == "fallback-model"


def test_missing_model_raises():
    provider = make_provider(FakeClient())
    assistant = Assistant(id="a3")
    with pytest.raises(ProviderError) as exc_info:
        _run(provider, [Message(role="user", content="Hi")], assistant, Recorder())
    assert exc_info.value.code is ErrorCode.MISSING_MODEL


def test_transport_error_propagates_unchanged():
    error = openai.APIConnectionError(request=httpx.Request("POST", "http://localhost/v1/chat/completions"))
    provider = make_provider(FakeClient(error))
    with pytest.raises(openai.APIConnectionError):
        _run(provider, [Message(role="user", content="Hi")], make_assistant(), Recorder())


def test_completion_logging(log_capture):
    client = FakeClient(make_response("ok"))
    assistant = make_assistant(stream_output=False)
    _run(make_provider(client), [Message(role="user", content="Hi")], assistant, Recorder(), stream_key="topic-1")
    payloads = [json.loads(r.getMessage()) for r in log_capture]
    assert [p["event"] for p in payloads] == ["completion.start", "completion.end"]
    assert payloads[0]["provider"] == "openai"
    assert payloads[0]["stream_key"] == "topic-1"
    assert payloads[1]["emitted"] is True
