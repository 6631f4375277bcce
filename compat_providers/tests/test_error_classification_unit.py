"""Unit tests for exception classification."""
from __future__ import annotations

import asyncio

import httpx
import openai
import pytest

from compat_providers.base.cancellation import CancelledError
from compat_providers.base.errors import ErrorCode, ProviderError, classify_exception

REQUEST = httpx.Request("POST", "http://localhost/v1/chat/completions")


def _status_error(cls, status):
    return cls("boom", response=httpx.Response(status, request=REQUEST), body=None)


def test_provider_error_passthrough():
    err = ProviderError(code=ErrorCode.MISSING_MODEL, message="No model found", provider="openai")
    assert classify_exception(err) is ErrorCode.MISSING_MODEL


def test_cancellation():
    assert classify_exception(CancelledError("stop")) is ErrorCode.CANCELLED
    assert classify_exception(asyncio.CancelledError()) is ErrorCode.CANCELLED


def test_sdk_timeout_before_connection():
    assert classify_exception(openai.APITimeoutError(request=REQUEST)) is ErrorCode.TIMEOUT
    assert classify_exception(openai.APIConnectionError(request=REQUEST)) is ErrorCode.CONNECTION
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT


@pytest.mark.parametrize(
    "cls, status, expected",
    [
        (openai.AuthenticationError, 401, ErrorCode.AUTH),
        (openai.PermissionDeniedError, 403, ErrorCode.AUTH),
        (openai.NotFoundError, 404, ErrorCode.NOT_FOUND),
        (openai.RateLimitError, 429, ErrorCode.RATE_LIMIT),
        (openai.BadRequestError, 400, ErrorCode.VALIDATION),
        (openai.InternalServerError, 503, ErrorCode.UNAVAILABLE),
        (openai.InternalServerError, 599, ErrorCode.SERVER_ERROR),
    ],
)
def test_http_status_mapping(cls, status, expected):
    assert classify_exception(_status_error(cls, status)) is expected


def test_unknown():
    assert classify_exception(ValueError("x")) is ErrorCode.UNKNOWN


def test_provider_error_str_includes_context():
    err = ProviderError(code=ErrorCode.VALIDATION, message="bad", provider="groq", model="llama")
    assert "groq" in str(err) and "validation" in str(err).lower()
