"""Structured logging helpers."""
from __future__ import annotations

import json
import logging

from compat_providers.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    LogContext,
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)
from compat_providers.base.log_support import JsonFormatter


def test_child_loggers_hang_off_base():
    assert get_logger("deepseek").name == "compat_providers.deepseek"
    assert get_logger("compat_providers.groq").name == "compat_providers.groq"
    assert get_logger().propagate is False


def test_log_event_drops_none(log_capture):
    log_event(get_logger("t"), "demo", LogContext(provider="openai", model="gpt-4o"), answer=42, missing=None)
    payload = json.loads(log_capture[-1].getMessage())
    assert payload["event"] == "demo"
    assert payload["provider"] == "openai"
    assert payload["answer"] == 42
    assert "missing" not in payload


def test_normalized_event_keeps_canonical_keys(log_capture):
    normalized_log_event(get_logger("t"), "x.end", None, phase="finalize", error_code="timeout", detail="slow")
    payload = json.loads(log_capture[-1].getMessage())
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in payload
    assert payload["emitted"] is None
    assert payload["error_code"] == "timeout"


def test_extra_fields_never_override_canonical(log_capture):
    normalized_log_event(get_logger("t"), "x", None, phase="start", emitted=False, structured="nope")
    payload = json.loads(log_capture[-1].getMessage())
    assert payload["structured"] is True
    assert payload["emitted"] is False


def test_json_formatter_hoists_message_keys():
    record = logging.LogRecord("compat_providers.t", logging.INFO, __file__, 1, json.dumps({"event": "e", "n": 1}), None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "e"
    assert out["n"] == 1
    assert out["level"] == "INFO"


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "providers.log"
    logger = configure_logger(file_path=str(path))
    try:
        log_event(logger, "to.file")
        for handler in logger.handlers:
            handler.flush()
        assert "to.file" in path.read_text(encoding="utf-8")
    finally:
        configure_logger(file_path=None)
    assert all(getattr(h, "baseFilename", None) != str(path) for h in logger.handlers)
