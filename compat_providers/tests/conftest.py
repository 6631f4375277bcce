"""Shared fixtures: deterministic clock, log capture and config isolation."""
from __future__ import annotations

import logging
import time
from typing import List

import pytest

from compat_providers.base.logging import BASE_LOGGER_NAME, get_logger
from compat_providers.config import CONFIG_FILE_ENV, reset_config_cache


@pytest.fixture()
def fake_clock(monkeypatch):
    """Provide a deterministic perf_counter.

    Usage: ``fake_clock.advance(ms)`` moves time forward.
    """
    state = {"t": 100.0}

    def perf_counter():
        return state["t"]

    def advance(ms: float):
        state["t"] += ms / 1000.0

    monkeypatch.setattr(time, "perf_counter", perf_counter)
    return type("Clock", (), {"advance": staticmethod(advance)})


@pytest.fixture()
def log_capture():
    """Collect records from the ``compat_providers`` tree (it does not propagate to root)."""
    records: List[logging.LogRecord] = []
    handler = logging.Handler(level=logging.DEBUG)
    handler.emit = lambda record: records.append(record)  # type: ignore
    base = get_logger(BASE_LOGGER_NAME)
    base.addHandler(handler)
    try:
        yield records
    finally:
        base.removeHandler(handler)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    monkeypatch.delenv(CONFIG_FILE_ENV, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()
