"""Shared ``httpx.AsyncClient`` pool handed to the OpenAI SDK.

Clients are keyed by ``(base_url, purpose)`` so every provider instance
pointing at the same host shares one connection pool. The timeout here is the
transport's own policy; the provider core enforces no timeouts of its own.

Async clients cannot be closed from ``atexit``; applications and tests call
:func:`aclose_all_clients` on shutdown.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional, Tuple

import httpx

from ...config.defaults import (
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_MAX_CONNECTIONS,
    DEFAULT_MAX_KEEPALIVE,
)

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.AsyncClient] = {}
_LOCK = threading.RLock()


def get_async_http_client(
    base_url: Optional[str], purpose: str = "chat", *, timeout: Optional[float] = None
) -> httpx.AsyncClient:
    """Return the pooled client for ``(base_url, purpose)``, creating it on first use.

    ``timeout`` only applies when the client is created.
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None and not client.is_closed:
        return client
    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None and not client.is_closed:
            return client
        client = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout or DEFAULT_HTTP_TIMEOUT_SECONDS),
            limits=httpx.Limits(
                max_connections=DEFAULT_MAX_CONNECTIONS,
                max_keepalive_connections=DEFAULT_MAX_KEEPALIVE,
            ),
            follow_redirects=True,
        )
        _CLIENTS[key] = client
        return client


async def aclose_all_clients() -> None:
    """Close and forget every pooled client."""
    with _LOCK:
        clients = list(_CLIENTS.values())
        _CLIENTS.clear()
    for client in clients:
        if not client.is_closed:
            await client.aclose()


__all__ = ["get_async_http_client", "aclose_all_clients"]
