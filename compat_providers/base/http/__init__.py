from .client import aclose_all_clients, get_async_http_client

__all__ = ["aclose_all_clients", "get_async_http_client"]
