"""Shared httpx transport for calls to the forecast backend."""

import httpx

from apimsample.config.schema import ApiSettings


def build_http_client(settings: ApiSettings, **kwargs) -> httpx.AsyncClient:
    """Pooled async client bound to the backend base URL.

    The bearer token, when configured, rides on every request as a
    default header. Extra keyword arguments go straight to
    ``httpx.AsyncClient`` (tests pass a mock transport this way).
    """
    headers = {"Accept": "application/json"}
    if settings.bearer_token:
        headers["Authorization"] = f"Bearer {settings.bearer_token}"
    return httpx.AsyncClient(base_url=settings.base_url, headers=headers, **kwargs)
