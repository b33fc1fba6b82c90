"""HTTP client factory: builds AbstractHttpClient from settings (no provider logic in composition)."""
from __future__ import annotations

import httpx

from requestable.config.settings import Settings
from requestable.infrastructure.http.httpx_client import HttpxHttpClient
from requestable.ports.http_client import AbstractHttpClient


def create_http_client(settings: Settings) -> AbstractHttpClient:
    """Build an HTTP client from settings. Per-call timeouts override the client default."""
    headers = {"User-Agent": settings.user_agent} if settings.user_agent else None
    async_client = httpx.AsyncClient(
        headers=headers,
        follow_redirects=settings.follow_redirects,
        timeout=httpx.Timeout(
            settings.read_timeout_seconds,
            connect=settings.connect_timeout_seconds,
        ),
        limits=httpx.Limits(max_connections=settings.max_connections),
    )
    return HttpxHttpClient(async_client, acceptable_status=settings.acceptable_status)
