"""HTTP client port: contract for sending an encoded request.

Domain code depends on this port; infrastructure (e.g. httpx) implements it.
Keeps domain free of infrastructure imports.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from requestable.domain.models import EncodedRequest


class HttpClientError(Exception):
    """Base for HTTP client failures (status, network, etc.)."""


class HttpClientTimeoutError(HttpClientError):
    """Raised when the request times out."""


class HttpClientStatusError(HttpClientError):
    """Raised by response validation when the status is not acceptable."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"http status {status_code} for {url}")


@runtime_checkable
class HttpResponse(Protocol):
    """Minimal read-only view of an HTTP response."""

    @property
    def content(self) -> bytes: ...

    @property
    def status_code(self) -> int: ...

    @property
    def url(self) -> str: ...

    def raise_for_status(self) -> None: ...


@dataclass(frozen=True)
class RequestTimeout:
    """Connect and read timeouts in seconds."""

    connect_seconds: float
    read_seconds: float


@runtime_checkable
class AbstractHttpClient(Protocol):
    """Port: send requests. Implementations live in infrastructure."""

    async def request(
        self,
        request: EncodedRequest,
        *,
        timeout: RequestTimeout | None = None,
    ) -> HttpResponse:
        """Send the request; raise HttpClientTimeoutError or HttpClientError on failure."""
        ...

    async def close(self) -> None:
        """Release resources (e.g. connection pool). No-op allowed if nothing to close."""
        ...
