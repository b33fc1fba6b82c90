"""Concrete HTTP client implementation using httpx (injected where AbstractHttpClient is needed)."""
from __future__ import annotations

import httpx

from requestable.domain.models import EncodedRequest
from requestable.ports.http_client import (
    AbstractHttpClient,
    HttpClientError,
    HttpClientStatusError,
    HttpClientTimeoutError,
    HttpResponse,
    RequestTimeout,
)

DEFAULT_ACCEPTABLE_STATUS = range(200, 300)


class _HttpxResponseAdapter:
    """Adapts httpx.Response to the HttpResponse protocol."""

    def __init__(self, response: httpx.Response, acceptable_status: range) -> None:
        self._response = response
        self._acceptable_status = acceptable_status

    @property
    def content(self) -> bytes:
        return self._response.content

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def url(self) -> str:
        return str(self._response.url)

    def raise_for_status(self) -> None:
        if self._response.status_code not in self._acceptable_status:
            raise HttpClientStatusError(self._response.status_code, self.url)


class HttpxHttpClient(AbstractHttpClient):
    """AbstractHttpClient implementation using httpx.AsyncClient."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        acceptable_status: range = DEFAULT_ACCEPTABLE_STATUS,
    ) -> None:
        self._client = client
        self._acceptable_status = acceptable_status

    async def request(
        self,
        request: EncodedRequest,
        *,
        timeout: RequestTimeout | None = None,
    ) -> HttpResponse:
        kwargs = {}
        if timeout is not None:
            kwargs["timeout"] = httpx.Timeout(
                connect=timeout.connect_seconds,
                read=timeout.read_seconds,
                write=timeout.read_seconds,
                pool=timeout.connect_seconds,
            )
        try:
            response = await self._client.request(
                request.method,
                request.url,
                headers=request.headers or None,
                content=request.body,
                **kwargs,
            )
            return _HttpxResponseAdapter(response, self._acceptable_status)
        except httpx.TimeoutException as exc:
            raise HttpClientTimeoutError(f"timeout while requesting {request.url}") from exc
        except httpx.HTTPError as exc:
            raise HttpClientError(f"http request failed for {request.url}: {exc}") from exc

    async def close(self) -> None:
        await self._client.aclose()
