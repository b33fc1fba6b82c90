"""In-process fakes for the HTTP client port, shared by unit tests."""
from __future__ import annotations

from typing import Any

from requestable.domain.models import EncodedRequest
from requestable.domain.requester import Requester
from requestable.ports.http_client import HttpClientStatusError, RequestTimeout


class FakeResponse:
    """Implements HttpResponse for tests; validation accepts 2xx only."""

    def __init__(
        self,
        content: bytes = b"",
        *,
        status_code: int = 200,
        url: str = "https://example.com/",
    ) -> None:
        self._content = content
        self._status_code = status_code
        self._url = url

    @property
    def content(self) -> bytes:
        return self._content

    @property
    def status_code(self) -> int:
        return self._status_code

    @property
    def url(self) -> str:
        return self._url

    def raise_for_status(self) -> None:
        if not 200 <= self._status_code < 300:
            raise HttpClientStatusError(self._status_code, self._url)


class FakeHttpClient:
    """Implements AbstractHttpClient for tests; records every request it receives."""

    def __init__(
        self,
        response: FakeResponse | None = None,
        *,
        raise_on_request: Exception | None = None,
    ) -> None:
        self.response = response or FakeResponse()
        self.requests: list[tuple[EncodedRequest, RequestTimeout | None]] = []
        self.closed = False
        self._raise_on_request = raise_on_request

    @property
    def call_count(self) -> int:
        return len(self.requests)

    async def request(
        self,
        request: EncodedRequest,
        *,
        timeout: RequestTimeout | None = None,
    ) -> FakeResponse:
        self.requests.append((request, timeout))
        if self._raise_on_request is not None:
            raise self._raise_on_request
        return self.response

    async def close(self) -> None:
        self.closed = True


class CompletionRecorder:
    """Completion callback that keeps every result it is handed."""

    def __init__(self) -> None:
        self.results: list[Any] = []

    def __call__(self, result: Any) -> None:
        self.results.append(result)


def make_requester(content: bytes = b"", **kwargs: Any) -> tuple[Requester, FakeHttpClient]:
    client = FakeHttpClient(FakeResponse(content, **kwargs))
    return Requester(client), client

