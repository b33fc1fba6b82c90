"""Requestable port: the capability set a consumer depends on.

Consumers hold an object satisfying this protocol (usually a Requester built
in the composition root) instead of inheriting request behaviour.
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol, runtime_checkable

from requestable.constants import HTTPMethod, ParameterEncoding
from requestable.domain.models import JSONArray, JSONObject, Result
from requestable.ports.http_client import RequestTimeout


@runtime_checkable
class Requestable(Protocol):
    async def request_data(
        self,
        url: str,
        verb: HTTPMethod = HTTPMethod.GET,
        parameters: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        encoding: ParameterEncoding = ParameterEncoding.METHOD_DEPENDENT,
        *,
        timeout: RequestTimeout | None = None,
        completion: Callable[[Result[bytes]], None] | None = None,
    ) -> Result[bytes]:
        """Fetch the raw response body."""
        ...

    async def request_object(
        self,
        url: str,
        verb: HTTPMethod = HTTPMethod.GET,
        parameters: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        encoding: ParameterEncoding = ParameterEncoding.METHOD_DEPENDENT,
        *,
        timeout: RequestTimeout | None = None,
        completion: Callable[[Result[JSONObject]], None] | None = None,
    ) -> Result[JSONObject]:
        """Fetch and decode a JSON object body."""
        ...

    async def request_array(
        self,
        url: str,
        verb: HTTPMethod = HTTPMethod.GET,
        parameters: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        encoding: ParameterEncoding = ParameterEncoding.METHOD_DEPENDENT,
        *,
        timeout: RequestTimeout | None = None,
        completion: Callable[[Result[JSONArray]], None] | None = None,
    ) -> Result[JSONArray]:
        """Fetch and decode a JSON array body."""
        ...
