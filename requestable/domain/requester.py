"""Request facade: raw, JSON-object and JSON-array requests over the HTTP port.

`request_object` and `request_array` are layered on `request_data`: one
transport call, then a JSON decode whose result must have the requested
top-level shape. Every operation returns a Result and never raises for
request failures; an optional completion callback receives that same
Result exactly once.
"""
from __future__ import annotations

import json
from typing import Any, Callable, Mapping, TypeVar
from urllib.parse import urlsplit, urlunsplit

from loguru import logger

from requestable.constants import HTTPMethod, ParameterEncoding
from requestable.core import SERVICE_NAME
from requestable.domain.encoding import encode_request
from requestable.domain.errors import (
    InvalidJSONArrayError,
    InvalidJSONObjectError,
    InvalidURLError,
    RequestableError,
)
from requestable.domain.models import JSONArray, JSONObject, RequestDescriptor, Result
from requestable.domain.urls import parse_url
from requestable.ports.http_client import AbstractHttpClient, RequestTimeout

T = TypeVar("T")

Completion = Callable[[Result[T]], None]


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).debug("")


def _loggable_url(url: str) -> str:
    # Query strings may carry credentials; keep them out of log events.
    parts = urlsplit(url)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _complete(result: Result[T], completion: Completion[T] | None) -> Result[T]:
    if completion is not None:
        completion(result)
    return result


class Requester:
    """Implements the Requestable port on top of an injectable AbstractHttpClient.

    Holds no per-call state; concurrent calls are independent and complete in
    no particular order.
    """

    def __init__(
        self,
        client: AbstractHttpClient,
        *,
        default_timeout: RequestTimeout | None = None,
    ) -> None:
        self._client = client
        self._default_timeout = default_timeout

    async def request_data(
        self,
        url: str,
        verb: HTTPMethod = HTTPMethod.GET,
        parameters: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        encoding: ParameterEncoding = ParameterEncoding.METHOD_DEPENDENT,
        *,
        timeout: RequestTimeout | None = None,
        completion: Completion[bytes] | None = None,
    ) -> Result[bytes]:
        """Send one request and deliver the raw body.

        An unparseable url completes with InvalidURLError without touching the
        transport. Transport and validation errors are delivered unchanged.
        """
        try:
            parse_url(url)
        except InvalidURLError as exc:
            return _complete(Result.failure(exc), completion)

        descriptor = RequestDescriptor(
            url=url,
            verb=verb,
            parameters=parameters,
            headers=headers,
            encoding=encoding,
        )
        result = await self._send(descriptor, timeout or self._default_timeout)
        return _complete(result, completion)

    async def request_object(
        self,
        url: str,
        verb: HTTPMethod = HTTPMethod.GET,
        parameters: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        encoding: ParameterEncoding = ParameterEncoding.METHOD_DEPENDENT,
        *,
        timeout: RequestTimeout | None = None,
        completion: Completion[JSONObject] | None = None,
    ) -> Result[JSONObject]:
        data = await self.request_data(
            url, verb, parameters, headers, encoding, timeout=timeout
        )
        result: Result[JSONObject] = self._decode(data, dict, InvalidJSONObjectError)
        return _complete(result, completion)

    async def request_array(
        self,
        url: str,
        verb: HTTPMethod = HTTPMethod.GET,
        parameters: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        encoding: ParameterEncoding = ParameterEncoding.METHOD_DEPENDENT,
        *,
        timeout: RequestTimeout | None = None,
        completion: Completion[JSONArray] | None = None,
    ) -> Result[JSONArray]:
        data = await self.request_data(
            url, verb, parameters, headers, encoding, timeout=timeout
        )
        result: Result[JSONArray] = self._decode(data, list, InvalidJSONArrayError)
        return _complete(result, completion)

    async def _send(
        self,
        descriptor: RequestDescriptor,
        timeout: RequestTimeout | None,
    ) -> Result[bytes]:
        try:
            request = encode_request(descriptor)
            _log("request_issued", method=request.method, url=_loggable_url(request.url))
            response = await self._client.request(request, timeout=timeout)
            response.raise_for_status()
        except Exception as exc:
            _log(
                "request_completed",
                url=_loggable_url(descriptor.url),
                outcome="failure",
                error=type(exc).__name__,
            )
            return Result.failure(exc)

        _log(
            "request_completed",
            url=_loggable_url(descriptor.url),
            outcome="success",
            status_code=response.status_code,
            content_length=len(response.content),
        )
        return Result.success(response.content)

    @staticmethod
    def _decode(
        data: Result[bytes],
        shape: type,
        error_type: type[RequestableError],
    ) -> Result[Any]:
        if data.error is not None:
            return Result.failure(data.error)
        try:
            # ValueError covers JSONDecodeError, undecodable bytes and NaN/Infinity.
            decoded = json.loads(data.value or b"", parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            return Result.failure(error_type())
        if not isinstance(decoded, shape):
            return Result.failure(error_type())
        return Result.success(decoded)
