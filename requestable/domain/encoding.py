"""Parameter encoding: place request parameters in the query string or body.

Form and query parameters use the bracket convention for nested values:
``{"a": {"b": 1}, "c": [1, 2]}`` becomes ``a[b]=1&c[]=1&c[]=2``. Booleans are
sent as ``1``/``0``. Top-level keys are sorted so the output is stable.
"""
from __future__ import annotations

import json
from typing import Any, Mapping
from urllib.parse import quote, urlsplit, urlunsplit

from requestable.constants import (
    FORM_CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    QUERY_STRING_METHODS,
    HTTPMethod,
    ParameterEncoding,
)
from requestable.domain.models import EncodedRequest, RequestDescriptor

# RFC 3986 unreserved characters are always kept; "?" and "/" are allowed in queries.
_QUERY_SAFE = "?/"


def escape(value: str) -> str:
    return quote(value, safe=_QUERY_SAFE)


def query_components(key: str, value: Any) -> list[tuple[str, str]]:
    components: list[tuple[str, str]] = []
    if isinstance(value, Mapping):
        for nested_key, nested_value in value.items():
            components.extend(query_components(f"{key}[{nested_key}]", nested_value))
    elif isinstance(value, (list, tuple)):
        for item in value:
            components.extend(query_components(f"{key}[]", item))
    elif isinstance(value, bool):
        components.append((escape(key), "1" if value else "0"))
    elif value is None:
        components.append((escape(key), ""))
    else:
        components.append((escape(key), escape(str(value))))
    return components


def form_encode(parameters: Mapping[str, Any]) -> str:
    components: list[tuple[str, str]] = []
    for key in sorted(parameters):
        components.extend(query_components(key, parameters[key]))
    return "&".join(f"{k}={v}" for k, v in components)


def _append_query(url: str, query: str) -> str:
    parts = urlsplit(url)
    merged = f"{parts.query}&{query}" if parts.query else query
    return urlunsplit((parts.scheme, parts.netloc, parts.path, merged, parts.fragment))


def _uses_query_string(verb: HTTPMethod, encoding: ParameterEncoding) -> bool:
    if encoding == ParameterEncoding.QUERY_STRING:
        return True
    if encoding == ParameterEncoding.METHOD_DEPENDENT:
        return verb in QUERY_STRING_METHODS
    return False


def _with_content_type(headers: dict[str, str], content_type: str) -> dict[str, str]:
    if not any(name.lower() == "content-type" for name in headers):
        headers["Content-Type"] = content_type
    return headers


def encode_request(descriptor: RequestDescriptor) -> EncodedRequest:
    """Build the wire request for a descriptor.

    Absent or empty parameters leave url and body untouched. A Content-Type
    header is only added when the caller did not supply one.
    """
    verb = HTTPMethod(descriptor.verb)
    headers = dict(descriptor.headers or {})
    parameters = descriptor.parameters

    if not parameters:
        return EncodedRequest(method=verb.value, url=descriptor.url, headers=headers)

    if descriptor.encoding == ParameterEncoding.JSON:
        body = json.dumps(dict(parameters)).encode("utf-8")
        return EncodedRequest(
            method=verb.value,
            url=descriptor.url,
            headers=_with_content_type(headers, JSON_CONTENT_TYPE),
            body=body,
        )

    query = form_encode(parameters)
    if _uses_query_string(verb, ParameterEncoding(descriptor.encoding)):
        return EncodedRequest(
            method=verb.value,
            url=_append_query(descriptor.url, query),
            headers=headers,
        )

    return EncodedRequest(
        method=verb.value,
        url=descriptor.url,
        headers=_with_content_type(headers, FORM_CONTENT_TYPE),
        body=query.encode("utf-8"),
    )
