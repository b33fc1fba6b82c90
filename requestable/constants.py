"""Package-level constants shared across modules."""
from __future__ import annotations

from enum import Enum


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    CONNECT = "CONNECT"


class ParameterEncoding(str, Enum):
    """Where request parameters are placed.

    METHOD_DEPENDENT puts them in the query string for GET, HEAD and DELETE
    and in a form-encoded body for every other verb.
    """

    METHOD_DEPENDENT = "method_dependent"
    QUERY_STRING = "query_string"
    HTTP_BODY = "http_body"
    JSON = "json"


QUERY_STRING_METHODS = frozenset({HTTPMethod.GET, HTTPMethod.HEAD, HTTPMethod.DELETE})

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=utf-8"
JSON_CONTENT_TYPE = "application/json"
