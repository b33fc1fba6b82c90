"""Errors produced by the request facade itself.

Transport failures are not represented here: whatever the HTTP client port
raises is delivered to the caller unchanged.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_URL = "invalidURL"
    INVALID_JSON_OBJECT = "invalidJSONObject"
    INVALID_JSON_ARRAY = "invalidJSONArray"


class RequestableError(Exception):
    """Base for facade failures. `kind` is the only state carried."""

    kind: ErrorKind

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.kind.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequestableError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


class InvalidURLError(RequestableError):
    """The url string could not be parsed; no request was sent."""

    kind = ErrorKind.INVALID_URL


class InvalidJSONObjectError(RequestableError):
    """Response body is not JSON, or its top-level value is not an object."""

    kind = ErrorKind.INVALID_JSON_OBJECT


class InvalidJSONArrayError(RequestableError):
    """Response body is not JSON, or its top-level value is not an array."""

    kind = ErrorKind.INVALID_JSON_ARRAY
