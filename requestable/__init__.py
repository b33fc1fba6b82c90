"""JSON-aware request facade over httpx.

Logging is disabled by default; call ``logger.enable("requestable")`` to see
the package's loguru events.
"""
from loguru import logger

from requestable.composition import RequesterDependencies, create_requester_dependencies
from requestable.constants import HTTPMethod, ParameterEncoding
from requestable.domain.errors import (
    ErrorKind,
    InvalidJSONArrayError,
    InvalidJSONObjectError,
    InvalidURLError,
    RequestableError,
)
from requestable.domain.models import JSONArray, JSONObject, Result
from requestable.domain.requester import Requester
from requestable.ports.http_client import (
    HttpClientError,
    HttpClientStatusError,
    HttpClientTimeoutError,
    RequestTimeout,
)
from requestable.ports.requestable import Requestable

logger.disable("requestable")

__all__ = [
    "ErrorKind",
    "HTTPMethod",
    "HttpClientError",
    "HttpClientStatusError",
    "HttpClientTimeoutError",
    "InvalidJSONArrayError",
    "InvalidJSONObjectError",
    "InvalidURLError",
    "JSONArray",
    "JSONObject",
    "ParameterEncoding",
    "RequestTimeout",
    "Requestable",
    "Requester",
    "RequesterDependencies",
    "Result",
    "create_requester_dependencies",
]
