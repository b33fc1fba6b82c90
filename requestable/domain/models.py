"""Domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, TypeVar

from requestable.constants import HTTPMethod, ParameterEncoding

T = TypeVar("T")

JSONObject = dict[str, Any]
JSONArray = list[Any]


@dataclass(frozen=True)
class RequestDescriptor:
    """One request as described by the caller (value object, built per call)."""

    url: str
    verb: HTTPMethod = HTTPMethod.GET
    parameters: Mapping[str, Any] | None = None
    headers: Mapping[str, str] | None = None
    encoding: ParameterEncoding = ParameterEncoding.METHOD_DEPENDENT


@dataclass(frozen=True)
class EncodedRequest:
    """Request ready for the wire: parameters already placed in url or body."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a single call: exactly one of `value` or `error`."""

    value: T | None = None
    error: BaseException | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.value is not None:
            raise ValueError("result cannot carry both a value and an error")

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: BaseException) -> "Result[T]":
        if error is None:
            raise ValueError("failure result requires an error")
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """Return the value, or raise the stored error as-is."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
