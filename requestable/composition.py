"""Composition root: build and lifecycle-manage concrete dependencies.

Composition may: import concrete classes, call factories, store interface types,
manage high-level lifecycle.
"""
from __future__ import annotations

from typing import Any

from loguru import logger

from requestable.config.settings import Settings
from requestable.core import SERVICE_NAME
from requestable.domain.requester import Requester
from requestable.infrastructure.http.factory import create_http_client
from requestable.ports.http_client import AbstractHttpClient, RequestTimeout
from requestable.ports.requestable import Requestable


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


class RequesterDependencies:
    """Holds the wired HTTP client and Requester and their lifecycle."""

    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings
        self._http_client: AbstractHttpClient | None = None
        self._requester: Requester | None = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def connected(self) -> bool:
        return self._requester is not None

    @property
    def requester(self) -> Requestable:
        if self._requester is None:
            raise RuntimeError("requester is not initialized")
        return self._requester

    async def connect(self) -> None:
        if self._requester is not None:
            return
        self._http_client = create_http_client(self._settings)
        self._requester = Requester(
            self._http_client,
            default_timeout=RequestTimeout(
                connect_seconds=self._settings.connect_timeout_seconds,
                read_seconds=self._settings.read_timeout_seconds,
            ),
        )
        _log("requester_connected")

    async def close(self) -> None:
        if self._http_client is not None:
            try:
                await self._http_client.close()
            except Exception as exc:
                logger.warning("http client close failed: {}", exc)
            self._http_client = None

        self._requester = None
        _log("requester_closed")

    async def __aenter__(self) -> "RequesterDependencies":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


def create_requester_dependencies(settings: Settings | None = None) -> RequesterDependencies:
    return RequesterDependencies(settings=settings or Settings())
