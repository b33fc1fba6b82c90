"""Unit tests for settings, the HTTP client factory and the composition root."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from requestable.composition import RequesterDependencies, create_requester_dependencies
from requestable.config.settings import Settings
from requestable.domain.requester import Requester
from requestable.infrastructure.http.factory import create_http_client
from requestable.infrastructure.http.httpx_client import HttpxHttpClient
from requestable.ports.requestable import Requestable


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("REQUESTABLE_READ_TIMEOUT_SECONDS", raising=False)
    settings = Settings(_env_file=None)

    assert settings.read_timeout_seconds == 15.0
    assert settings.follow_redirects is True
    assert settings.acceptable_status == range(200, 300)


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("REQUESTABLE_CONNECT_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("REQUESTABLE_MAX_ACCEPTABLE_STATUS", "399")
    monkeypatch.setenv("REQUESTABLE_USER_AGENT", "requestable-tests/1.0")

    settings = Settings(_env_file=None)

    assert settings.connect_timeout_seconds == 2.5
    assert 302 in settings.acceptable_status
    assert settings.user_agent == "requestable-tests/1.0"


def test_settings_reject_inverted_status_bounds(monkeypatch):
    monkeypatch.setenv("REQUESTABLE_MIN_ACCEPTABLE_STATUS", "300")
    monkeypatch.setenv("REQUESTABLE_MAX_ACCEPTABLE_STATUS", "299")

    with pytest.raises(ValidationError, match="must not exceed"):
        Settings(_env_file=None)


@pytest.mark.asyncio
async def test_factory_builds_httpx_client_with_user_agent():
    client = create_http_client(Settings(_env_file=None, REQUESTABLE_USER_AGENT="ua/1"))

    assert isinstance(client, HttpxHttpClient)
    assert client._client.headers["User-Agent"] == "ua/1"
    await client.close()


def test_requester_before_connect_raises():
    deps = RequesterDependencies(settings=Settings(_env_file=None))

    with pytest.raises(RuntimeError, match="requester is not initialized"):
        deps.requester


@pytest.mark.asyncio
async def test_connect_and_close_lifecycle():
    deps = create_requester_dependencies(Settings(_env_file=None))

    async with deps:
        assert deps.connected
        assert isinstance(deps.requester, Requester)
        assert isinstance(deps.requester, Requestable)

    assert not deps.connected


@pytest.mark.asyncio
async def test_close_failure_is_logged_not_raised(monkeypatch):
    deps = RequesterDependencies(settings=Settings(_env_file=None))
    await deps.connect()

    async def _boom() -> None:
        raise RuntimeError("close failed")

    monkeypatch.setattr(deps._http_client, "close", _boom)
    await deps.close()

    assert not deps.connected
