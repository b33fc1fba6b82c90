from __future__ import annotations

import pytest

from requestable.domain.errors import InvalidURLError
from requestable.domain.urls import parse_url


@pytest.mark.parametrize(
    "raw",
    [
        "https://example.com",
        "http://localhost:8080/api/v1/items?id=3",
        "https://example.com/search?q=caf%C3%A9#top",
    ],
)
def test_valid_urls_parse(raw):
    url = parse_url(raw)
    assert url.host


@pytest.mark.parametrize(
    "raw",
    [
        None,
        42,
        "",
        "\t",
        "https://example.com/a b",
        'https://example.com/"quoted"',
        "https://example.com/{id}",
        "https://example.com/100%",
        "mailto:someone@example.com",
        "/relative/path",
        "http://example.com:99999/",
        "http://example.com:0/",
    ],
)
def test_invalid_urls_raise(raw):
    with pytest.raises(InvalidURLError):
        parse_url(raw)
