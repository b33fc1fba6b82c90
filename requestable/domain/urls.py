"""URL parsing for request targets."""
from __future__ import annotations

import re

import httpx

from requestable.domain.errors import InvalidURLError

ALLOWED_SCHEMES = frozenset({"http", "https"})

# Characters that may never appear unescaped in a URL string.
_ILLEGAL_CHARS = re.compile(r'[\s\x00-\x1f\x7f<>"{}|\\^`]')
_BAD_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def parse_url(raw: object) -> httpx.URL:
    """Parse an absolute http(s) URL or raise InvalidURLError."""
    if not isinstance(raw, str) or not raw.strip():
        raise InvalidURLError("url must be a non-empty string")
    if _ILLEGAL_CHARS.search(raw):
        raise InvalidURLError(f"url contains illegal characters: {raw!r}")
    if _BAD_PERCENT_ESCAPE.search(raw):
        raise InvalidURLError(f"url contains a malformed percent escape: {raw!r}")

    try:
        url = httpx.URL(raw)
    except (httpx.InvalidURL, ValueError) as exc:
        raise InvalidURLError(f"url could not be parsed: {raw!r}") from exc

    if url.scheme not in ALLOWED_SCHEMES:
        raise InvalidURLError(f"unsupported url scheme: {url.scheme or '<none>'}")
    if not url.host:
        raise InvalidURLError(f"url has no host: {raw!r}")
    if url.port is not None and not 0 < url.port <= 65535:
        raise InvalidURLError(f"url port out of range: {url.port}")
    return url
