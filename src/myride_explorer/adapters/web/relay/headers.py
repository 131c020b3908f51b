"""Header rewriting for the edge relay."""

import re
from collections.abc import Iterable

from multidict import CIMultiDict

# Headers the browser (or the dev server in front of it) injects that the
# ticketing service must not see.
STRIPPED_REQUEST_HEADERS = (
    "Accept-Encoding",
    "Connection",
    "Host",
    "Origin",
    "Referer",
    "Sec-Fetch-Dest",
    "Sec-Fetch-Mode",
    "Sec-Fetch-Site",
    "X-Forwarded-Host",
    "X-Mf-Sec-Fetch-Mode",
    # Per-hop framing; aiohttp re-frames the streamed body itself
    "Transfer-Encoding",
)

# Upstream tells API calls from page navigations apart by this header
REQUESTED_WITH = ("X-Requested-With", "XMLHttpRequest")

UPSTREAM_COOKIE_PATH = "/broker"

_SET_COOKIE = b"set-cookie"


def build_upstream_headers(headers: Iterable[tuple[str, str]]) -> CIMultiDict[str]:
    """Copy inbound headers for the upstream request.

    Repeated headers are kept, the browser-injected headers are dropped and
    ``X-Requested-With`` is always set.
    """
    upstream: CIMultiDict[str] = CIMultiDict(headers)
    for name in STRIPPED_REQUEST_HEADERS:
        upstream.popall(name, None)
    upstream[REQUESTED_WITH[0]] = REQUESTED_WITH[1]
    return upstream


def _cookie_path_pattern(path: str) -> re.Pattern[str]:
    # Attribute names are case-insensitive, the path value is not
    return re.compile(rf"(;\s*(?i:path)\s*=\s*){re.escape(path)}(?=\s*(?:;|$))")


_UPSTREAM_PATH_ATTRIBUTE = _cookie_path_pattern(UPSTREAM_COOKIE_PATH)


def rewrite_cookie_path(cookie: str, mount_path: str) -> str:
    """Move a cookie scoped to ``/broker`` under the relay mount.

    Only a ``Path`` attribute that is exactly ``/broker`` is rewritten; every
    other attribute, and cookies with any other path, are returned unchanged.
    """
    return _UPSTREAM_PATH_ATTRIBUTE.sub(
        lambda match: f"{match.group(1)}{mount_path}{UPSTREAM_COOKIE_PATH}", cookie
    )


def _rewrite_raw_cookie(value: bytes, mount_path: str) -> bytes:
    # latin-1 maps every byte to one code point, so untouched bytes survive as-is
    return rewrite_cookie_path(value.decode("latin-1"), mount_path).encode("latin-1")


def rewrite_response_headers(
    raw_headers: Iterable[tuple[bytes, bytes]], mount_path: str
) -> list[tuple[bytes, bytes]]:
    """Return raw response headers with ``Set-Cookie`` paths moved under the relay mount.

    Header order and the bytes of every other header are preserved.
    """
    return [
        (name, _rewrite_raw_cookie(value, mount_path) if name.lower() == _SET_COOKIE else value)
        for name, value in raw_headers
    ]


def has_set_cookie(raw_headers: Iterable[tuple[bytes, bytes]]) -> bool:
    return any(name.lower() == _SET_COOKIE for name, _ in raw_headers)
