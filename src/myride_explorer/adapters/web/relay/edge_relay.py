"""Edge relay: forwards requests under the proxy prefix to the ticketing host.

The relay is stateless. It rewrites the target URL, filters request headers,
streams the request body upstream and the response body back, and moves
``Set-Cookie`` paths from the upstream's ``/broker`` to the relay mount so
the browser sends the session cookie back through the relay.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING, Any

from starlette.requests import Request
from starlette.responses import Response, StreamingResponse
from yarl import URL

from myride_explorer.adapters.web.relay.headers import (
    build_upstream_headers,
    has_set_cookie,
    rewrite_response_headers,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping

    from aiohttp import ClientResponse, ClientSession

logger = logging.getLogger(__name__)

BODYLESS_METHODS = frozenset({"GET", "HEAD"})


async def _stream_body(upstream: ClientResponse) -> AsyncIterator[bytes]:
    """Yield the upstream body as it arrives, releasing the connection afterwards."""
    try:
        async for chunk in upstream.content.iter_any():
            yield chunk
    finally:
        upstream.release()


def _raw_path(request: Request) -> str:
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.decode("latin-1")
    return request.url.path


def _raw_query(request: Request) -> str:
    return request.scope.get("query_string", b"").decode("latin-1")


def _has_body(request: Request) -> bool:
    """True when the request announces a body by length or chunked framing."""
    if request.method in BODYLESS_METHODS:
        return False
    if "chunked" in request.headers.get("transfer-encoding", "").lower():
        return True
    try:
        return int(request.headers.get("content-length", "0")) > 0
    except ValueError:
        return False


class EdgeRelay:
    """ASGI app relaying ``<mount_path>/*`` to a fixed upstream origin."""

    def __init__(
        self,
        session: ClientSession,
        upstream_origin: str,
        mount_path: str = "/api/justride",
    ) -> None:
        """Initialize the relay.

        Args:
            session: aiohttp session used for upstream calls. It should not
                keep cookies or decompress bodies, see ``main``.
            upstream_origin: Origin requests are forwarded to.
            mount_path: Path prefix the relay answers under.
        """
        self._session = session
        self._upstream_origin = upstream_origin.rstrip("/")
        self._mount_path = mount_path

    @property
    def mount_path(self) -> str:
        return self._mount_path

    def matches(self, path: str) -> bool:
        """True when ``path`` is served by the relay."""
        return path.startswith(self._mount_path)

    def build_target_url(self, path: str, query: str = "") -> URL:
        """Map a relay path and raw query string to the upstream URL.

        The query string is forwarded byte for byte.
        """
        upstream_path = path[len(self._mount_path) :]
        if not upstream_path.startswith("/"):
            upstream_path = f"/{upstream_path}"
        target = f"{self._upstream_origin}{upstream_path}"
        if query:
            target = f"{target}?{query}"
        return URL(target, encoded=True)

    async def handle(self, request: Request) -> Response:
        """Forward one request, or answer 404 outside the mount path.

        Transport errors from the upstream call are not caught.
        """
        path = _raw_path(request)
        if not self.matches(path):
            logger.debug(f"No relay route for {request.method} {path}")
            return Response(status_code=404)

        target = self.build_target_url(path, _raw_query(request))
        headers = build_upstream_headers(request.headers.items())
        body = request.stream() if _has_body(request) else None
        logger.debug(f"Forwarding headers: {', '.join(sorted(set(headers.keys())))}")

        upstream = await self._session.request(
            request.method,
            target,
            headers=headers,
            data=body,
            allow_redirects=False,
        )
        logger.info(f"{request.method} {path} -> {target.host}{target.raw_path} {upstream.status}")
        return self._relay_response(upstream)

    def _relay_response(self, upstream: ClientResponse) -> StreamingResponse:
        """Build the downstream response; only ``Set-Cookie`` values may change."""
        raw_headers = [(name.lower(), value) for name, value in upstream.raw_headers]
        if has_set_cookie(raw_headers):
            raw_headers = rewrite_response_headers(raw_headers, self._mount_path)
            logger.info(f"Rewrote Set-Cookie paths to {self._mount_path}/broker")

        response = StreamingResponse(_stream_body(upstream), status_code=upstream.status)
        response.raw_headers = raw_headers
        return response

    async def __call__(
        self,
        scope: MutableMapping[str, Any],
        receive: Callable[[], Awaitable[MutableMapping[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        """ASGI entry point."""
        request = Request(scope, receive)
        response = await self.handle(request)
        await response(scope, receive, send)
