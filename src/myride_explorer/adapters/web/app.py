"""Starlette application hosting the edge relay."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.applications import Starlette
from starlette.routing import Route

from myride_explorer.adapters.config import AppConfig
from myride_explorer.adapters.web.relay import EdgeRelay

if TYPE_CHECKING:
    from aiohttp import ClientSession

logger = logging.getLogger(__name__)


def create_app(config: AppConfig, session: ClientSession) -> Starlette:
    """Create the ASGI app.

    Every path and method is routed to the relay, which answers 404 itself
    for paths outside the proxy prefix.
    """
    relay = EdgeRelay(
        session,
        upstream_origin=config.upstream_origin,
        mount_path=config.proxy_prefix,
    )
    logger.info(f"Relaying {config.proxy_prefix}/* to {config.upstream_origin}")
    # An ASGI endpoint (not a function) makes the route accept every method
    return Starlette(routes=[Route("/{path:path}", relay)])
