"""Edge relay forwarding browser requests to the ticketing service."""

from myride_explorer.adapters.web.relay.edge_relay import EdgeRelay
from myride_explorer.adapters.web.relay.headers import (
    build_upstream_headers,
    rewrite_cookie_path,
    rewrite_response_headers,
)

__all__ = [
    "EdgeRelay",
    "build_upstream_headers",
    "rewrite_cookie_path",
    "rewrite_response_headers",
]
