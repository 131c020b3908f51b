"""Utility for logging API requests when MYRIDE_LOG_REQUESTS is enabled."""

import json
import logging
import os
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "set-cookie"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via MYRIDE_LOG_REQUESTS environment variable."""
    return os.getenv("MYRIDE_LOG_REQUESTS", "").lower() == "true"


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Return a copy of ``headers`` with credentials masked."""
    return {k: "***REDACTED***" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def log_api_request(
    method: str,
    url: str,
    headers: Mapping[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log API request details if MYRIDE_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL including the query string.
        headers: Request headers (credentials are redacted).
        payload: JSON request body (optional).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {url}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(redact_headers(headers), indent=2)}")
    if payload is not None:
        log_parts.append(f"Payload: {json.dumps(payload)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
