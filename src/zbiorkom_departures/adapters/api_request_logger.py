"""Utility for logging API requests when ZBIORKOM_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any
from urllib.parse import parse_qsl, urlsplit

logger = logging.getLogger(__name__)

LOG_REQUESTS_ENV = "ZBIORKOM_LOG_REQUESTS"


def should_log_requests() -> bool:
    """Check if request logging is enabled via the ZBIORKOM_LOG_REQUESTS environment variable."""
    return os.getenv(LOG_REQUESTS_ENV, "").lower() == "true"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    sensitive_keys = {"authorization", "cookie", "x-api-key"}
    return {k: "***REDACTED***" if k.lower() in sensitive_keys else v for k, v in headers.items()}


def _query_params(url: str) -> dict[str, str]:
    """Extract query parameters from a URL for display."""
    return dict(parse_qsl(urlsplit(url).query))


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
) -> None:
    """Log API request details if ZBIORKOM_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Full request URL including query string.
        headers: Request headers (optional, sensitive headers are redacted).
    """
    if not should_log_requests():
        return

    log_parts = [f"{method} {url}"]

    params = _query_params(url)
    if params:
        log_parts.append(f"Params: {json.dumps(params, indent=2, ensure_ascii=False)}")

    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
