"""
HTTP client factory for the remote booking/admin REST API.

Environment variables used:
- TRAVEL_CONSOLE_API_URL: Base URL of the API (e.g. https://host/api/v1)
- TRAVEL_CONSOLE_API_TOKEN: Bearer token attached to every request
- TRAVEL_CONSOLE_API_TIMEOUT: Request timeout in seconds (default 30)
"""

import functools
import os

import httpx

_DEFAULT_TIMEOUT = 30.0


def api_base_url() -> str | None:
    """Return the configured API base URL without a trailing slash."""
    url = (os.getenv("TRAVEL_CONSOLE_API_URL") or "").strip()
    return url.rstrip("/") or None


def build_api_client(
    base_url: str,
    token: str | None = None,
    timeout: float = _DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """
    Build an httpx.Client preconfigured for the API.

    Args:
        base_url: API root; request paths are joined onto it.
        token: Optional bearer token.
        timeout: Request timeout in seconds.
        transport: Optional transport override (tests use httpx.MockTransport).
    """
    headers = {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return httpx.Client(
        base_url=base_url.rstrip("/"),
        headers=headers,
        timeout=timeout,
        transport=transport,
    )


@functools.cache
def api_client() -> httpx.Client:
    """
    Return the process-wide API client built from the environment.

    Raises:
        ValueError: If TRAVEL_CONSOLE_API_URL is not set.
    """
    base_url = api_base_url()
    if not base_url:
        raise ValueError("TRAVEL_CONSOLE_API_URL is not set")
    token = (os.getenv("TRAVEL_CONSOLE_API_TOKEN") or "").strip() or None
    timeout = float(os.getenv("TRAVEL_CONSOLE_API_TIMEOUT", _DEFAULT_TIMEOUT))
    return build_api_client(base_url, token=token, timeout=timeout)
