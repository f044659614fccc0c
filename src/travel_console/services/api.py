"""
Response envelope handling for the remote REST API.

The backend answers in two shapes:

    new:    {"success": bool, "message": str, "data": {...}, "errors": [...]}
    legacy: {"header": {"success": bool, "message": str, "messages": [...]},
             "body": {...}}

normalize_response() folds both into an ApiResponse. Lookups go through
benedict keylists with the keypath separator disabled, so record keys that
contain dots (e.g. "file.name") are left alone.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx
from benedict import benedict

from travel_console.lib import logs

LOG = logs.logger(__file__)

UNKNOWN_FORMAT_MESSAGE = "Unknown response format"


def lookup(payload: Mapping[str, Any], keypath: str, default: Any = None) -> Any:
    """Read a dotted keypath such as ``header.messages[0].message``."""
    try:
        value = benedict(dict(payload), keypath_separator=None).get(keypath.split("."))
    except (IndexError, KeyError, TypeError):
        return default
    return default if value is None else value


class ApiError(Exception):
    """
    Raised when a request fails or the API reports an unsuccessful envelope.

    Attributes:
        message: Human readable message suitable for a toast.
        status_code: HTTP status when one was received.
        errors: Structured errors reported by the API.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: list[dict] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []


@dataclass
class ApiResponse:
    """Envelope normalized from either response format."""

    success: bool
    data: Any = None
    message: str | None = None
    errors: list[dict] = field(default_factory=list)

    def get(self, keypath: str, default: Any = None) -> Any:
        """Look up a dotted keypath inside ``data``."""
        if not isinstance(self.data, Mapping):
            return default
        return lookup(self.data, keypath, default)


def normalize_response(payload: Any) -> ApiResponse:
    """
    Normalize a decoded JSON payload from either envelope format.

    Unknown shapes are reported as unsuccessful rather than raising.
    """
    if not isinstance(payload, Mapping):
        return ApiResponse(success=False, message=UNKNOWN_FORMAT_MESSAGE)

    if isinstance(payload.get("success"), bool):
        return ApiResponse(
            success=payload["success"],
            data=payload.get("data"),
            message=payload.get("message"),
            errors=[
                {"code": e.get("code"), "type": e.get("type"), "message": e.get("message")}
                for e in payload.get("errors") or []
            ],
        )

    if isinstance(payload.get("header"), Mapping):
        return ApiResponse(
            success=bool(lookup(payload, "header.success", False)),
            data=payload.get("body"),
            message=lookup(payload, "header.message"),
            errors=[
                {"code": m.get("code"), "type": m.get("type"), "message": m.get("message")}
                for m in lookup(payload, "header.messages", [])
            ],
        )

    return ApiResponse(success=False, message=UNKNOWN_FORMAT_MESSAGE)


def extract_error_message(payload: Any, default: str = "An error occurred") -> str:
    """
    Pull the most specific error message out of a payload or envelope.

    Checks structured errors first, then the top-level message, for both
    envelope formats.
    """
    if not isinstance(payload, Mapping):
        return default
    for keypath in (
        "errors[0].message",
        "message",
        "header.messages[0].message",
        "header.message",
    ):
        value = lookup(payload, keypath)
        if value:
            return str(value)
    return default


def unwrap(response: httpx.Response, default_error: str) -> ApiResponse:
    """
    Decode an httpx response and raise ApiError unless it reports success.

    Args:
        response: Completed httpx response.
        default_error: Message used when the payload carries none.
    """
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if response.is_error:
        message = extract_error_message(payload, default_error)
        LOG.warning(
            "API %s %s -> %s: %s",
            response.request.method,
            response.request.url,
            response.status_code,
            message,
        )
        raise ApiError(message, status_code=response.status_code)

    normalized = normalize_response(payload)
    if not normalized.success:
        message = extract_error_message(payload, normalized.message or default_error)
        raise ApiError(message, status_code=response.status_code, errors=normalized.errors)
    return normalized


def request(
    client: httpx.Client, method: str, path: str, default_error: str, **kwargs: Any
) -> ApiResponse:
    """
    Send a request and return the normalized envelope.

    Transport failures are wrapped in ApiError so callers handle one type.
    """
    try:
        response = client.request(method, path, **kwargs)
    except httpx.HTTPError as exc:
        raise ApiError(f"{default_error}: {exc}") from exc
    return unwrap(response, default_error)
