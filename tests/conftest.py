import json
from typing import Any, Callable

import httpx
import pytest

from travel_console.lib import caches, clients
from travel_console.models.notification import NotificationFeed
from travel_console.services.api import ApiError
from travel_console.services.notification_service import NotificationService

API_URL = "https://api.test/v1"


class RecordingNotificationService(NotificationService):
    """Notification service that records calls and optionally fails them."""

    def __init__(self, payload: dict | None = None, fail: bool = False) -> None:
        self.payload = payload or {}
        self.fail = fail
        self.calls: list[tuple[str, Any]] = []

    def _call(self, name: str, arg: Any = None) -> None:
        self.calls.append((name, arg))
        if self.fail:
            raise ApiError(f"{name} failed", status_code=500)

    def fetch_feed(self) -> dict[str, Any]:
        self._call("fetch_feed")
        return self.payload

    def mark_read(self, notification_id: str) -> None:
        self._call("mark_read", notification_id)

    def mark_unread(self, notification_id: str) -> None:
        self._call("mark_unread", notification_id)

    def mark_all_read(self) -> None:
        self._call("mark_all_read")

    def delete(self, notification_id: str) -> None:
        self._call("delete", notification_id)


def make_item(notification_id: str, is_read: bool, **extra: Any) -> dict:
    item = {
        "id": notification_id,
        "title": f"Notification {notification_id}",
        "message": "Something happened",
        "notification_type": "info",
        "is_read": 1 if is_read else 0,
        "created_at": "2026-10-18T08:00:00Z",
    }
    item.update(extra)
    return item


@pytest.fixture
def buckets() -> dict:
    """Two unread and three read notifications, totals matching the items."""
    unread = [make_item("u1", False), make_item("u2", False)]
    read = [make_item("r1", True), make_item("r2", True), make_item("r3", True)]
    return {
        "unread": {"total": len(unread), "items": unread},
        "read": {"total": len(read), "items": read},
    }


@pytest.fixture
def feed(buckets) -> NotificationFeed:
    return NotificationFeed.from_buckets(buckets)


@pytest.fixture
def disk_cache(tmp_path):
    cache = caches.DiskCache(tmp_path / "cache")
    yield cache
    cache.close()


@pytest.fixture
def mock_api() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]:
    """Return a factory building an API client around a request handler."""
    created: list[httpx.Client] = []

    def _factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = clients.build_api_client(
            API_URL, token="secret", transport=httpx.MockTransport(handler)
        )
        created.append(client)
        return client

    yield _factory
    for client in created:
        client.close()


def envelope(data: Any = None, success: bool = True, message: str = "OK") -> dict:
    return {"success": success, "message": message, "data": data, "errors": []}


def json_body(request: httpx.Request) -> Any:
    return json.loads(request.content) if request.content else None
