"""
Demo implementation of NotificationService using in-memory data.

This service is useful for:
- Local development without backend access
- Testing the bell menu and notifications page with realistic data

State lives on the instance, so mutations persist for the lifetime of
the process (the factory caches one instance).
"""

import copy
from threading import Lock
from typing import Any, Sequence

from travel_console.data.demo_notifications import DEMO_NOTIFICATIONS
from travel_console.lib import logs
from travel_console.services.api import ApiError
from travel_console.services.notification_service import NotificationService

LOG = logs.logger(__file__)


class DemoNotificationService(NotificationService):
    """In-memory notification store seeded from DEMO_NOTIFICATIONS."""

    def __init__(self, notifications: Sequence[dict] | None = None) -> None:
        """
        Initialize with notification payloads.

        Args:
            notifications: Raw API-shaped items, or None for the demo seed.
        """
        seed = DEMO_NOTIFICATIONS if notifications is None else notifications
        self._items: list[dict] = copy.deepcopy(list(seed))
        self._lock = Lock()

    def fetch_feed(self) -> dict[str, Any]:
        with self._lock:
            unread = [copy.deepcopy(n) for n in self._items if not n.get("is_read")]
            read = [copy.deepcopy(n) for n in self._items if n.get("is_read")]
        return {
            "unread": {"total": len(unread), "items": unread},
            "read": {"total": len(read), "items": read},
        }

    def mark_read(self, notification_id: str) -> None:
        self._find(notification_id)["is_read"] = 1

    def mark_unread(self, notification_id: str) -> None:
        self._find(notification_id)["is_read"] = 0

    def mark_all_read(self) -> None:
        with self._lock:
            for item in self._items:
                item["is_read"] = 1

    def delete(self, notification_id: str) -> None:
        target = self._find(notification_id)
        with self._lock:
            self._items = [n for n in self._items if n is not target]
        LOG.info("Deleted demo notification %s", notification_id)

    def _find(self, notification_id: str) -> dict:
        with self._lock:
            for item in self._items:
                if str(item.get("id")) == str(notification_id):
                    return item
        raise ApiError(f"Notification not found: {notification_id}", status_code=404)
