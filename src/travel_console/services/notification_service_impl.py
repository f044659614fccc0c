"""
REST-backed implementation of NotificationService.

Endpoints (relative to TRAVEL_CONSOLE_API_URL):

    GET    /notifications/fetch            -> notifications.{unread,read}
    PUT    /notifications/mark-read/{id}
    PUT    /notifications/mark-unread/{id}
    PUT    /notifications/mark-all-read
    DELETE /notifications/delete/{id}

Both response envelopes are accepted (see services.api).
"""

from typing import Any

import httpx

from travel_console.lib import clients, logs
from travel_console.services import api
from travel_console.services.notification_service import NotificationService

LOG = logs.logger(__file__)

FETCH_PATH = "/notifications/fetch"
MARK_READ_PATH = "/notifications/mark-read/{id}"
MARK_UNREAD_PATH = "/notifications/mark-unread/{id}"
MARK_ALL_READ_PATH = "/notifications/mark-all-read"
DELETE_PATH = "/notifications/delete/{id}"


class NotificationServiceImpl(NotificationService):
    """
    Notification service talking to the remote API over httpx.

    Attributes:
        client: httpx.Client with base URL and auth already configured.
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        """
        Args:
            client: Preconfigured client, or None to build one from the
                environment via lib.clients.api_client().
        """
        self.client = client or clients.api_client()

    def fetch_feed(self) -> dict[str, Any]:
        response = api.request(
            self.client,
            "GET",
            FETCH_PATH,
            "Network error while fetching notifications",
        )
        notifications = response.get("notifications", {}) or {}
        LOG.info(
            "Fetched notifications - unread:%s read:%s",
            (notifications.get("unread") or {}).get("total"),
            (notifications.get("read") or {}).get("total"),
        )
        return {
            "unread": notifications.get("unread") or {"total": 0, "items": []},
            "read": notifications.get("read") or {"total": 0, "items": []},
        }

    def mark_read(self, notification_id: str) -> None:
        api.request(
            self.client,
            "PUT",
            MARK_READ_PATH.format(id=notification_id),
            "Failed to mark notification as read",
        )

    def mark_unread(self, notification_id: str) -> None:
        api.request(
            self.client,
            "PUT",
            MARK_UNREAD_PATH.format(id=notification_id),
            "Failed to mark notification as unread",
        )

    def mark_all_read(self) -> None:
        api.request(
            self.client,
            "PUT",
            MARK_ALL_READ_PATH,
            "Failed to mark all notifications as read",
        )

    def delete(self, notification_id: str) -> None:
        api.request(
            self.client,
            "DELETE",
            DELETE_PATH.format(id=notification_id),
            "Failed to delete notification",
        )
