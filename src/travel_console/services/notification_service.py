"""
Abstract base class defining the notification data access contract.

Implementations:
- DemoNotificationService: in-memory notifications for development/testing
- NotificationServiceImpl: REST API backed service (httpx)

Mutations return nothing on success and raise
``travel_console.services.api.ApiError`` on failure; whether the local
working set is kept or rolled back is decided by NotificationState.
"""

from abc import ABC, abstractmethod
from typing import Any


class NotificationService(ABC):
    """Contract for fetching and mutating the current user's notifications."""

    @abstractmethod
    def fetch_feed(self) -> dict[str, Any]:
        """
        Return notifications partitioned by read state.

        Shape: ``{"unread": {"total": int, "items": [...]},
        "read": {"total": int, "items": [...]}}``.
        """

    @abstractmethod
    def mark_read(self, notification_id: str) -> None:
        """Mark a single notification read."""

    @abstractmethod
    def mark_unread(self, notification_id: str) -> None:
        """Mark a single notification unread."""

    @abstractmethod
    def mark_all_read(self) -> None:
        """Mark every notification of the user read."""

    @abstractmethod
    def delete(self, notification_id: str) -> None:
        """Delete a single notification."""
