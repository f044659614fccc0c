"""
Notification models and the read/unread working set.

The hierarchy is:

    NotificationFeed
    ├── Notification[] (the working set, unread and read mixed)
    ├── NotificationCounts (badge counters)
    └── NotificationTab (current projection: all / unread / read)

Every transition on NotificationFeed adjusts the items and the counters in
the same call, so ``counts.read + counts.unread`` tracks the size of the
working set. The feed only changes local state; remote calls belong to
``travel_console.state.NotificationState``.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Mapping

DEFAULT_TITLE = "Notification"
DEFAULT_BADGE_CAP = 99


class NotificationTab(str, Enum):
    """Projection applied to the working set by the tab strip."""

    ALL = "all"
    UNREAD = "unread"
    READ = "read"


@dataclass(slots=True)
class Notification:
    """A single notification as shown in the bell menu and list page."""

    id: str
    title: str
    message: str
    notification_type: str = "info"
    is_read: bool = False
    created_at: str = ""

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "Notification":
        """
        Normalize a raw API item.

        The backend spells the title key ``titel`` on some endpoints and
        sends ``is_read`` as 0/1.
        """
        return cls(
            id=str(payload.get("id", "")),
            title=payload.get("title") or payload.get("titel") or DEFAULT_TITLE,
            message=payload.get("message") or "",
            notification_type=payload.get("notification_type") or "info",
            is_read=bool(payload.get("is_read")),
            created_at=payload.get("created_at") or "",
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "message": self.message,
            "notification_type": self.notification_type,
            "is_read": self.is_read,
            "created_at": self.created_at,
        }


@dataclass(slots=True)
class NotificationCounts:
    """Badge counters. Both values are kept non-negative."""

    read: int = 0
    unread: int = 0

    @property
    def total(self) -> int:
        return self.read + self.unread

    def to_dict(self) -> dict:
        return {"read": self.read, "unread": self.unread}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "NotificationCounts":
        if not data:
            return cls()
        return cls(read=int(data.get("read") or 0), unread=int(data.get("unread") or 0))


@dataclass
class NotificationFeed:
    """
    The client-side working set of notifications.

    Attributes:
        items: Notifications currently held, unread first as fetched.
        counts: Read/unread counters shown on the badge and tabs.
        tab: Active tab projection.
        loading: True while the initial fetch is in flight.
    """

    items: list[Notification] = field(default_factory=list)
    counts: NotificationCounts = field(default_factory=NotificationCounts)
    tab: NotificationTab = NotificationTab.ALL
    loading: bool = False

    @classmethod
    def from_buckets(
        cls, payload: Mapping[str, Any] | None, tab: NotificationTab = NotificationTab.ALL
    ) -> "NotificationFeed":
        """
        Build a feed from the ``{unread: {total, items}, read: {total, items}}``
        fetch contract.

        The source totals may exceed the items returned (paginated at the
        source); they win when present, otherwise the item counts are used.
        """
        payload = payload or {}
        unread_node = payload.get("unread") or {}
        read_node = payload.get("read") or {}
        unread_items = _bucket_items(unread_node)
        read_items = _bucket_items(read_node)

        items = [Notification.from_api(item) for item in unread_items + read_items]
        counts = NotificationCounts(
            unread=_bucket_total(unread_node) or len(unread_items),
            read=_bucket_total(read_node) or len(read_items),
        )
        return cls(items=items, counts=counts, tab=tab)

    def get(self, notification_id: str) -> Notification | None:
        for item in self.items:
            if item.id == str(notification_id):
                return item
        return None

    def filtered(self, tab: NotificationTab | str | None = None) -> list[Notification]:
        """
        Return the items visible under a tab without changing any state.

        Nothing is shown while the feed is loading.
        """
        tab = NotificationTab(tab) if tab else self.tab
        if self.loading:
            return []
        if tab == NotificationTab.UNREAD:
            return [item for item in self.items if not item.is_read]
        if tab == NotificationTab.READ:
            return [item for item in self.items if item.is_read]
        return list(self.items)

    def select_tab(self, tab: NotificationTab | str) -> None:
        self.tab = NotificationTab(tab)

    def badge_label(self, cap: int = DEFAULT_BADGE_CAP) -> str:
        """Return the unread badge text, or an empty string to hide it."""
        unread = self.counts.unread
        if unread <= 0:
            return ""
        return f"{cap}+" if unread > cap else str(unread)

    def mark_read(self, notification_id: str) -> bool:
        """Unread -> Read. Returns False when nothing changed."""
        return self._set_read(notification_id, True)

    def mark_unread(self, notification_id: str) -> bool:
        """Read -> Unread. Returns False when nothing changed."""
        return self._set_read(notification_id, False)

    def delete(self, notification_id: str) -> Notification | None:
        """
        Remove a notification from the working set.

        The counter decremented is picked from the item's read state at
        removal time.

        Returns:
            The removed notification, or None if it was not held.
        """
        target = self.get(notification_id)
        if target is None:
            return None
        was_read = target.is_read
        self.items = [item for item in self.items if item.id != target.id]
        if was_read:
            self.counts.read = max(0, self.counts.read - 1)
        else:
            self.counts.unread = max(0, self.counts.unread - 1)
        return target

    def mark_all_read(self) -> int:
        """
        Mark every held notification read in one batch.

        Returns:
            Number of items that changed state.
        """
        changed = sum(1 for item in self.items if not item.is_read)
        self.items = [replace(item, is_read=True) for item in self.items]
        self.counts = NotificationCounts(read=self.counts.total, unread=0)
        return changed

    def snapshot(self) -> "NotificationFeed":
        """Return an independent copy, used to roll back failed mutations."""
        return NotificationFeed.from_dict(self.to_dict())

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dictionary for dcc.Store."""
        return {
            "items": [item.to_dict() for item in self.items],
            "counts": self.counts.to_dict(),
            "tab": self.tab.value,
            "loading": self.loading,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "NotificationFeed":
        """Deserialize a dcc.Store payload back into a feed."""
        if not data:
            return cls()
        return cls(
            items=[Notification.from_api(item) for item in data.get("items") or []],
            counts=NotificationCounts.from_dict(data.get("counts")),
            tab=NotificationTab(data.get("tab") or NotificationTab.ALL.value),
            loading=bool(data.get("loading", False)),
        )

    def _set_read(self, notification_id: str, is_read: bool) -> bool:
        target = self.get(notification_id)
        if target is None or target.is_read == is_read:
            return False
        self.items = [
            replace(item, is_read=is_read) if item.id == target.id else item
            for item in self.items
        ]
        if is_read:
            self.counts.unread = max(0, self.counts.unread - 1)
            self.counts.read += 1
        else:
            self.counts.read = max(0, self.counts.read - 1)
            self.counts.unread += 1
        return True


def _bucket_items(node: Mapping[str, Any]) -> list[Mapping[str, Any]]:
    items = node.get("items") if isinstance(node, Mapping) else None
    return list(items) if isinstance(items, list) else []


def _bucket_total(node: Mapping[str, Any]) -> int:
    try:
        return int(node.get("total") or 0)
    except (TypeError, ValueError):
        return 0
