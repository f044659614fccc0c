"""
Client-side state controllers for the Travel Console.

This module contains:

- TableQuery: the per-table request state kept in dcc.Store
- ReconcilePolicy: what happens to optimistic updates when the remote fails
- NotificationState: the notification working set plus its remote sync

NotificationState applies every mutation locally first so the bell badge
and the list update immediately, then calls the service. Remote failures
never propagate to callbacks; they are logged and exposed on
``last_error`` for the page toast.
"""

import os
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Mapping

from travel_console.components.data_table import ASC, PAGE_SIZE_OPTIONS, SortState
from travel_console.lib import logs
from travel_console.models.notification import (
    NotificationCounts,
    NotificationFeed,
    NotificationTab,
)
from travel_console.services.notification_service import NotificationService

LOG = logs.logger(__file__)

DEFAULT_PAGE_SIZE = PAGE_SIZE_OPTIONS[1]
ROLLBACK_ON_FAILURE = os.getenv("TRAVEL_CONSOLE_ROLLBACK", "false").lower() in {
    "1",
    "true",
    "yes",
}


@dataclass(frozen=True)
class TableQuery:
    """
    Request state of one list page.

    Each ``with_*`` method returns a new query. Changing the search term,
    the sort, the filters or the page size goes back to page 1.
    """

    query: str = ""
    sort_key: str | None = None
    sort_direction: str = ASC
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    filters: dict[str, Any] = field(default_factory=dict)

    @property
    def sort_state(self) -> SortState:
        return SortState(self.sort_key, self.sort_direction)

    def with_search(self, term: str | None) -> "TableQuery":
        return replace(self, query=(term or "").strip(), page=1)

    def with_page(self, page: int) -> "TableQuery":
        return replace(self, page=max(int(page), 1))

    def with_page_size(self, page_size: int) -> "TableQuery":
        return replace(self, page_size=int(page_size), page=1)

    def with_sort(self, key: str | None, direction: str = ASC) -> "TableQuery":
        return replace(self, sort_key=key, sort_direction=direction, page=1)

    def with_filters(self, filters: Mapping[str, Any] | None) -> "TableQuery":
        cleaned = {k: v for k, v in (filters or {}).items() if v not in (None, "")}
        return replace(self, filters=cleaned, page=1)

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "sort_key": self.sort_key,
            "sort_direction": self.sort_direction,
            "page": self.page,
            "page_size": self.page_size,
            "filters": dict(self.filters),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "TableQuery":
        if not data:
            return cls()
        return cls(
            query=data.get("query") or "",
            sort_key=data.get("sort_key"),
            sort_direction=data.get("sort_direction") or ASC,
            page=int(data.get("page") or 1),
            page_size=int(data.get("page_size") or DEFAULT_PAGE_SIZE),
            filters=dict(data.get("filters") or {}),
        )


class ReconcilePolicy(str, Enum):
    """
    Outcome of an optimistic update whose remote call failed.

    KEEP leaves the local change in place until the next load; ROLLBACK
    restores the working set captured before the mutation.
    """

    KEEP = "keep"
    ROLLBACK = "rollback"


def default_policy() -> ReconcilePolicy:
    return ReconcilePolicy.ROLLBACK if ROLLBACK_ON_FAILURE else ReconcilePolicy.KEEP


class NotificationState:
    """
    Notification working set synchronized with a NotificationService.

    Attributes:
        service: Remote collaborator.
        feed: Current working set.
        policy: Reconcile policy for failed remote calls.
        on_counts_change: Called with the counters after each change.
        last_error: Message of the most recent failure, None after success.
    """

    def __init__(
        self,
        service: NotificationService,
        feed: NotificationFeed | None = None,
        policy: ReconcilePolicy | None = None,
        on_counts_change: Callable[[NotificationCounts], Any] | None = None,
    ) -> None:
        self.service = service
        self.feed = feed or NotificationFeed()
        self.policy = policy or default_policy()
        self.on_counts_change = on_counts_change
        self.last_error: str | None = None

    def load(self) -> bool:
        """
        Replace the working set with a fresh fetch.

        On failure the previous feed is kept.

        Returns:
            True when the fetch succeeded.
        """
        tab = self.feed.tab
        self.feed.loading = True
        try:
            payload = self.service.fetch_feed()
        except Exception as exc:
            LOG.error("Failed to fetch notifications", exc_info=True)
            self.feed.loading = False
            self.last_error = f"Failed to fetch notifications: {exc}"
            return False
        self.feed = NotificationFeed.from_buckets(payload, tab=tab)
        self.last_error = None
        LOG.info(
            "Loaded notifications - unread:%s read:%s held:%s",
            self.feed.counts.unread,
            self.feed.counts.read,
            len(self.feed.items),
        )
        self._counts_changed()
        return True

    def select_tab(self, tab: NotificationTab | str) -> None:
        self.feed.select_tab(tab)

    def mark_read(self, notification_id: str) -> bool:
        return self._mutate(
            "mark_read",
            lambda: self.feed.mark_read(notification_id),
            lambda: self.service.mark_read(notification_id),
        )

    def mark_unread(self, notification_id: str) -> bool:
        return self._mutate(
            "mark_unread",
            lambda: self.feed.mark_unread(notification_id),
            lambda: self.service.mark_unread(notification_id),
        )

    def delete(self, notification_id: str) -> bool:
        return self._mutate(
            "delete",
            lambda: self.feed.delete(notification_id) is not None,
            lambda: self.service.delete(notification_id),
        )

    def mark_all_read(self) -> bool:
        def _local() -> bool:
            pending = self.feed.counts.unread > 0
            return self.feed.mark_all_read() > 0 or pending

        return self._mutate("mark_all_read", _local, self.service.mark_all_read)

    def _mutate(
        self,
        operation: str,
        local: Callable[[], bool],
        remote: Callable[[], Any],
    ) -> bool:
        """
        Apply ``local`` optimistically, then ``remote``.

        Returns:
            True when both the local transition and the remote call
            succeeded; False for a no-op or a remote failure.
        """
        snapshot = self.feed.snapshot()
        if not local():
            LOG.debug("%s: no local change", operation)
            return False
        self._counts_changed()

        try:
            remote()
        except Exception as exc:
            LOG.warning("%s failed remotely: %s", operation, exc, exc_info=True)
            self.last_error = f"Failed to {operation.replace('_', ' ')}: {exc}"
            if self.policy == ReconcilePolicy.ROLLBACK:
                self.feed = snapshot
                self._counts_changed()
            return False

        self.last_error = None
        return True

    def _counts_changed(self) -> None:
        if self.on_counts_change is None:
            return
        try:
            self.on_counts_change(self.feed.counts)
        except Exception:
            LOG.error("on_counts_change handler failed", exc_info=True)
