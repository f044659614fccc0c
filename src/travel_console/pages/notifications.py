"""
Notifications page and the event routing shared with the bell menu.

Both places read the same feed from the ``notifications-feed`` store.
Events from either are applied through a NotificationState so local
counters, the badge and the remote service stay in step.
"""

from datetime import datetime
from typing import Any, Mapping

from dash import html

from travel_console.components.data_table import Action, Column, DataTable, Row
from travel_console.components.notifications_menu import PAGE_SCOPE, notification_tabs
from travel_console.lib import logs
from travel_console.models.notification import NotificationTab
from travel_console.pages.resources import status_badge
from travel_console.pages.tables import CLICK_EVENTS
from travel_console.state import NotificationState
from travel_console.utils import time_ago

LOG = logs.logger(__file__)

TABLE_ID = "notifications"
NOTIFICATION_CLICK_EVENTS = CLICK_EVENTS | {
    "notification-tab",
    "notification-action",
    "notification-mark-all",
}


def _title(value: Any, row: Mapping[str, Any]) -> html.Div:
    return html.Div(
        [
            html.Div(value, className="notification-title"),
            html.Div(row.get("message") or "", className="muted notification-message"),
        ],
        className="unread" if not row.get("is_read") else "",
    )


def _read_state(value: Any, row: Mapping[str, Any]) -> html.Span:
    return status_badge("Read" if value else "Unread", row)


class NotificationsPage:
    """
    Notifications list bound to a NotificationState.

    Attributes:
        state: Working set and remote sync.
        now: Reference time for relative timestamps.
    """

    def __init__(self, state: NotificationState, now: datetime | None = None) -> None:
        self.state = state
        self.now = now
        self.columns = (
            Column("title", "Notification", render=_title),
            Column("notification_type", "Type", align="center"),
            Column("created_at", "Received", render=lambda value, row: time_ago(value, self.now)),
            Column("is_read", "Status", render=_read_state, align="center"),
        )
        self.actions = (
            Action(
                "Mark as read",
                lambda row: self.state.mark_read(row["id"]),
                icon="lucide:mail-open",
                hidden=lambda row: bool(row.get("is_read")),
            ),
            Action(
                "Mark as unread",
                lambda row: self.state.mark_unread(row["id"]),
                icon="lucide:mail",
                hidden=lambda row: not row.get("is_read"),
            ),
            Action(
                "Delete",
                lambda row: self.state.delete(row["id"]),
                icon="lucide:trash-2",
                variant="destructive",
            ),
        )

    def table(self) -> DataTable:
        return DataTable(
            TABLE_ID,
            self.columns,
            actions=self.actions,
            no_data_message="No notifications to show",
        )

    def rows(self) -> list[Row]:
        return [item.to_dict() for item in self.state.feed.filtered()]

    def handle(self, event_id: Mapping[str, Any], value: Any = None) -> bool:
        """
        Apply one bell-menu or page event.

        Returns:
            True when the feed or the active tab changed.
        """
        kind = event_id.get("type")
        if kind == "notification-tab":
            self.state.select_tab(NotificationTab(event_id.get("tab")))
            return True
        if kind == "notification-mark-all":
            return self.state.mark_all_read()
        if kind == "notification-action":
            notification_id = str(event_id.get("id"))
            operation = {
                "read": self.state.mark_read,
                "unread": self.state.mark_unread,
                "delete": self.state.delete,
            }.get(event_id.get("action"))
            if operation is None:
                LOG.debug("Ignoring unknown notification action %s", event_id)
                return False
            operation(notification_id)
            return True
        if kind == "table-action" and event_id.get("table") == TABLE_ID:
            rows = self.rows()
            index = int(event_id.get("row", -1))
            if not 0 <= index < len(rows):
                return False
            self.table().click(rows[index], event_id.get("action"))
            return True
        return False

    def render_body(self) -> html.Div:
        feed = self.state.feed
        return html.Div(
            [
                html.Div(
                    className="notification-toolbar",
                    children=[
                        notification_tabs(feed, PAGE_SCOPE),
                        html.Button(
                            "Mark all as read",
                            id={"type": "notification-mark-all", "scope": PAGE_SCOPE},
                            className="button outline",
                            disabled=feed.counts.unread == 0,
                            n_clicks=0,
                        ),
                    ],
                ),
                self.table().render(self.rows(), loading=feed.loading),
            ]
        )

    def layout(self) -> html.Div:
        return html.Div(
            className="page notifications-page",
            children=[
                html.Div(
                    [
                        html.H2("Notifications"),
                        html.P("Everything sent to your account.", className="muted"),
                    ],
                    className="page-header",
                ),
                html.Div(
                    self.render_body(),
                    id={"type": "notifications-page", "index": 0},
                    className="card",
                ),
            ],
        )
