"""
Notification bell menu and list components.

The same list renderer backs the header dropdown ("menu" scope) and the
notifications page ("page" scope); scopes keep the pattern-matching ids
of the two places apart.
"""

from datetime import datetime

from dash import dcc, html
from dash_iconify import DashIconify

from travel_console.models.notification import Notification, NotificationFeed, NotificationTab
from travel_console.utils import time_ago

MENU_SCOPE = "menu"
PAGE_SCOPE = "page"

_TYPE_ICONS = {
    "info": "lucide:info",
    "success": "lucide:circle-check",
    "warning": "lucide:triangle-alert",
    "urgent": "lucide:circle-alert",
    "error": "lucide:circle-x",
    "approval": "lucide:clipboard-check",
}

_TAB_LABELS = {
    NotificationTab.ALL: "All",
    NotificationTab.UNREAD: "Unread",
    NotificationTab.READ: "Read",
}


def notification_badge(feed: NotificationFeed) -> html.Span:
    label = feed.badge_label()
    return html.Span(
        label,
        id="notifications-badge",
        className="notification-badge" + ("" if label else " hidden"),
    )


def notification_tabs(feed: NotificationFeed, scope: str = MENU_SCOPE) -> html.Div:
    """Build the All / Unread / Read tab strip with per-tab counts."""
    counts = {
        NotificationTab.ALL: feed.counts.total,
        NotificationTab.UNREAD: feed.counts.unread,
        NotificationTab.READ: feed.counts.read,
    }
    return html.Div(
        className="notification-tabs",
        children=[
            html.Button(
                [_TAB_LABELS[tab], html.Span(str(counts[tab]), className="tab-count")],
                id={"type": "notification-tab", "scope": scope, "tab": tab.value},
                className="tab" + (" active" if feed.tab == tab else ""),
                n_clicks=0,
            )
            for tab in NotificationTab
        ],
    )


def notification_item(
    notification: Notification, scope: str = MENU_SCOPE, now: datetime | None = None
) -> html.Div:
    """
    Build one list entry with its read toggle and delete buttons.

    Args:
        notification: Item to render.
        scope: "menu" or "page".
        now: Reference time for the relative timestamp.

    Returns:
        The list entry.
    """
    toggle_action = "unread" if notification.is_read else "read"
    toggle_label = "Mark as unread" if notification.is_read else "Mark as read"
    return html.Div(
        className="notification-item" + ("" if notification.is_read else " unread"),
        children=[
            DashIconify(
                icon=_TYPE_ICONS.get(notification.notification_type, _TYPE_ICONS["info"]),
                className=f"notification-icon {notification.notification_type}",
            ),
            html.Div(
                className="notification-body",
                children=[
                    html.Div(notification.title, className="notification-title"),
                    html.P(notification.message, className="notification-message"),
                    html.Span(
                        time_ago(notification.created_at, now),
                        className="muted notification-time",
                    ),
                ],
            ),
            html.Div(
                className="notification-actions",
                children=[
                    html.Button(
                        DashIconify(
                            icon="lucide:mail" if notification.is_read else "lucide:mail-open"
                        ),
                        id=_action_id(scope, toggle_action, notification.id),
                        className="button ghost",
                        title=toggle_label,
                        n_clicks=0,
                    ),
                    html.Button(
                        DashIconify(icon="lucide:trash-2"),
                        id=_action_id(scope, "delete", notification.id),
                        className="button ghost destructive",
                        title="Delete",
                        n_clicks=0,
                    ),
                ],
            ),
        ],
    )


def notification_list(
    feed: NotificationFeed, scope: str = MENU_SCOPE, now: datetime | None = None
) -> html.Div:
    if feed.loading:
        return html.Div("Loading…", className="notification-empty muted")
    items = feed.filtered()
    if not items:
        return html.Div("No notifications to show", className="notification-empty muted")
    return html.Div(
        [notification_item(item, scope, now) for item in items],
        className="notification-list",
    )


def notifications_panel(
    feed: NotificationFeed, scope: str = MENU_SCOPE, now: datetime | None = None
) -> html.Div:
    """
    Build the dropdown/page body: header with mark-all, tabs, list and,
    in the menu, a link to the notifications page.
    """
    children = [
        html.Div(
            className="notification-header",
            children=[
                html.H4("Notifications"),
                html.Button(
                    "Mark all as read",
                    id={"type": "notification-mark-all", "scope": scope},
                    className="button link",
                    disabled=feed.counts.unread == 0,
                    n_clicks=0,
                ),
            ],
        ),
        notification_tabs(feed, scope),
        notification_list(feed, scope, now),
    ]
    if scope == MENU_SCOPE:
        children.append(
            dcc.Link(
                "View all notifications",
                href="/notifications",
                className="notification-view-all",
            )
        )
    return html.Div(children, className=f"notifications-panel {scope}")


def notifications_menu(feed: NotificationFeed) -> html.Details:
    """Build the header bell with its badge and dropdown panel."""
    return html.Details(
        id="notifications-menu",
        className="notifications-menu",
        children=[
            html.Summary(
                className="button ghost notification-bell",
                children=[DashIconify(icon="lucide:bell", width=20), notification_badge(feed)],
            ),
            html.Div(
                notifications_panel(feed, MENU_SCOPE),
                id="notifications-menu-content",
                className="menu-content",
            ),
        ],
    )


def _action_id(scope: str, action: str, notification_id: str) -> dict:
    return {
        "type": "notification-action",
        "scope": scope,
        "action": action,
        "id": notification_id,
    }
