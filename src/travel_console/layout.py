"""
Layout helpers for the Travel Console Dash application.

This module defines the root layout structure including:
- URL tracking for path-based routing
- dcc.Store components for the notification feed and the current user
- WebSocket connection for live notification counters
- Header with navigation, user name and the notification bell
- Toast area and the routed page container

The layout supports both generic and branded modes controlled by the
TRAVEL_CONSOLE_GENERIC environment variable.
"""

import os

from dash import dcc, html
from dash_extensions import WebSocket
from dash_iconify import DashIconify

from travel_console.components.notifications_menu import notifications_menu
from travel_console.models.common import CurrentUser
from travel_console.models.notification import NotificationFeed
from travel_console.pages import NAV_ITEMS
from travel_console.ws_server import WS_PATH

# Branding configuration
_USE_GENERIC = os.getenv("TRAVEL_CONSOLE_GENERIC", "false").lower() in {"1", "true", "yes"}

BRANDING = {
    "title": "Admin Console" if _USE_GENERIC else "Travel Agency Console",
    "subtitle": (
        "Approvals, contracts and finance."
        if _USE_GENERIC
        else "Bookings back office: approvals, client contracts and finance."
    ),
}


def build_layout(feed: NotificationFeed, user: CurrentUser | None = None) -> html.Div:
    """
    Build the root layout for the console.

    Args:
        feed: Notification working set loaded for this page view.
        user: Acting user shown in the header.

    Returns:
        Root html.Div containing the complete application layout.
    """
    return html.Div(
        className="app-shell",
        children=[
            dcc.Location(id="url", refresh=False),
            # Notification working set shared by the bell and the page
            dcc.Store(id="notifications-feed", data=feed.to_dict()),
            dcc.Store(id="current-user", data=user.to_dict() if user else None),
            # WebSocket URL configuration (path resolved relative to host)
            dcc.Store(id="ws-url-store", data={"path": WS_PATH}),
            WebSocket(id="notifications-ws", url=""),
            _build_header(feed, user),
            html.Div(
                className="app-body",
                children=[
                    _build_nav(),
                    html.Main(
                        className="app-container",
                        children=[
                            html.Div(id="app-toast", className="toast-container"),
                            html.Div(id="page-container"),
                        ],
                    ),
                ],
            ),
        ],
    )


def _build_header(feed: NotificationFeed, user: CurrentUser | None) -> html.Header:
    user_children = []
    if user:
        user_children = [
            DashIconify(icon="lucide:circle-user", width=20),
            html.Span(user.name, className="user-name"),
            html.Span(user.role, className="muted user-role"),
        ]
    return html.Header(
        className="app-header",
        children=[
            html.Div(
                className="page-header",
                children=[html.H1(BRANDING["title"]), html.P(BRANDING["subtitle"])],
            ),
            html.Div(
                className="header-actions",
                children=[notifications_menu(feed), html.Div(user_children, className="user-info")],
            ),
        ],
    )


def _build_nav() -> html.Nav:
    return html.Nav(
        className="app-nav",
        children=[
            dcc.Link(
                [DashIconify(icon=icon, className="nav-icon"), html.Span(label)],
                href=path,
                className="nav-link",
            )
            for path, label, icon in NAV_ITEMS
        ],
    )
