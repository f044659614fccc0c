"""
Dash application entry point for the Travel Console.

Wires services, repositories and pages together, registers the callbacks
and adds the notification WebSocket to the Flask server.
"""

import json
import os
from functools import cache, partial

from dash import Dash, Input, Output, State

from travel_console.layout import BRANDING, build_layout
from travel_console.lib import logs
from travel_console.models.common import CurrentUser
from travel_console.models.notification import NotificationCounts, NotificationFeed
from travel_console.pages import (
    TableFactory,
    definitions,
    register_notification_callbacks,
    register_table_callbacks,
    render_page,
)
from travel_console.pages.approvals import APPROVALS, ApprovalsTable
from travel_console.pages.notifications import NotificationsPage
from travel_console.pages.resources import RESOURCE_PAGES
from travel_console.pages.tables import ResourceTable, toast
from travel_console.services import get_notification_service, get_resource_service
from travel_console.services.repository import ResourceRepository
from travel_console.state import NotificationState
from travel_console.ws_server import broadcast_counts, init_websocket

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("TRAVEL_CONSOLE_PORT", "8050"))
DEBUG = os.getenv("TRAVEL_CONSOLE_DEBUG", "false").lower() in {"1", "true", "yes"}
USER_NAME = os.getenv("TRAVEL_CONSOLE_USER_NAME", "Demo User")
USER_ROLE = os.getenv("TRAVEL_CONSOLE_USER_ROLE", "General")


def current_user() -> CurrentUser | None:
    if not USER_NAME and not USER_ROLE:
        return None
    return CurrentUser(name=USER_NAME, role=USER_ROLE)


@cache
def repository(resource: str) -> ResourceRepository:
    return ResourceRepository(get_resource_service(), resource)


def notification_state(feed: NotificationFeed | None = None) -> NotificationState:
    return NotificationState(
        get_notification_service(), feed, on_counts_change=broadcast_counts
    )


def table_factories() -> dict[str, TableFactory]:
    factories: dict[str, TableFactory] = {
        definition.path: partial(ResourceTable, definition, repository(definition.key))
        for definition in RESOURCE_PAGES.values()
    }
    factories[APPROVALS.path] = lambda query: ApprovalsTable(
        repository(APPROVALS.key), get_resource_service(), current_user(), query
    )
    return factories


def serve_layout():
    """Build the layout per page view so the notification feed is fresh."""
    state = notification_state()
    if not state.load():
        LOG.warning("Starting with an empty notification feed: %s", state.last_error)
    return build_layout(state.feed, current_user())


_factories = table_factories()

app = Dash(__name__, title=BRANDING["title"], suppress_callback_exceptions=True)
app.layout = serve_layout
init_websocket(app.server)

for _definition in definitions():
    register_table_callbacks(app, _definition.key, _factories[_definition.path])
register_notification_callbacks(app, notification_state)


@app.callback(
    Output("page-container", "children"),
    Input("url", "pathname"),
    State("notifications-feed", "data"),
)
def display_page(pathname: str | None, feed_data: dict | None) -> object:
    """Render the page for the current path."""
    LOG.info("display_page - pathname:%s", pathname)
    try:
        return render_page(
            pathname,
            _factories,
            lambda: NotificationsPage(notification_state(NotificationFeed.from_dict(feed_data))),
        )
    except Exception as exc:
        LOG.error("Failed to render %s", pathname, exc_info=True)
        return toast(f"Failed to load page: {exc}", "error")


app.clientside_callback(
    """
    function(config) {
        const protocol = window.location.protocol === "https:" ? "wss:" : "ws:";
        return protocol + "//" + window.location.host + config.path;
    }
    """,
    Output("notifications-ws", "url"),
    Input("ws-url-store", "data"),
)


@app.callback(
    Output("notifications-badge", "children", allow_duplicate=True),
    Output("notifications-badge", "className", allow_duplicate=True),
    Input("notifications-ws", "message"),
    prevent_initial_call=True,
)
def on_counts_message(message: dict | None) -> tuple[str, str]:
    """Update the bell badge from a counters broadcast."""
    payload = json.loads(message["data"]) if message and message.get("data") else {}
    label = NotificationFeed(counts=NotificationCounts.from_dict(payload)).badge_label()
    return label, "notification-badge" + ("" if label else " hidden")


def main() -> None:
    """Entrypoint used by `travel_console` console script."""
    app.run(debug=DEBUG, host="0.0.0.0", port=APP_PORT)


if __name__ == "__main__":
    main()
