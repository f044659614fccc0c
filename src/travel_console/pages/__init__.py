"""
Page containers and their Dash callbacks.

Pages:
- /approvals: approval steps with permission-gated decisions
- /contracts, /bank-balances, /documents, /budgets: resource lists
- /notifications: the full notification list

Every list page keeps its TableQuery in a per-table dcc.Store and is
re-rendered by one callback per table. Callbacks use
``prevent_initial_call=True``; the first page of each table is rendered
eagerly when the route is displayed.
"""

from typing import Callable

from dash import ALL, Dash, Input, Output, State, ctx, html, no_update
from dash.exceptions import PreventUpdate

from travel_console.components.notifications_menu import MENU_SCOPE, notifications_panel
from travel_console.lib import logs
from travel_console.models.notification import NotificationFeed
from travel_console.pages.approvals import APPROVALS
from travel_console.pages.notifications import NOTIFICATION_CLICK_EVENTS, NotificationsPage
from travel_console.pages.notifications import TABLE_ID as NOTIFICATIONS_TABLE_ID
from travel_console.pages.resources import RESOURCE_PAGES
from travel_console.pages.tables import (
    ResourceDefinition,
    ResourceTable,
    component_id,
    pick_event,
    toast,
)
from travel_console.state import NotificationState, TableQuery

LOG = logs.logger(__file__)

TableFactory = Callable[[TableQuery | None], ResourceTable]
StateFactory = Callable[[NotificationFeed], NotificationState]

NAV_ITEMS = [
    ("/approvals", "Approvals", "lucide:clipboard-check"),
    ("/contracts", "Client Contracts", "lucide:file-text"),
    ("/bank-balances", "Bank Balances", "lucide:landmark"),
    ("/documents", "Documents", "lucide:folder"),
    ("/budgets", "Project Budgets", "lucide:wallet"),
    ("/notifications", "Notifications", "lucide:bell"),
]

DEFAULT_PATH = APPROVALS.path


def definitions() -> list[ResourceDefinition]:
    return [APPROVALS, *RESOURCE_PAGES.values()]


def render_page(
    pathname: str | None,
    table_factories: dict[str, TableFactory],
    notifications_page: Callable[[], NotificationsPage],
) -> html.Div:
    """
    Return the layout for a path; unknown paths get a not-found message.

    Args:
        pathname: Current URL path.
        table_factories: Table builders keyed by path.
        notifications_page: Builder for the notifications page.
    """
    path = (pathname or "/").rstrip("/") or DEFAULT_PATH
    if path in table_factories:
        return table_factories[path](None).layout()
    if path == "/notifications":
        return notifications_page().layout()
    return html.Div(
        className="page empty-state",
        children=[html.H2("Page not found"), html.P(f"Nothing lives at {path}.")],
    )


def register_table_callbacks(app: Dash, table_id: str, factory: TableFactory) -> None:
    """
    Register the callback routing one table's events to a ResourceTable.

    Args:
        app: Dash application.
        table_id: Table id used in the component ids.
        factory: Builds a ResourceTable for a query.
    """

    @app.callback(
        Output(component_id("table-results", table_id), "children"),
        Output(component_id("table-query", table_id), "data"),
        Output(component_id("table-detail", table_id), "children"),
        Output(component_id("table-toast", table_id), "children"),
        Input({"type": "table-sort", "table": table_id, "column": ALL}, "n_clicks"),
        Input({"type": "table-page", "table": table_id, "page": ALL}, "n_clicks"),
        Input({"type": "table-nav", "table": table_id, "direction": ALL}, "n_clicks"),
        Input({"type": "table-page-size", "table": table_id, "index": ALL}, "value"),
        Input({"type": "table-row", "table": table_id, "row": ALL}, "n_clicks"),
        Input(
            {"type": "table-action", "table": table_id, "row": ALL, "action": ALL},
            "n_clicks",
        ),
        Input({"type": "table-filter", "table": table_id, "field": ALL}, "value"),
        Input({"type": "table-search", "table": table_id, "index": ALL}, "value"),
        Input({"type": "table-refresh", "table": table_id, "index": ALL}, "n_clicks"),
        State(component_id("table-query", table_id), "data"),
        prevent_initial_call=True,
    )
    def _on_table_event(*args):
        event = pick_event(ctx.triggered)
        if event is None:
            raise PreventUpdate
        event_id, value = event
        controller = factory(TableQuery.from_dict(args[-1]))
        try:
            controller.load()
            if not controller.handle(event_id, value):
                raise PreventUpdate
            controller.load()
        except PreventUpdate:
            raise
        except Exception as exc:
            LOG.error("Table %s event %s failed", table_id, event_id, exc_info=True)
            return no_update, no_update, no_update, toast(str(exc), "error")
        return (
            controller.render_results(),
            controller.query.to_dict(),
            controller.render_detail() if controller.detail else no_update,
            controller.render_toast(),
        )


def register_notification_callbacks(app: Dash, state_factory: StateFactory) -> None:
    """
    Register the callback shared by the bell menu and the notifications page.

    Args:
        app: Dash application.
        state_factory: Builds a NotificationState around the stored feed.
    """

    @app.callback(
        Output("notifications-feed", "data"),
        Output("notifications-menu-content", "children"),
        Output("notifications-badge", "children"),
        Output("notifications-badge", "className"),
        Output({"type": "notifications-page", "index": ALL}, "children"),
        Output("app-toast", "children"),
        Input({"type": "notification-tab", "scope": ALL, "tab": ALL}, "n_clicks"),
        Input(
            {"type": "notification-action", "scope": ALL, "action": ALL, "id": ALL},
            "n_clicks",
        ),
        Input({"type": "notification-mark-all", "scope": ALL}, "n_clicks"),
        Input(
            {"type": "table-action", "table": NOTIFICATIONS_TABLE_ID, "row": ALL, "action": ALL},
            "n_clicks",
        ),
        State("notifications-feed", "data"),
        State({"type": "notifications-page", "index": ALL}, "id"),
        prevent_initial_call=True,
    )
    def _on_notification_event(_tabs, _actions, _mark_all, _table_actions, feed_data, page_ids):
        event = pick_event(ctx.triggered, NOTIFICATION_CLICK_EVENTS)
        if event is None:
            raise PreventUpdate
        state = state_factory(NotificationFeed.from_dict(feed_data))
        page = NotificationsPage(state)
        if not page.handle(*event):
            raise PreventUpdate

        feed = state.feed
        label = feed.badge_label()
        message = toast(state.last_error, "error") if state.last_error else html.Div()
        return (
            feed.to_dict(),
            notifications_panel(feed, MENU_SCOPE),
            label,
            "notification-badge" + ("" if label else " hidden"),
            [page.render_body() for _ in page_ids],
            message,
        )
