"""
Table pages: a DataTable bound to a TableQuery and a ResourceRepository.

A ResourceTable lives for one callback invocation. It is rebuilt from the
query kept in the page's dcc.Store, routes the triggered Dash event to
the matching DataTable operation, reloads the page of records and renders
the results. Pages customize it through ResourceDefinition and, for row
actions, by subclassing.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Collection, Mapping, Sequence

from dash import dcc, html
from dash_iconify import DashIconify

from travel_console.components.data_table import (
    Action,
    Column,
    DataTable,
    Pagination,
    Row,
)
from travel_console.lib import logs
from travel_console.models.common import ResourcePage
from travel_console.services.repository import ResourceRepository
from travel_console.state import TableQuery

LOG = logs.logger(__file__)

CLICK_EVENTS = {"table-sort", "table-page", "table-nav", "table-row", "table-action", "table-refresh"}


@dataclass(frozen=True)
class FilterField:
    """A dropdown filter forwarded to the service as a query parameter."""

    key: str
    label: str
    options: Sequence[str] = ()


@dataclass(frozen=True)
class ResourceDefinition:
    """
    Declarative description of a resource list page.

    Attributes:
        key: Resource key understood by ResourceService; also the table id.
        title: Page heading.
        path: URL path the page is served at.
        columns: Table columns.
        searchable: Whether the page shows a search box.
        filters: Dropdown filters shown above the table.
        description: Optional subtitle.
    """

    key: str
    title: str
    path: str
    columns: Sequence[Column]
    searchable: bool = True
    filters: Sequence[FilterField] = field(default_factory=tuple)
    description: str = ""
    no_data_message: str = "No data available"


def component_id(kind: str, table_id: str) -> dict:
    return {"type": kind, "table": table_id}


def parse_prop_id(prop_id: str) -> dict | None:
    """
    Return the component id of a pattern-matching ``prop_id``, or None for
    plain string ids.
    """
    raw, _, _ = prop_id.rpartition(".")
    if not raw.startswith("{"):
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return None


def pick_event(
    triggered: Sequence[Mapping[str, Any]], click_events: Collection[str] = CLICK_EVENTS
) -> tuple[dict, Any] | None:
    """
    Choose the event to handle from ``dash.ctx.triggered``.

    Clicks with an empty n_clicks come from freshly rendered buttons and
    are ignored. When an action button and its row fire together, the
    action wins, the same as stopping propagation.
    """
    events = []
    for entry in triggered:
        event_id = parse_prop_id(entry.get("prop_id", ""))
        if event_id is None:
            continue
        value = entry.get("value")
        if event_id.get("type") in click_events and not value:
            continue
        events.append((event_id, value))
    if not events:
        return None
    for event in events:
        if event[0].get("type") == "table-action":
            return event
    return events[0]


class ResourceTable:
    """
    One list page's table for the current request.

    Attributes:
        definition: Page definition.
        repository: Cached data access for the resource.
        query: Current request state; replaced by every event.
        page: Last loaded page of records.
        detail: Record opened with "View" or a row click.
        message: Toast text for the last event.
        refresh: Reload bypassing the cache.
    """

    def __init__(
        self,
        definition: ResourceDefinition,
        repository: ResourceRepository,
        query: TableQuery | None = None,
    ) -> None:
        self.definition = definition
        self.repository = repository
        self.query = query or TableQuery()
        self.page: ResourcePage | None = None
        self.detail: Mapping[str, Any] | None = None
        self.message: str | None = None
        self.message_level = "info"
        self.refresh = False

    @property
    def table_id(self) -> str:
        return self.definition.key

    def row_actions(self, row: Row) -> Sequence[Action]:
        """Per-row menu; plain resource pages open records by row click instead."""
        return ()

    def has_row_actions(self) -> bool:
        return type(self).row_actions is not ResourceTable.row_actions

    def table(self) -> DataTable:
        return DataTable(
            self.table_id,
            self.definition.columns,
            actions=self.row_actions if self.has_row_actions() else (),
            on_sort=self._on_sort,
            on_search=self._on_search if self.definition.searchable else None,
            on_row_click=None if self.has_row_actions() else self.view,
            no_data_message=self.definition.no_data_message,
            search_placeholder=f"Search {self.definition.title.lower()}...",
            sort_state=self.query.sort_state,
            search_term=self.query.query,
        )

    def pagination(self) -> Pagination:
        total = self.page.total if self.page else 0
        return Pagination.from_total(
            self.query.page,
            self.query.page_size,
            total,
            on_page_change=self._on_page,
            on_page_size_change=self._on_page_size,
        )

    def load(self) -> ResourcePage:
        self.page = self.repository.fetch(
            query=self.query.query,
            page=self.query.page,
            page_size=self.query.page_size,
            sort_key=self.query.sort_key,
            sort_direction=self.query.sort_direction,
            filters=self.query.filters,
            refresh=self.refresh,
        )
        self.refresh = False
        return self.page

    def handle(self, event_id: Mapping[str, Any], value: Any) -> bool:
        """
        Route one triggered component to the table operation it stands for.

        Row and action clicks resolve against the page currently held, so
        load() must have run for the same query first.

        Returns:
            True when the event changed something worth re-rendering.
        """
        kind = event_id.get("type")
        table = self.table()
        pagination = self.pagination()
        rows = list(self.page.items) if self.page else []

        if kind == "table-sort":
            return table.sort(event_id.get("column")) is not None
        if kind == "table-search":
            if (value or "").strip() == self.query.query:
                return False
            table.search(value)
            return True
        if kind == "table-filter":
            self.query = self.query.with_filters({**self.query.filters, event_id.get("field"): value})
            return True
        if kind == "table-page":
            return table.paginate(pagination, int(event_id.get("page")))
        if kind == "table-nav":
            if event_id.get("direction") == "prev":
                return table.previous(pagination)
            return table.next(pagination)
        if kind == "table-page-size":
            return value is not None and table.change_page_size(pagination, int(value))
        if kind == "table-refresh":
            self.refresh = True
            return True
        if kind in ("table-row", "table-action"):
            index = int(event_id.get("row", -1))
            if not 0 <= index < len(rows):
                return False
            return table.click(rows[index], event_id.get("action"))
        LOG.debug("Ignoring unknown table event %s", event_id)
        return False

    def view(self, row: Row) -> None:
        record_id = row.get("id")
        self.detail = self.repository.get_by_id(record_id) if record_id is not None else None
        if self.detail is None:
            self.detail = dict(row)

    def render_results(self) -> html.Div:
        page = self.page or ResourcePage(page_size=self.query.page_size)
        return self.table().render(page.items, self.pagination(), include_search=False)

    def notify(self, message: str, level: str = "info") -> None:
        self.message = message
        self.message_level = level

    def render_toast(self) -> html.Div:
        return toast(self.message, self.message_level)

    def render_detail(self) -> html.Div:
        if not self.detail:
            return html.Div()
        labels = {column.key: column.header for column in self.definition.columns}
        return html.Div(
            className="card detail-card",
            children=[
                html.H3("Details"),
                html.Dl(
                    className="detail-list",
                    children=[
                        part
                        for key, value in self.detail.items()
                        for part in (
                            html.Dt(labels.get(key, key.replace("_", " ").title())),
                            html.Dd("" if value is None else str(value)),
                        )
                    ],
                ),
            ],
        )

    def layout(self) -> html.Div:
        """Build the full page; the first page of records is loaded eagerly."""
        self.load()
        table = self.table()
        toolbar: list[Any] = [table.render_search()]
        toolbar.extend(self._filter_dropdown(filter_field) for filter_field in self.definition.filters)
        toolbar.append(
            html.Button(
                DashIconify(icon="lucide:refresh-cw"),
                id={"type": "table-refresh", "table": self.table_id, "index": 0},
                className="button ghost",
                title="Refresh",
                n_clicks=0,
            )
        )
        header = [html.H2(self.definition.title)]
        if self.definition.description:
            header.append(html.P(self.definition.description, className="muted"))
        return html.Div(
            className="page resource-page",
            children=[
                dcc.Store(id=component_id("table-query", self.table_id), data=self.query.to_dict()),
                html.Div(header, className="page-header"),
                html.Div(toolbar, className="card table-toolbar"),
                html.Div(id=component_id("table-toast", self.table_id), className="toast-container"),
                html.Div(self.render_results(), id=component_id("table-results", self.table_id)),
                html.Div(id=component_id("table-detail", self.table_id)),
            ],
        )

    def _filter_dropdown(self, filter_field: FilterField) -> html.Div:
        return html.Div(
            className="table-filter",
            children=dcc.Dropdown(
                id={"type": "table-filter", "table": self.table_id, "field": filter_field.key},
                options=[{"label": option, "value": option} for option in filter_field.options],
                value=self.query.filters.get(filter_field.key),
                placeholder=filter_field.label,
                clearable=True,
            ),
        )

    def _on_sort(self, key: str, direction: str) -> None:
        self.query = self.query.with_sort(key, direction)

    def _on_search(self, term: str) -> None:
        self.query = self.query.with_search(term)

    def _on_page(self, page: int) -> None:
        self.query = self.query.with_page(page)

    def _on_page_size(self, page_size: int) -> None:
        self.query = self.query.with_page_size(page_size)


def toast(message: str | None, level: str = "info") -> html.Div:
    """Build a dismissable message box; empty when there is nothing to say."""
    if not message:
        return html.Div()
    icons = {
        "success": "lucide:circle-check",
        "error": "lucide:circle-x",
        "info": "lucide:info",
    }
    return html.Div(
        className=f"toast {level}",
        children=[
            DashIconify(icon=icons.get(level, icons["info"]), className="toast-icon"),
            html.Span(message),
        ],
    )
