"""
Generic data table component.

Renders a list of record mappings under a set of columns with:

- Sort indicators on sortable headers (sorting itself is delegated)
- Per-row action menus, shared or computed per row
- Skeleton rows while loading and a single "no data" row when empty
- A pagination bar with a sliding window of page numbers
- An optional search box whose term is forwarded, never applied

The table never fetches, filters, sorts or slices data. Every user event
is turned into a callback (on_sort, on_search, on_page_change,
on_page_size_change, action.on_click, on_row_click) and the caller
re-renders with whatever the data source returns.

Interactive elements carry pattern-matching ids of the form
``{"type": "table-...", "table": table_id, ...}`` so page callbacks can
route Dash events back to DataTable operations.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

from dash import dcc, html
from dash_iconify import DashIconify

Row = Mapping[str, Any]

ASC = "asc"
DESC = "desc"
DEFAULT_SKELETON_ROWS = 5
DEFAULT_NO_DATA_MESSAGE = "No data available"
DEFAULT_SEARCH_PLACEHOLDER = "Search..."
PAGE_SIZE_OPTIONS = (5, 10, 25, 50)
PAGE_WINDOW_SIZE = 5


@dataclass(frozen=True)
class Column:
    """
    A rendering and sorting rule bound to one field of a record.

    Attributes:
        key: Field name; must exist in every row.
        header: Header label.
        render: Optional formatter ``(value, row) -> displayable``.
        sortable: Whether clicking the header requests a sort.
        align: "left", "center" or "right".
    """

    key: str
    header: str
    render: Callable[[Any, Row], Any] | None = None
    sortable: bool = False
    align: str = "left"

    def cell(self, row: Row) -> Any:
        value = row.get(self.key)
        if self.render is not None:
            return self.render(value, row)
        return value


@dataclass(frozen=True)
class Action:
    """
    An entry in a row's action menu.

    Attributes:
        label: Menu text.
        on_click: Called with the row when chosen.
        icon: Optional iconify name, e.g. "lucide:eye".
        variant: Style hint ("default", "destructive", "success"...).
        hidden: Optional ``row -> bool``; hides the action on that row.
    """

    label: str
    on_click: Callable[[Row], Any]
    icon: str | None = None
    variant: str = "default"
    hidden: Callable[[Row], bool] | None = None

    def visible_for(self, row: Row) -> bool:
        return self.hidden is None or not self.hidden(row)


@dataclass
class Pagination:
    """
    Pagination metadata plus the callbacks page events are forwarded to.

    The table does not enforce that a page size change goes back to page
    1; consumers do (see state.TableQuery.with_page_size).
    """

    current_page: int
    total_pages: int
    page_size: int
    total_items: int
    on_page_change: Callable[[int], Any] | None = None
    on_page_size_change: Callable[[int], Any] | None = None

    @classmethod
    def from_total(
        cls,
        current_page: int,
        page_size: int,
        total_items: int,
        on_page_change: Callable[[int], Any] | None = None,
        on_page_size_change: Callable[[int], Any] | None = None,
    ) -> "Pagination":
        total_pages = math.ceil(total_items / page_size) if page_size > 0 else 0
        return cls(
            current_page=current_page,
            total_pages=total_pages,
            page_size=page_size,
            total_items=total_items,
            on_page_change=on_page_change,
            on_page_size_change=on_page_size_change,
        )

    def can_go_to(self, page: int, loading: bool = False) -> bool:
        return not loading and 1 <= page <= self.total_pages

    def has_previous(self, loading: bool = False) -> bool:
        return self.can_go_to(self.current_page - 1, loading)

    def has_next(self, loading: bool = False) -> bool:
        return self.can_go_to(self.current_page + 1, loading)

    @property
    def first_item(self) -> int:
        return min((self.current_page - 1) * self.page_size + 1, self.total_items)

    @property
    def last_item(self) -> int:
        return min(self.current_page * self.page_size, self.total_items)

    def summary(self) -> str:
        return (
            f"Showing {self.first_item} to {self.last_item} "
            f"of {self.total_items} results"
        )


@dataclass(frozen=True)
class SortState:
    """Which column the header indicator points at, and which way."""

    key: str | None = None
    direction: str = ASC

    def toggled(self, key: str) -> "SortState":
        """
        Return the state after clicking a column.

        The same column flips asc/desc and never returns to unsorted; a new
        column becomes active in ascending order.
        """
        if self.key == key:
            return SortState(key, DESC if self.direction == ASC else ASC)
        return SortState(key, ASC)

    def to_dict(self) -> dict:
        return {"key": self.key, "direction": self.direction}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "SortState":
        if not data:
            return cls()
        return cls(key=data.get("key"), direction=data.get("direction") or ASC)


def page_window(
    current_page: int, total_pages: int, size: int = PAGE_WINDOW_SIZE
) -> list[int]:
    """
    Return the page numbers shown as buttons.

    At most ``size`` numbers: the first window while the current page is
    within the first few pages, the last window near the end, otherwise
    centered on the current page. Numbers never leave 1..total_pages.
    """
    if total_pages <= 0:
        return []
    count = min(size, total_pages)
    half = size // 2
    if current_page <= half + 1:
        start = 1
    elif current_page >= total_pages - half:
        start = total_pages - count + 1
    else:
        start = current_page - half
    start = max(1, min(start, total_pages - count + 1))
    return list(range(start, start + count))


def show_ellipsis(total_pages: int, size: int = PAGE_WINDOW_SIZE) -> bool:
    """The ellipsis marks truncation whenever there are more pages than buttons."""
    return total_pages > size


class DataTable:
    """
    Renderer and event router for one table instance.

    Holds only UI state: the active sort indicator and the search box
    value. Data ordering, filtering and paging belong to the caller.

    Attributes:
        table_id: Id used in every pattern-matching component id.
        columns: Column definitions, in display order.
        actions: Action list shared by all rows, or ``row -> actions``.
    """

    def __init__(
        self,
        table_id: str,
        columns: Sequence[Column],
        actions: Sequence[Action] | Callable[[Row], Sequence[Action]] = (),
        on_sort: Callable[[str, str], Any] | None = None,
        on_search: Callable[[str], Any] | None = None,
        on_row_click: Callable[[Row], Any] | None = None,
        no_data_message: str = DEFAULT_NO_DATA_MESSAGE,
        search_placeholder: str = DEFAULT_SEARCH_PLACEHOLDER,
        sort_state: SortState | None = None,
        search_term: str = "",
    ) -> None:
        self.table_id = table_id
        self.columns = list(columns)
        self.actions = actions
        self.on_sort = on_sort
        self.on_search = on_search
        self.on_row_click = on_row_click
        self.no_data_message = no_data_message
        self.search_placeholder = search_placeholder
        self.sort_state = sort_state or SortState()
        self.search_term = search_term

    @property
    def has_actions(self) -> bool:
        return callable(self.actions) or len(self.actions) > 0

    @property
    def column_span(self) -> int:
        return len(self.columns) + (1 if self.has_actions else 0)

    def column(self, key: str) -> Column | None:
        for column in self.columns:
            if column.key == key:
                return column
        return None

    # ------------------------------------------------------------------ events

    def sort(self, key: str) -> SortState | None:
        """
        Handle a header click.

        Returns:
            The new sort state, or None when the column is not sortable.
        """
        column = self.column(key)
        if column is None or not column.sortable:
            return None
        self.sort_state = self.sort_state.toggled(key)
        if self.on_sort is not None:
            self.on_sort(self.sort_state.key, self.sort_state.direction)
        return self.sort_state

    def search(self, term: str | None) -> None:
        """Keep the raw term and forward it; no filtering happens here."""
        self.search_term = term or ""
        if self.on_search is not None:
            self.on_search(self.search_term)

    def paginate(self, pagination: Pagination, page: int, loading: bool = False) -> bool:
        """
        Request a page change.

        Returns:
            True when on_page_change was invoked; out-of-range pages and
            requests while loading are dropped.
        """
        if not pagination.can_go_to(page, loading):
            return False
        if pagination.on_page_change is not None:
            pagination.on_page_change(page)
        return True

    def previous(self, pagination: Pagination, loading: bool = False) -> bool:
        return self.paginate(pagination, pagination.current_page - 1, loading)

    def next(self, pagination: Pagination, loading: bool = False) -> bool:
        return self.paginate(pagination, pagination.current_page + 1, loading)

    def change_page_size(
        self, pagination: Pagination, size: int, loading: bool = False
    ) -> bool:
        if loading or size <= 0 or size == pagination.page_size:
            return False
        if pagination.on_page_size_change is not None:
            pagination.on_page_size_change(size)
        return True

    def actions_for(self, row: Row) -> list[Action]:
        actions = self.actions(row) if callable(self.actions) else self.actions
        return [action for action in actions if action.visible_for(row)]

    def click(self, row: Row, action_index: int | None = None) -> bool:
        """
        Handle a click on a row or on one of its menu actions.

        An action click runs only the action; the row handler is skipped,
        as if propagation were stopped.

        Returns:
            True when a handler ran.
        """
        if action_index is not None:
            actions = self.actions_for(row)
            if not 0 <= action_index < len(actions):
                return False
            actions[action_index].on_click(row)
            return True
        if self.on_row_click is None:
            return False
        self.on_row_click(row)
        return True

    # --------------------------------------------------------------- rendering

    def render(
        self,
        data: Sequence[Row],
        pagination: Pagination | None = None,
        loading: bool = False,
        include_search: bool = True,
    ) -> html.Div:
        """
        Build the search box, the table, and the pagination bar when there
        is more than one page.

        Pages that re-render results on every event pass
        ``include_search=False`` and place render_search() outside the
        results container so the input keeps its focus.
        """
        children: list[Any] = []
        if include_search and self.on_search is not None:
            children.append(self.render_search())
        children.append(
            html.Div(
                className="table-wrapper",
                children=html.Table(
                    className="data-table",
                    children=[
                        html.Thead(self._header_row()),
                        html.Tbody(self.render_rows(data, pagination, loading)),
                    ],
                ),
            )
        )
        if pagination is not None and pagination.total_pages > 1:
            children.append(self.render_pagination(pagination, loading))
        return html.Div(className="data-table-container", children=children)

    def render_rows(
        self,
        data: Sequence[Row],
        pagination: Pagination | None = None,
        loading: bool = False,
    ) -> list[html.Tr]:
        """Return the body rows: skeletons, the no-data row, or data rows."""
        if loading:
            count = (pagination.page_size if pagination else 0) or DEFAULT_SKELETON_ROWS
            return [self._skeleton_row(index) for index in range(count)]
        if not data:
            return [
                html.Tr(
                    className="no-data-row",
                    children=html.Td(
                        colSpan=self.column_span,
                        className="no-data",
                        children=[
                            DashIconify(icon="lucide:search", className="no-data-icon"),
                            html.P(self.no_data_message),
                        ],
                    ),
                )
            ]
        return [self._data_row(index, row) for index, row in enumerate(data)]

    def render_search(self) -> html.Div:
        """Build the search box; empty when no on_search handler is set."""
        if self.on_search is None:
            return html.Div()
        return html.Div(
            className="input-with-icon table-search",
            children=[
                DashIconify(icon="lucide:search", className="input-icon"),
                dcc.Input(
                    id={"type": "table-search", "table": self.table_id, "index": 0},
                    type="text",
                    value=self.search_term,
                    placeholder=self.search_placeholder,
                    className="search-input",
                    debounce=True,
                ),
            ],
        )

    def render_pagination(self, pagination: Pagination, loading: bool = False) -> html.Div:
        page_buttons: list[Any] = [
            html.Button(
                str(page),
                id={"type": "table-page", "table": self.table_id, "page": page},
                className="button page-button"
                + (" active" if page == pagination.current_page else ""),
                disabled=loading,
                n_clicks=0,
            )
            for page in page_window(pagination.current_page, pagination.total_pages)
        ]
        if show_ellipsis(pagination.total_pages):
            page_buttons.append(html.Span("...", className="page-ellipsis"))

        children: list[Any] = [
            html.Div(pagination.summary(), className="muted pagination-summary"),
            html.Div(
                className="pagination-controls",
                children=[
                    html.Button(
                        [DashIconify(icon="lucide:chevron-left"), "Previous"],
                        id={"type": "table-nav", "table": self.table_id, "direction": "prev"},
                        className="button outline",
                        disabled=not pagination.has_previous(loading),
                        n_clicks=0,
                    ),
                    html.Div(className="page-numbers", children=page_buttons),
                    html.Button(
                        ["Next", DashIconify(icon="lucide:chevron-right")],
                        id={"type": "table-nav", "table": self.table_id, "direction": "next"},
                        className="button outline",
                        disabled=not pagination.has_next(loading),
                        n_clicks=0,
                    ),
                ],
            ),
        ]
        if pagination.on_page_size_change is not None:
            children.append(
                html.Div(
                    className="page-size",
                    children=[
                        html.Span("Items per page:"),
                        dcc.Dropdown(
                            id={"type": "table-page-size", "table": self.table_id, "index": 0},
                            options=[{"label": str(n), "value": n} for n in PAGE_SIZE_OPTIONS],
                            value=pagination.page_size,
                            clearable=False,
                            disabled=loading,
                            className="page-size-select",
                        ),
                    ],
                )
            )
        return html.Div(className="pagination", children=children)

    def _header_row(self) -> html.Tr:
        cells = []
        for column in self.columns:
            label: list[Any] = [html.Span(column.header)]
            class_name = f"align-{column.align}"
            if column.sortable:
                label.append(self._sort_icon(column))
                class_name += " sortable"
                cells.append(
                    html.Th(
                        html.Button(
                            label,
                            id={"type": "table-sort", "table": self.table_id, "column": column.key},
                            className="sort-button",
                            n_clicks=0,
                        ),
                        className=class_name,
                    )
                )
            else:
                cells.append(html.Th(label, className=class_name))
        if self.has_actions:
            cells.append(html.Th("Actions", className="align-right"))
        return html.Tr(cells)

    def _sort_icon(self, column: Column) -> DashIconify:
        if self.sort_state.key != column.key:
            return DashIconify(icon="lucide:arrow-up-down", className="sort-icon")
        icon = "lucide:arrow-up" if self.sort_state.direction == ASC else "lucide:arrow-down"
        return DashIconify(icon=icon, className="sort-icon active")

    def _skeleton_row(self, index: int) -> html.Tr:
        cells = [html.Td(html.Div(className="skeleton")) for _ in self.columns]
        if self.has_actions:
            cells.append(html.Td(html.Div(className="skeleton skeleton-icon")))
        return html.Tr(cells, key=f"skeleton-{index}", className="skeleton-row")

    def _data_row(self, index: int, row: Row) -> html.Tr:
        cells: list[Any] = [
            html.Td(column.cell(row), className=f"align-{column.align}")
            for column in self.columns
        ]
        if self.has_actions:
            cells.append(html.Td(self._action_menu(index, row), className="align-right"))
        return html.Tr(
            cells,
            id={"type": "table-row", "table": self.table_id, "row": index},
            className="data-row" + (" clickable" if self.on_row_click else ""),
            n_clicks=0,
        )

    def _action_menu(self, index: int, row: Row) -> html.Details:
        items = [
            html.Button(
                _labelled(action.label, action.icon),
                id={
                    "type": "table-action",
                    "table": self.table_id,
                    "row": index,
                    "action": action_index,
                },
                className=f"menu-item {action.variant}",
                n_clicks=0,
            )
            for action_index, action in enumerate(self.actions_for(row))
        ]
        return html.Details(
            className="action-menu",
            children=[
                html.Summary(DashIconify(icon="lucide:ellipsis"), className="button ghost"),
                html.Div(items, className="menu-content"),
            ],
        )


def _labelled(label: str, icon: str | None) -> list[Any]:
    if not icon:
        return [label]
    return [DashIconify(icon=icon, className="menu-icon"), label]
