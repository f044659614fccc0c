"""Tests for the generic data table component."""

import pytest
from dash import html

from travel_console.components.data_table import (
    DEFAULT_SKELETON_ROWS,
    Action,
    Column,
    DataTable,
    Pagination,
    SortState,
    page_window,
    show_ellipsis,
)

ROWS = [
    {"id": 1, "name": "Babylon", "amount": 10.0},
    {"id": 2, "name": "Erbil", "amount": 20.0},
]

COLUMNS = [
    Column("name", "Name", sortable=True),
    Column("amount", "Amount", render=lambda value, row: f"${value:.2f}", align="right"),
]


def _table(**kwargs) -> DataTable:
    return DataTable("test", COLUMNS, **kwargs)


def _cells(row: html.Tr) -> list:
    return row.children if isinstance(row.children, list) else [row.children]


class TestRenderRows:
    """Loading, empty and data states of the table body."""

    def test_loading_renders_page_size_skeletons(self):
        """Loading shows one skeleton row per page slot even with data."""
        pagination = Pagination.from_total(1, 10, 40)
        rows = _table().render_rows(ROWS, pagination, loading=True)
        assert len(rows) == 10
        assert all(row.className == "skeleton-row" for row in rows)

    def test_loading_without_pagination_uses_default(self):
        """Without pagination the default skeleton count is used."""
        rows = _table().render_rows(ROWS, loading=True)
        assert len(rows) == DEFAULT_SKELETON_ROWS == 5

    def test_no_data_renders_single_spanning_row(self):
        """Empty data renders one row whose cell spans every column."""
        rows = _table(no_data_message="Nothing here").render_rows([])
        assert len(rows) == 1
        cell = rows[0].children
        assert cell.colSpan == len(COLUMNS)
        assert "Nothing here" in str(cell.children)

    def test_no_data_span_includes_actions_column(self):
        """The actions column counts toward the span when actions exist."""
        table = _table(actions=[Action("View", on_click=lambda row: None)])
        cell = table.render_rows([])[0].children
        assert cell.colSpan == len(COLUMNS) + 1

    def test_data_rows_use_column_renderers(self):
        """Cells use render(value, row) when given, raw values otherwise."""
        rows = _table().render_rows(ROWS)
        assert len(rows) == 2
        cells = _cells(rows[0])
        assert cells[0].children == "Babylon"
        assert cells[1].children == "$10.00"

    def test_row_ids_carry_table_and_index(self):
        rows = _table().render_rows(ROWS)
        assert rows[1].id == {"type": "table-row", "table": "test", "row": 1}


class TestRender:
    """Full table rendering."""

    def test_pagination_hidden_for_single_page(self):
        """The pagination bar only shows with more than one page."""
        single = _table().render(ROWS, Pagination.from_total(1, 10, 2))
        multi = _table().render(ROWS, Pagination.from_total(1, 1, 2))
        assert "pagination" not in str(single)
        assert "Showing 1 to 1 of 2 results" in str(multi)

    def test_search_box_only_with_handler(self):
        """The search input is rendered only when on_search is supplied."""
        assert "table-search" not in str(_table().render(ROWS))
        assert "table-search" in str(_table(on_search=lambda term: None).render(ROWS))

    def test_search_box_can_be_left_out(self):
        table = _table(on_search=lambda term: None)
        assert "table-search" not in str(table.render(ROWS, include_search=False))


class TestSort:
    """Sort toggling; the component never reorders data."""

    def test_same_column_toggles_asc_desc(self):
        calls = []
        table = _table(on_sort=lambda key, direction: calls.append((key, direction)))
        table.sort("name")
        table.sort("name")
        table.sort("name")
        assert calls == [("name", "asc"), ("name", "desc"), ("name", "asc")]

    def test_other_column_resets_to_asc(self):
        columns = [Column("name", "Name", sortable=True), Column("city", "City", sortable=True)]
        calls = []
        table = DataTable(
            "test",
            columns,
            on_sort=lambda key, direction: calls.append((key, direction)),
            sort_state=SortState("name", "desc"),
        )
        table.sort("city")
        assert calls == [("city", "asc")]

    def test_non_sortable_column_is_ignored(self):
        calls = []
        table = _table(on_sort=lambda key, direction: calls.append(key))
        assert table.sort("amount") is None
        assert table.sort("missing") is None
        assert calls == []

    def test_active_column_shows_direction_icon(self):
        table = _table(sort_state=SortState("name", "desc"))
        header = str(table.render(ROWS))
        assert "lucide:arrow-down" in header


class TestPaginate:
    """Page changes stay within bounds."""

    @pytest.mark.parametrize("page", [0, -1, 5, 100])
    def test_out_of_range_pages_are_dropped(self, page):
        pages = []
        pagination = Pagination.from_total(2, 10, 40, on_page_change=pages.append)
        assert _table().paginate(pagination, page) is False
        assert pages == []

    def test_valid_page_is_forwarded(self):
        pages = []
        pagination = Pagination.from_total(2, 10, 40, on_page_change=pages.append)
        assert _table().paginate(pagination, 4) is True
        assert pages == [4]

    def test_previous_and_next_respect_edges(self):
        pages = []
        first = Pagination.from_total(1, 10, 20, on_page_change=pages.append)
        last = Pagination.from_total(2, 10, 20, on_page_change=pages.append)
        table = _table()
        assert table.previous(first) is False
        assert table.next(last) is False
        assert table.next(first) is True
        assert table.previous(last) is True
        assert pages == [2, 1]

    def test_loading_blocks_navigation(self):
        pages = []
        pagination = Pagination.from_total(2, 10, 40, on_page_change=pages.append)
        table = _table()
        assert table.next(pagination, loading=True) is False
        assert table.previous(pagination, loading=True) is False
        assert pages == []

    def test_page_size_change_is_forwarded(self):
        sizes = []
        pagination = Pagination.from_total(3, 10, 40, on_page_size_change=sizes.append)
        table = _table()
        assert table.change_page_size(pagination, 25) is True
        assert table.change_page_size(pagination, 10) is False
        assert sizes == [25]

    def test_summary_text(self):
        assert Pagination.from_total(3, 10, 25).summary() == "Showing 21 to 25 of 25 results"
        assert Pagination.from_total(1, 10, 0).summary() == "Showing 0 to 0 of 0 results"


class TestPageWindow:
    """Sliding window of page buttons."""

    @pytest.mark.parametrize(
        ("current", "total", "expected"),
        [
            (1, 10, [1, 2, 3, 4, 5]),
            (3, 10, [1, 2, 3, 4, 5]),
            (5, 10, [3, 4, 5, 6, 7]),
            (8, 10, [6, 7, 8, 9, 10]),
            (10, 10, [6, 7, 8, 9, 10]),
            (2, 3, [1, 2, 3]),
            (1, 0, []),
        ],
    )
    def test_window(self, current, total, expected):
        assert page_window(current, total) == expected

    def test_window_never_leaves_bounds(self):
        for total in range(1, 12):
            for current in range(1, total + 1):
                window = page_window(current, total)
                assert len(window) == min(5, total)
                assert window[0] >= 1 and window[-1] <= total
                assert current in window

    def test_ellipsis_only_when_truncated(self):
        assert show_ellipsis(6) is True
        assert show_ellipsis(5) is False


class TestClick:
    """Row and action clicks."""

    def test_action_click_suppresses_row_click(self):
        rows_clicked, viewed = [], []
        table = _table(
            actions=[Action("View", on_click=viewed.append)],
            on_row_click=rows_clicked.append,
        )
        assert table.click(ROWS[0], action_index=0) is True
        assert viewed == [ROWS[0]]
        assert rows_clicked == []

    def test_row_click_calls_handler(self):
        rows_clicked = []
        table = _table(on_row_click=rows_clicked.append)
        assert table.click(ROWS[1]) is True
        assert rows_clicked == [ROWS[1]]

    def test_hidden_actions_are_skipped(self):
        approved = []
        actions = [
            Action("Approve", on_click=approved.append, hidden=lambda row: row["id"] == 1),
            Action("Delete", on_click=lambda row: None, variant="destructive"),
        ]
        table = _table(actions=actions)
        assert [a.label for a in table.actions_for(ROWS[0])] == ["Delete"]
        assert [a.label for a in table.actions_for(ROWS[1])] == ["Approve", "Delete"]
        table.click(ROWS[0], action_index=0)
        assert approved == []

    def test_per_row_action_factory(self):
        table = _table(actions=lambda row: [Action(f"Open {row['id']}", on_click=lambda r: None)])
        assert table.has_actions
        assert table.actions_for(ROWS[1])[0].label == "Open 2"

    def test_search_forwards_raw_term(self):
        terms = []
        table = _table(on_search=terms.append)
        table.search("  Erbil ")
        assert terms == ["  Erbil "]
        assert table.search_term == "  Erbil "
