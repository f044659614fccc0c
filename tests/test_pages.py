"""Tests for page controllers and Dash event routing."""

import json

import pytest

from conftest import RecordingNotificationService
from travel_console.models.common import CurrentUser
from travel_console.models.notification import NotificationFeed, NotificationTab
from travel_console.pages import render_page
from travel_console.pages.approvals import ApprovalsTable
from travel_console.pages.notifications import NotificationsPage
from travel_console.pages.resources import BUDGETS, CONTRACTS, money
from travel_console.pages.tables import ResourceTable, parse_prop_id, pick_event
from travel_console.services.repository import ResourceRepository
from travel_console.services.resource_service_demo import DemoResourceService
from travel_console.state import NotificationState, TableQuery


def _prop(component_id: dict, prop: str = "n_clicks") -> str:
    return json.dumps(component_id, sort_keys=True, separators=(",", ":")) + "." + prop


@pytest.fixture
def service():
    return DemoResourceService()


@pytest.fixture
def contracts(service, disk_cache):
    table = ResourceTable(
        CONTRACTS,
        ResourceRepository(service, "contracts", cache=disk_cache),
        TableQuery(page_size=2),
    )
    table.load()
    return table


@pytest.fixture
def approvals(service, disk_cache):
    def _build(user, query=None):
        table = ApprovalsTable(
            ResourceRepository(service, "approvals", cache=disk_cache),
            service,
            user,
            query or TableQuery(),
        )
        table.load()
        return table

    return _build


class TestTableQuery:
    def test_search_and_page_size_reset_page(self):
        query = TableQuery(page=4, page_size=10)
        assert query.with_search(" oil ").page == 1
        assert query.with_search(" oil ").query == "oil"
        assert query.with_page_size(25) == TableQuery(page=1, page_size=25)
        assert query.with_page(3).page == 3

    def test_filters_drop_empty_values(self):
        query = TableQuery(page=3).with_filters({"status": "Active", "type": None})
        assert query.filters == {"status": "Active"}
        assert query.page == 1

    def test_store_round_trip(self):
        query = TableQuery("oil", "client_name", "desc", 2, 25, {"status": "Active"})
        assert TableQuery.from_dict(query.to_dict()) == query
        assert TableQuery.from_dict(None) == TableQuery()


class TestPickEvent:
    def test_parses_pattern_ids(self):
        component = {"type": "table-sort", "table": "contracts", "column": "value"}
        assert parse_prop_id(_prop(component)) == component
        assert parse_prop_id("url.pathname") is None
        assert parse_prop_id(".") is None

    def test_ignores_fresh_buttons(self):
        triggered = [{"prop_id": _prop({"type": "table-page", "table": "t", "page": 2}), "value": 0}]
        assert pick_event(triggered) is None

    def test_action_wins_over_row(self):
        row = {"type": "table-row", "table": "t", "row": 0}
        action = {"type": "table-action", "table": "t", "row": 0, "action": 1}
        triggered = [
            {"prop_id": _prop(row), "value": 1},
            {"prop_id": _prop(action), "value": 1},
        ]
        assert pick_event(triggered) == (action, 1)

    def test_value_events_pass_through(self):
        search = {"type": "table-search", "table": "t", "index": 0}
        triggered = [{"prop_id": _prop(search, "value"), "value": ""}]
        assert pick_event(triggered) == (search, "")


class TestResourceTable:
    def test_sort_event_updates_query(self, contracts):
        assert contracts.handle({"type": "table-sort", "column": "client_name"}, 1) is True
        assert (contracts.query.sort_key, contracts.query.sort_direction) == ("client_name", "asc")
        contracts.load()
        assert contracts.page.items[0]["client_name"] == "Al Noor Telecom"

    def test_second_sort_click_descends(self, contracts):
        contracts.query = contracts.query.with_sort("client_name", "asc")
        contracts.handle({"type": "table-sort", "column": "client_name"}, 2)
        assert contracts.query.sort_direction == "desc"

    def test_page_events(self, contracts):
        assert contracts.handle({"type": "table-page", "page": 2}, 1) is True
        assert contracts.query.page == 2
        assert contracts.handle({"type": "table-page", "page": 3}, 1) is False
        contracts.load()
        assert contracts.handle({"type": "table-nav", "direction": "prev"}, 1) is True
        assert contracts.query.page == 1

    def test_page_size_resets_page(self, contracts):
        contracts.query = contracts.query.with_page(2)
        assert contracts.handle({"type": "table-page-size"}, 25) is True
        assert (contracts.query.page, contracts.query.page_size) == (1, 25)
        assert contracts.handle({"type": "table-page-size"}, 25) is False

    def test_search_and_filter(self, contracts):
        assert contracts.handle({"type": "table-search"}, "erbil") is True
        assert contracts.handle({"type": "table-search"}, "erbil") is False
        contracts.handle({"type": "table-filter", "field": "status"}, "Active")
        contracts.load()
        assert [r["id"] for r in contracts.page.items] == ["cc-18"]

    def test_row_click_opens_detail(self, contracts):
        assert contracts.handle({"type": "table-row", "row": 1}, 1) is True
        assert contracts.detail["id"] == "cc-18"
        assert "Details" in str(contracts.render_detail())
        assert contracts.handle({"type": "table-row", "row": 9}, 1) is False

    def test_layout_renders_first_page(self, contracts):
        layout = str(contracts.layout())
        assert "CC-2025-017" in layout
        assert "Showing 1 to 2 of 4 results" in layout

    def test_unsearchable_page_has_no_search_box(self, service, disk_cache):
        table = ResourceTable(BUDGETS, ResourceRepository(service, "budgets", cache=disk_cache))
        assert "table-search" not in str(table.layout())

    def test_money_renderer(self):
        assert money()(1500, {"currency": "IQD"}) == "IQD 1,500.00"
        assert money()(None, {}) == ""


class TestApprovalsTable:
    def test_actions_follow_permissions(self, approvals):
        table = approvals(CurrentUser("Sara", "Financial"))
        rows = {row["id"]: row for row in table.page.items}
        assert [a.label for a in table.row_actions(rows["ap-1"])] == ["View", "Approve", "Reject"]
        assert [a.label for a in table.row_actions(rows["ap-2"])] == ["View"]
        assert [a.label for a in table.row_actions(rows["ap-3"])] == ["View"]

    def test_approve_clears_cache_and_reloads(self, approvals, service):
        table = approvals(CurrentUser("Sara", "Financial"))
        index = [row["id"] for row in table.page.items].index("ap-1")
        assert table.handle({"type": "table-action", "row": index, "action": 1}, 1) is True
        assert table.message == "FIN-0042 approved"
        assert table.message_level == "success"
        table.load()
        assert table.page.find("ap-1")["status"] == "Approved"
        assert service.get_record("approvals", "ap-1")["status"] == "Approved"

    def test_reject_via_menu(self, approvals):
        table = approvals(CurrentUser("Omar", "Contracts"))
        index = [row["id"] for row in table.page.items].index("ap-2")
        table.handle({"type": "table-action", "row": index, "action": 2}, 1)
        assert table.message == "CLI-0107 rejected"

    def test_view_action(self, approvals):
        table = approvals(None)
        table.handle({"type": "table-action", "row": 0, "action": 0}, 1)
        assert table.detail["id"] == table.page.items[0]["id"]

    def test_direct_decision_without_permission_is_refused(self, approvals, service):
        table = approvals(CurrentUser("Guest", "Sales"))
        table.approve(table.page.find("ap-1"))
        assert table.message_level == "error"
        assert service.get_record("approvals", "ap-1")["status"] == "Pending"

    @pytest.mark.parametrize("status", [None, "pending", "Cancelled"])
    def test_unrecognised_status_is_not_submitted(self, approvals, service, status):
        table = approvals(CurrentUser("Sara", "Financial"))
        row = {**table.page.find("ap-1"), "status": status}
        table.approve(row)
        assert table.message_level == "error"
        assert service.get_record("approvals", "ap-1")["status"] == "Pending"

    def test_stale_decision_reports_error(self, approvals, service):
        table = approvals(CurrentUser("Sara", "Financial"))
        row = dict(table.page.find("ap-1"))
        service.decide_approval("ap-1", "approve")
        table.approve(row)
        assert table.message_level == "error"
        assert "no longer pending" in table.message


class TestNotificationsPage:
    def _page(self, feed, fail=False):
        service = RecordingNotificationService(fail=fail)
        return NotificationsPage(NotificationState(service, feed=feed)), service

    def test_tab_event(self, feed):
        page, _ = self._page(feed)
        assert page.handle({"type": "notification-tab", "tab": "unread"}) is True
        assert page.state.feed.tab == NotificationTab.UNREAD
        assert [row["id"] for row in page.rows()] == ["u1", "u2"]

    def test_menu_actions(self, feed):
        page, service = self._page(feed)
        page.handle({"type": "notification-action", "action": "read", "id": "u1"})
        page.handle({"type": "notification-action", "action": "delete", "id": "r1"})
        page.handle({"type": "notification-mark-all"})
        assert service.calls == [("mark_read", "u1"), ("delete", "r1"), ("mark_all_read", None)]
        assert page.state.feed.badge_label() == ""

    def test_table_actions_respect_hidden(self, feed):
        page, service = self._page(feed)
        rows = page.rows()
        read_index = [row["id"] for row in rows].index("r1")
        # Read rows offer "Mark as unread" first, then "Delete".
        page.handle({"type": "table-action", "table": "notifications", "row": read_index, "action": 0})
        assert service.calls == [("mark_unread", "r1")]

    def test_error_is_exposed(self, feed):
        page, _ = self._page(feed, fail=True)
        page.handle({"type": "notification-action", "action": "read", "id": "u1"})
        assert page.state.last_error

    def test_empty_tab_message(self):
        page, _ = self._page(NotificationFeed())
        assert "No notifications to show" in str(page.render_body())


class TestRenderPage:
    def test_routes(self, contracts, feed):
        factories = {CONTRACTS.path: lambda query: contracts}
        notifications = lambda: NotificationsPage(NotificationState(RecordingNotificationService(), feed))
        assert "Client Contracts" in str(render_page("/contracts/", factories, notifications))
        assert "notifications-page" in str(render_page("/notifications", factories, notifications))
        assert "Page not found" in str(render_page("/flights", factories, notifications))
