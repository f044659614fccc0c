"""
Reusable Dash UI components for the Travel Console.

This package provides:
- data_table: generic sortable, paginated table with row actions
- notifications_menu: header bell, badge, tabs and notification list

All components are pure functions or plain classes that return Dash
html/dcc elements, making them easy to test and compose.
"""

from travel_console.components.data_table import (
    Action,
    Column,
    DataTable,
    Pagination,
    SortState,
    page_window,
)
from travel_console.components.notifications_menu import (
    notification_badge,
    notifications_menu,
    notifications_panel,
)

__all__ = [
    "Action",
    "Column",
    "DataTable",
    "Pagination",
    "SortState",
    "notification_badge",
    "notifications_menu",
    "notifications_panel",
    "page_window",
]
