"""Definitions of the read-only resource list pages."""

from typing import Any, Mapping

from dash import html

from travel_console.components.data_table import Column
from travel_console.pages.tables import FilterField, ResourceDefinition
from travel_console.utils import format_currency, parse_date


def money(currency_key: str = "currency"):
    """Return a column renderer formatting the value in the row's currency."""

    def _render(value: Any, row: Mapping[str, Any]) -> str:
        if value is None:
            return ""
        return format_currency(float(value), row.get(currency_key) or "USD")

    return _render


def date(value: Any, row: Mapping[str, Any]) -> str:
    parsed = parse_date(value) if isinstance(value, str) else None
    return parsed.strftime("%b %d, %Y") if parsed else (value or "")


def status_badge(value: Any, row: Mapping[str, Any]) -> html.Span:
    label = str(value or "")
    return html.Span(label, className=f"status-badge {label.lower()}")


def _remaining(value: Any, row: Mapping[str, Any]) -> str:
    allocated = float(row.get("allocated") or 0)
    spent = float(row.get("spent") or 0)
    return format_currency(allocated - spent, row.get("currency") or "USD")


CONTRACTS = ResourceDefinition(
    key="contracts",
    title="Client Contracts",
    path="/contracts",
    description="Corporate client contracts and their validity.",
    columns=(
        Column("contract_number", "Contract #", sortable=True),
        Column("client_name", "Client", sortable=True),
        Column("start_date", "Start", render=date, sortable=True),
        Column("end_date", "End", render=date, sortable=True),
        Column("value", "Value", render=money(), sortable=True, align="right"),
        Column("status", "Status", render=status_badge, align="center"),
    ),
    filters=(FilterField("status", "Status", ("Active", "Expired", "Draft")),),
)

BANK_BALANCES = ResourceDefinition(
    key="bank-balances",
    title="Bank Balances",
    path="/bank-balances",
    columns=(
        Column("bank_name", "Bank", sortable=True),
        Column("account_number", "Account"),
        Column("currency", "Currency", sortable=True, align="center"),
        Column("balance", "Balance", render=money(), sortable=True, align="right"),
        Column("updated_at", "Updated", render=date, sortable=True),
    ),
    filters=(FilterField("currency", "Currency", ("USD", "IQD")),),
)

DOCUMENTS = ResourceDefinition(
    key="documents",
    title="Documents",
    path="/documents",
    columns=(
        Column("title", "Title", sortable=True),
        Column("document_type", "Type", sortable=True),
        Column("owner", "Owner"),
        Column("expiry_date", "Expires", render=date, sortable=True),
        Column("created_at", "Uploaded", render=date, sortable=True),
    ),
    filters=(FilterField("document_type", "Type", ("License", "Passport", "Contract")),),
)

BUDGETS = ResourceDefinition(
    key="budgets",
    title="Project Budgets",
    path="/budgets",
    searchable=False,
    columns=(
        Column("department", "Department", sortable=True),
        Column("fiscal_year", "Year", sortable=True, align="center"),
        Column("allocated", "Allocated", render=money(), sortable=True, align="right"),
        Column("spent", "Spent", render=money(), sortable=True, align="right"),
        Column("remaining", "Remaining", render=_remaining, align="right"),
    ),
)

RESOURCE_PAGES: dict[str, ResourceDefinition] = {
    definition.path: definition for definition in (CONTRACTS, BANK_BALANCES, DOCUMENTS, BUDGETS)
}
