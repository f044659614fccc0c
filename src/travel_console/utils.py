"""
Utility functions for record formatting, matching and ordering.

Provides helpers for:
- Date parsing (ISO and m/d/y formats)
- Currency formatting
- Relative "time ago" labels for notifications
- Search query matching and sorting used by the demo services
"""

from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Sequence


def parse_date(date_str: str | None) -> datetime | None:
    """
    Parse an ISO or m/d/y date string to a datetime object.

    Args:
        date_str: Date string such as "2025-03-01T10:15:00Z" or "12/25/2024".

    Returns:
        datetime object if parsing succeeds, None otherwise
    """
    if date_str:
        date_str = date_str.strip()
    if not date_str:
        return None

    # Python < 3.11 rejects a trailing "Z"
    iso = date_str[:-1] + "+00:00" if date_str.endswith("Z") else date_str
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass

    for fmt in ("%m/%d/%Y", "%m/%d/%y"):
        try:
            return datetime.strptime(date_str, fmt)
        except ValueError:
            pass

    return None


def format_currency(value: float, currency: str) -> str:
    """
    Format a currency amount with the currency code prefix.

    Args:
        value: Numeric amount to format.
        currency: Currency code (e.g., 'USD', 'IQD').

    Returns:
        Formatted string like 'USD 1,234.56'.
    """
    return f"{currency} {value:,.2f}"


def time_ago(value: str | datetime | None, now: datetime | None = None) -> str:
    """
    Return a compact relative label ("45s ago", "3h ago", "12d ago").

    Anything older than 30 days is shown as a short date ("05 Mar").

    Args:
        value: Timestamp as ISO string or datetime.
        now: Reference time, defaults to the current UTC time.
    """
    moment = parse_date(value) if isinstance(value, str) else value
    if moment is None:
        return ""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = max(int((now - moment).total_seconds()), 0)
    if seconds < 60:
        return f"{seconds}s ago"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    days = hours // 24
    if days < 30:
        return f"{days}d ago"
    return moment.strftime("%d %b")


def matches_query(
    record: Mapping[str, Any], query: str | None, fields: Iterable[str]
) -> bool:
    """
    Check if a record matches the search query.

    Performs case-insensitive substring matching against the given fields.

    Returns:
        True if query matches any field, or if query is empty.
    """
    normalized = (query or "").strip().lower()
    if not normalized:
        return True
    return any(
        normalized in str(record.get(field, "")).lower()
        for field in fields
        if record.get(field) is not None
    )


def matches_filters(record: Mapping[str, Any], filters: Mapping[str, Any] | None) -> bool:
    """Return True when every non-empty filter value equals the record field."""
    if not filters:
        return True
    return all(
        str(record.get(key, "")) == str(value)
        for key, value in filters.items()
        if value not in (None, "")
    )


def sort_records(
    records: Sequence[Mapping[str, Any]], key: str | None, direction: str = "asc"
) -> list[Mapping[str, Any]]:
    """
    Return records ordered by key; None values always sort last.

    The sort is stable, so equal keys keep their source order.
    """
    if not key:
        return list(records)
    present = [r for r in records if r.get(key) is not None]
    missing = [r for r in records if r.get(key) is None]
    present.sort(key=lambda r: _sort_value(r[key]), reverse=direction == "desc")
    return present + missing


def _sort_value(value: Any) -> Any:
    if isinstance(value, str):
        return value.lower()
    return value
