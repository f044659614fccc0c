"""
Common models shared by every list page of the console.

This module defines:

- ResourcePage: one page of records returned by a list endpoint
- CurrentUser: the acting user used by permission checks

Models include to_dict/from_dict methods for JSON serialization
required by Dash's dcc.Store component.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence


@dataclass
class ResourcePage:
    """
    Represents a single page of records from a list endpoint.

    The remote contract is ``{items, total, page, pages}``; ``pages`` is
    derived when the source leaves it out.

    Attributes:
        items: Records on this page (plain mappings).
        total: Total number of records across all pages.
        page: Page number (1-indexed).
        page_size: Requested page size.
        pages: Total number of pages.
    """

    items: Sequence[Mapping[str, Any]] = field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 10
    pages: int = 0

    def __post_init__(self) -> None:
        if not self.pages and self.page_size > 0:
            self.pages = math.ceil(self.total / self.page_size)

    def find(self, record_id: Any, id_field: str = "id") -> Mapping[str, Any] | None:
        """Return the record on this page whose id field matches, if any."""
        for item in self.items:
            if str(item.get(id_field)) == str(record_id):
                return item
        return None

    def to_dict(self) -> dict:
        return {
            "items": [dict(item) for item in self.items],
            "total": self.total,
            "page": self.page,
            "page_size": self.page_size,
            "pages": self.pages,
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "ResourcePage":
        if not data:
            return cls()
        return cls(
            items=list(data.get("items") or []),
            total=int(data.get("total") or 0),
            page=int(data.get("page") or 1),
            page_size=int(data.get("page_size") or 10),
            pages=int(data.get("pages") or 0),
        )


@dataclass
class CurrentUser:
    """
    The user acting in the console.

    Attributes:
        name: Display name.
        role: Role name as issued by the backend (e.g. "Financial").
    """

    name: str = ""
    role: str = ""

    def to_dict(self) -> dict:
        return {"name": self.name, "role": self.role}

    @classmethod
    def from_dict(cls, data: dict | None) -> "CurrentUser | None":
        if not data:
            return None
        return cls(name=data.get("name", ""), role=data.get("role", ""))
