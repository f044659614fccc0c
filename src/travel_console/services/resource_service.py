"""
Abstract base class defining the list-resource data access contract.

Every admin list page (approvals, contracts, bank balances, documents,
budgets) reads through this contract. Sorting, searching and paging are
done by the source so the table component stays a renderer.

Implementations:
- DemoResourceService: Static in-memory data for development/testing
- ResourceServiceImpl: REST API backed service (httpx)
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from travel_console.models.approval import ApprovalDecision
from travel_console.models.common import ResourcePage


class ResourceService(ABC):
    """Contract for paginated, searchable, sortable resource lists."""

    @abstractmethod
    def list_records(
        self,
        resource: str,
        query: str | None = None,
        page: int = 1,
        page_size: int = 10,
        sort_key: str | None = None,
        sort_direction: str = "asc",
        filters: Mapping[str, Any] | None = None,
    ) -> ResourcePage:
        """
        Return one page of records for a resource.

        Args:
            resource: Resource key, e.g. "contracts".
            query: Free text search term.
            page: Page number (1-indexed).
            page_size: Number of items per page.
            sort_key: Field to order by, None for source order.
            sort_direction: "asc" or "desc".
            filters: Exact-match field filters (e.g. {"status": "Pending"}).
        """

    @abstractmethod
    def get_record(self, resource: str, record_id: str) -> Mapping[str, Any] | None:
        """Return a single record, or None when it does not exist."""

    def decide_approval(
        self, approval_id: str, decision: ApprovalDecision, notes: str = ""
    ) -> Mapping[str, Any]:
        """
        Approve or reject an approval step.

        Default implementation rejects the call; services that back the
        approvals page override it.
        """
        raise NotImplementedError("Approval decisions are not supported by this service")
