"""
Demo implementation of ResourceService using static in-memory data.

Filtering, sorting and paging mirror what the backend does so pages can
be exercised end to end without a server.
"""

import copy
from typing import Any, Mapping, Sequence

from travel_console.data.demo_resources import DEMO_RESOURCES
from travel_console.lib import logs
from travel_console.models.approval import ApprovalDecision, ApprovalStatus
from travel_console.models.common import ResourcePage
from travel_console.services.api import ApiError
from travel_console.services.resource_service import ResourceService
from travel_console.utils import matches_filters, matches_query, sort_records

LOG = logs.logger(__file__)

_DECISION_STATUS = {
    ApprovalDecision.APPROVE: ApprovalStatus.APPROVED,
    ApprovalDecision.REJECT: ApprovalStatus.REJECTED,
}


class DemoResourceService(ResourceService):
    """
    In-memory resource service backed by the demo fixtures.

    Searching matches every string-valued field of a record.
    """

    def __init__(self, resources: Mapping[str, Sequence[dict]] | None = None) -> None:
        """
        Args:
            resources: Records keyed by resource, or None for DEMO_RESOURCES.
        """
        source = DEMO_RESOURCES if resources is None else resources
        self._resources: dict[str, list[dict]] = {
            key: copy.deepcopy(list(records)) for key, records in source.items()
        }

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
        page, page_size = max(page, 1), max(page_size, 1)
        records = self._records(resource)
        matched = [
            record
            for record in records
            if matches_query(record, query, _text_fields(record))
            and matches_filters(record, filters)
        ]
        ordered = sort_records(matched, sort_key, sort_direction)
        start = (page - 1) * page_size
        items = [dict(record) for record in ordered[start : start + page_size]]
        return ResourcePage(items=items, total=len(ordered), page=page, page_size=page_size)

    def get_record(self, resource: str, record_id: str) -> Mapping[str, Any] | None:
        for record in self._records(resource):
            if str(record.get("id")) == str(record_id):
                return dict(record)
        return None

    def decide_approval(
        self, approval_id: str, decision: ApprovalDecision, notes: str = ""
    ) -> Mapping[str, Any]:
        for record in self._records("approvals"):
            if str(record.get("id")) != str(approval_id):
                continue
            if record.get("status") != ApprovalStatus.PENDING.value:
                raise ApiError(f"Approval {approval_id} is no longer pending", 409)
            record["status"] = _DECISION_STATUS[ApprovalDecision(decision)].value
            if notes:
                record["remarks"] = notes
            LOG.info("Demo approval %s -> %s", approval_id, record["status"])
            return dict(record)
        raise ApiError(f"Approval not found: {approval_id}", status_code=404)

    def _records(self, resource: str) -> list[dict]:
        try:
            return self._resources[resource]
        except KeyError as exc:
            raise ApiError(f"Unknown resource: {resource}", status_code=404) from exc


def _text_fields(record: Mapping[str, Any]) -> list[str]:
    return [key for key, value in record.items() if isinstance(value, str)]
