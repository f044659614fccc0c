"""
REST-backed implementation of ResourceService.

Each resource maps to a fetch endpoint and the key under which the list
arrives in the response body, e.g. ``GET /documents/fetch`` answers with
``body.documents = {total, pages, items}``. List endpoints take ``page``,
``limit``, ``search``, ``sort_by``, ``sort_dir`` plus any filter fields as
query parameters.
"""

from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from travel_console.lib import clients, logs
from travel_console.models.approval import ApprovalDecision, ApprovalStatus
from travel_console.models.common import ResourcePage
from travel_console.services import api
from travel_console.services.resource_service import ResourceService

LOG = logs.logger(__file__)


@dataclass(frozen=True)
class Endpoint:
    """
    Remote locations for one resource.

    Attributes:
        list_path: GET path returning the paginated list.
        list_key: Body key holding ``{total, pages, items}``.
        detail_path: GET path (with ``{id}``) returning one record.
        detail_key: Body key holding the single record.
    """

    list_path: str
    list_key: str
    detail_path: str
    detail_key: str


ENDPOINTS: dict[str, Endpoint] = {
    "approvals": Endpoint(
        "/approvals/pending", "approvals", "/approvals/fetch/{id}", "approval"
    ),
    "contracts": Endpoint(
        "/client-contracts/fetch",
        "contracts",
        "/client-contracts/fetch/contract/{id}",
        "contract",
    ),
    "bank-balances": Endpoint(
        "/bank-balances/fetch",
        "balances",
        "/bank-balances/fetch/balance/{id}",
        "balance",
    ),
    "documents": Endpoint(
        "/documents/fetch", "documents", "/documents/fetch/document/{id}", "document"
    ),
    "budgets": Endpoint(
        "/projects/fetch/budgets", "budgets", "/projects/fetch/budgets/{id}", "budget"
    ),
}

APPROVAL_UPDATE_PATH = "/approvals/update/{id}"

_DECISION_STATUS = {
    ApprovalDecision.APPROVE: ApprovalStatus.APPROVED,
    ApprovalDecision.REJECT: ApprovalStatus.REJECTED,
}


class ResourceServiceImpl(ResourceService):
    """
    Resource service talking to the remote API over httpx.

    Attributes:
        client: httpx.Client with base URL and auth already configured.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        endpoints: Mapping[str, Endpoint] | None = None,
    ) -> None:
        self.client = client or clients.api_client()
        self.endpoints = dict(endpoints or ENDPOINTS)

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
        endpoint = self._endpoint(resource)
        page, page_size = max(page, 1), max(page_size, 1)
        params: dict[str, Any] = {"page": page, "limit": page_size}
        if query and query.strip():
            params["search"] = query.strip()
        if sort_key:
            params["sort_by"] = sort_key
            params["sort_dir"] = sort_direction
        for key, value in (filters or {}).items():
            if value not in (None, ""):
                params[key] = value

        response = api.request(
            self.client,
            "GET",
            endpoint.list_path,
            f"Failed to fetch {resource}",
            params=params,
        )
        node = response.get(endpoint.list_key, {}) or {}
        items = [dict(item) for item in node.get("items") or []]
        LOG.info(
            "Fetched %s - page:%s size:%s total:%s",
            resource,
            page,
            page_size,
            node.get("total"),
        )
        return ResourcePage(
            items=items,
            total=int(node.get("total") or len(items)),
            page=page,
            page_size=page_size,
            pages=int(node.get("pages") or 0),
        )

    def get_record(self, resource: str, record_id: str) -> Mapping[str, Any] | None:
        endpoint = self._endpoint(resource)
        try:
            response = api.request(
                self.client,
                "GET",
                endpoint.detail_path.format(id=record_id),
                f"Failed to fetch {resource} record",
            )
        except api.ApiError as exc:
            if exc.status_code == 404:
                return None
            raise
        record = response.get(endpoint.detail_key)
        return dict(record) if record else None

    def decide_approval(
        self, approval_id: str, decision: ApprovalDecision, notes: str = ""
    ) -> Mapping[str, Any]:
        status = _DECISION_STATUS[ApprovalDecision(decision)]
        response = api.request(
            self.client,
            "PUT",
            APPROVAL_UPDATE_PATH.format(id=approval_id),
            "Failed to update approval",
            json={"status": status.value, "remarks": notes},
        )
        return dict(response.get("approval") or {"id": approval_id, "status": status.value})

    def _endpoint(self, resource: str) -> Endpoint:
        try:
            return self.endpoints[resource]
        except KeyError as exc:
            raise ValueError(f"Unknown resource: {resource}") from exc
