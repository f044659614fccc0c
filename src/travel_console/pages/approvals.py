"""
Approvals page.

Lists approval steps with a per-row menu. "View" is always offered;
"Approve" and "Reject" appear only for pending steps the current user may
decide. A decision goes straight to the ResourceService, then the cached
approvals pages are dropped so the next load reflects it.
"""

from typing import Any, Mapping, Sequence

from travel_console.components.data_table import Action, Column, Row
from travel_console.lib import logs
from travel_console.models.approval import ApprovalDecision, ApprovalRequest, ApprovalStatus
from travel_console.models.common import CurrentUser
from travel_console.pages.resources import date, status_badge
from travel_console.pages.tables import FilterField, ResourceDefinition, ResourceTable
from travel_console.permissions import ApprovalPolicy, approval_actions, can_approve
from travel_console.services.api import ApiError
from travel_console.services.repository import ResourceRepository
from travel_console.services.resource_service import ResourceService
from travel_console.state import TableQuery

LOG = logs.logger(__file__)


def _step(value: Any, row: Mapping[str, Any]) -> str:
    return f"{value} (step {row.get('step_level') or 1})"


APPROVALS = ResourceDefinition(
    key="approvals",
    title="Approvals",
    path="/approvals",
    description="Requests waiting for a decision at each workflow step.",
    columns=(
        Column("request_code", "Request", sortable=True),
        Column("request_type", "Type", sortable=True),
        Column("step_name", "Step", render=_step),
        Column("creator_name", "Requested by", sortable=True),
        Column("created_at", "Created", render=date, sortable=True),
        Column("status", "Status", render=status_badge, align="center"),
    ),
    filters=(
        FilterField("status", "Status", tuple(status.value for status in ApprovalStatus)),
        FilterField(
            "request_type",
            "Type",
            ("Financial", "Clients", "Tasks", "Employment", "Projects"),
        ),
    ),
    no_data_message="No approvals found",
)


class ApprovalsTable(ResourceTable):
    """
    Approvals list with permission-gated decisions.

    Attributes:
        user: Acting user, or None when nobody is signed in.
        service: Service receiving decisions.
        policy: Permission check, injectable for tests.
    """

    def __init__(
        self,
        repository: ResourceRepository,
        service: ResourceService,
        user: CurrentUser | None,
        query: TableQuery | None = None,
        policy: ApprovalPolicy = can_approve,
    ) -> None:
        super().__init__(APPROVALS, repository, query)
        self.service = service
        self.user = user
        self.policy = policy

    def row_actions(self, row: Row) -> Sequence[Action]:
        return approval_actions(
            self.user, row, self.view, self.approve, self.reject, policy=self.policy
        )

    def approve(self, row: Row) -> None:
        self._decide(row, ApprovalDecision.APPROVE)

    def reject(self, row: Row) -> None:
        self._decide(row, ApprovalDecision.REJECT)

    def _decide(self, row: Row, decision: ApprovalDecision) -> None:
        request = ApprovalRequest.from_api(row)
        label = request.request_code or request.request_id
        if not self.policy(self.user, request.required_role, request.status):
            self.notify(f"You cannot decide {label}", "error")
            return
        try:
            self.service.decide_approval(str(row.get("id")), decision)
        except ApiError as exc:
            LOG.warning("Approval decision failed - id:%s error:%s", row.get("id"), exc)
            self.notify(str(exc), "error")
            return
        self.repository.clear()
        verb = "approved" if decision == ApprovalDecision.APPROVE else "rejected"
        self.notify(f"{label} {verb}", "success")
        LOG.info("Approval %s %s by %s", row.get("id"), verb, self.user.name if self.user else "")
