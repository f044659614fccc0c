"""Approval request models used by the approvals page."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class ApprovalStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    SKIPPED = "Skipped"


_STATUS_VALUES = frozenset(status.value for status in ApprovalStatus)


class ApprovalDecision(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"


@dataclass(slots=True)
class ApprovalRequest:
    """
    One step of a multi-step approval workflow awaiting a decision.

    Attributes:
        request_id: Id of the underlying request (task, financial, client...).
        request_type: Kind of request, e.g. "Financial".
        status: Current step status. Labels outside ApprovalStatus (other
            casings, localized labels) are kept verbatim so they never read as
            pending.
        required_role: Role allowed to decide this step.
        step_name: Human readable step label.
        creator_name: Who raised the request.
        request_notes: Free text notes.
        created_at: ISO timestamp.
        step_level: 1-based position of the step in the workflow.
        request_code: Short human reference, e.g. "FIN-0042".
    """

    request_id: str
    request_type: str
    status: ApprovalStatus | str
    required_role: str = ""
    step_name: str = ""
    creator_name: str = ""
    request_notes: str = ""
    created_at: str = ""
    step_level: int = 1
    request_code: str = ""

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "ApprovalRequest":
        status = payload.get("status") or ""
        if isinstance(status, str) and status in _STATUS_VALUES:
            status = ApprovalStatus(status)
        return cls(
            request_id=str(payload.get("request_id") or payload.get("id") or ""),
            request_type=payload.get("request_type") or "",
            status=status,
            required_role=payload.get("required_role") or "",
            step_name=payload.get("step_name") or "",
            creator_name=payload.get("creator_name") or "",
            request_notes=payload.get("request_notes") or "",
            created_at=payload.get("created_at") or "",
            step_level=int(payload.get("step_level") or 1),
            request_code=payload.get("request_code") or "",
        )
