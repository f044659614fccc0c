"""
Role checks for approval actions.

These checks only decide which buttons the console offers; the backend
validates every decision again.
"""

from typing import Any, Callable, Iterable, Mapping

from travel_console.components.data_table import Action
from travel_console.models.approval import ApprovalRequest, ApprovalStatus
from travel_console.models.common import CurrentUser

ApprovalPolicy = Callable[[CurrentUser | None, str | None, str | None], bool]

_ROLE_ALIASES: dict[str, tuple[str, ...]] = {
    "contracts": ("contracts", "contract", "general"),
    "financial": ("financial", "finance", "accounting"),
    "general": ("general", "administrator", "admin"),
}


def can_approve(
    user: CurrentUser | None,
    required_role: str | None,
    status: str | None,
) -> bool:
    """
    Return True when the user may approve or reject an approval step.

    Only steps whose status is exactly "Pending" can be decided; a missing
    or unrecognised status is refused. Without a required role any signed-in
    user qualifies. Role matching is case-insensitive and accepts partial
    matches ("Administrator" satisfies "Admin") plus the aliases above.
    """
    if user is None:
        return False
    if status != ApprovalStatus.PENDING.value:
        return False
    if not required_role:
        return True

    user_role = (user.role or "").lower()
    required = required_role.lower()
    if not user_role:
        return False
    if user_role == required:
        return True
    if user_role in required or required in user_role:
        return True
    return any(alias in user_role for alias in _ROLE_ALIASES.get(required, ()))


def has_role(user: CurrentUser | None, role: str) -> bool:
    if not user or not user.role:
        return False
    return user.role.lower() == role.lower()


def has_any_role(user: CurrentUser | None, roles: Iterable[str]) -> bool:
    return any(has_role(user, role) for role in roles)


def approval_actions(
    user: CurrentUser | None,
    row: Mapping[str, Any],
    on_view: Callable[[Mapping[str, Any]], Any],
    on_approve: Callable[[Mapping[str, Any]], Any],
    on_reject: Callable[[Mapping[str, Any]], Any],
    policy: ApprovalPolicy = can_approve,
) -> list[Action]:
    """
    Build the action menu for one approval row.

    "View" is always offered; "Approve" and "Reject" only when the injected
    policy accepts the user for this row.
    """
    request = ApprovalRequest.from_api(row)
    actions = [Action(label="View", on_click=on_view, icon="lucide:eye")]
    if policy(user, request.required_role, request.status):
        actions.append(
            Action(
                label="Approve",
                on_click=on_approve,
                icon="lucide:check",
                variant="success",
            )
        )
        actions.append(
            Action(
                label="Reject",
                on_click=on_reject,
                icon="lucide:x",
                variant="destructive",
            )
        )
    return actions
