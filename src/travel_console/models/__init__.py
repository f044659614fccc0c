"""
Data models and serialization helpers for the Travel Console.

This package provides:
- Common list models (ResourcePage, CurrentUser)
- Notification models and the read/unread working set
- Approval request models

All models use Python dataclasses and expose to_dict/from_dict for
dcc.Store compatibility.
"""

from travel_console.models.approval import (
    ApprovalDecision,
    ApprovalRequest,
    ApprovalStatus,
)
from travel_console.models.common import CurrentUser, ResourcePage
from travel_console.models.notification import (
    Notification,
    NotificationCounts,
    NotificationFeed,
    NotificationTab,
)

__all__ = [
    "ApprovalDecision",
    "ApprovalRequest",
    "ApprovalStatus",
    "CurrentUser",
    "Notification",
    "NotificationCounts",
    "NotificationFeed",
    "NotificationTab",
    "ResourcePage",
]
