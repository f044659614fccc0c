"""Seed notifications for DemoNotificationService."""

DEMO_NOTIFICATIONS: list[dict] = [
    {
        "id": "n-1001",
        "title": "Approval required",
        "message": "Financial request FIN-0042 is waiting for your decision.",
        "notification_type": "warning",
        "is_read": 0,
        "created_at": "2026-10-18T08:15:00Z",
    },
    {
        "id": "n-1002",
        "titel": "Visa application submitted",
        "message": "A new tourist visa application was submitted for Dubai.",
        "notification_type": "info",
        "is_read": 0,
        "created_at": "2026-10-18T07:40:00Z",
    },
    {
        "id": "n-1003",
        "title": "Contract expiring",
        "message": "Client contract CC-2025-017 expires in 14 days.",
        "notification_type": "urgent",
        "is_read": 0,
        "created_at": "2026-10-17T16:05:00Z",
    },
    {
        "id": "n-1004",
        "title": "Bank balance updated",
        "message": "The Rafidain Bank USD account balance was reconciled.",
        "notification_type": "success",
        "is_read": 1,
        "created_at": "2026-10-16T11:30:00Z",
    },
    {
        "id": "n-1005",
        "title": "Document uploaded",
        "message": "Passport scan added to booking BK-88213.",
        "notification_type": "info",
        "is_read": 1,
        "created_at": "2026-10-15T09:00:00Z",
    },
    {
        "id": "n-1006",
        "title": "Budget threshold",
        "message": "Marketing budget reached 80% of its allocation.",
        "notification_type": "warning",
        "is_read": 1,
        "created_at": "2026-09-01T12:00:00Z",
    },
]
