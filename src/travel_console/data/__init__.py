"""
Static and demo data for the Travel Console.

This package contains fixture data used by the demo services for
development, testing, and demonstrations without a running backend.

Modules:
- demo_notifications: Seed notifications, mixed read and unread
- demo_resources: Seed approvals, contracts, bank balances, documents, budgets
"""
