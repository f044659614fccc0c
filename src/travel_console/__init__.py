"""
Travel Console: a Dash back office for a travel agency.

This package provides the admin web interface for approval workflows,
client contracts, bank balances, documents and project budgets, with a
notification bell that tracks read and unread messages.

Subpackages:
- components: Reusable Dash UI components (data table, notification menu)
- models: Data models and serialization
- pages: Page containers and their callbacks
- services: Data access layer (demo and REST implementations)
- data: Static demo fixtures

Main entry points:
- app.main(): Start the development server
- app.app: The Dash application instance (for WSGI deployment)
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
