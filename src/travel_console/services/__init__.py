"""
Service factories for the Travel Console.

Available implementations:
- demo: In-memory services seeded with static data (no backend required)
- impl: REST API services (requires TRAVEL_CONSOLE_API_URL)

Services are cached at the module level, so the same instance is reused
across all callbacks. Configure via the TRAVEL_CONSOLE_SERVICE environment
variable.
"""

import os
from functools import cache
from typing import Callable, Dict

from travel_console.lib import logs
from travel_console.services.notification_service import NotificationService
from travel_console.services.notification_service_demo import DemoNotificationService
from travel_console.services.notification_service_impl import NotificationServiceImpl
from travel_console.services.resource_service import ResourceService
from travel_console.services.resource_service_demo import DemoResourceService
from travel_console.services.resource_service_impl import ResourceServiceImpl

LOG = logs.logger(__file__)

_NOTIFICATION_REGISTRY: Dict[str, Callable[[], NotificationService]] = {
    "demo": lambda: DemoNotificationService(),
    "impl": lambda: NotificationServiceImpl(),
}

_RESOURCE_REGISTRY: Dict[str, Callable[[], ResourceService]] = {
    "demo": lambda: DemoResourceService(),
    "impl": lambda: ResourceServiceImpl(),
}


def _resolve_kind(kind: str | None) -> str:
    return (kind or os.getenv("TRAVEL_CONSOLE_SERVICE", "demo")).lower()


@cache
def get_notification_service(kind: str | None = None) -> NotificationService:
    """Return the configured notification service implementation."""
    resolved_kind = _resolve_kind(kind)
    LOG.info("get_notification_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _NOTIFICATION_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown notification service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


@cache
def get_resource_service(kind: str | None = None) -> ResourceService:
    """Return the configured resource service implementation."""
    resolved_kind = _resolve_kind(kind)
    LOG.info("get_resource_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _RESOURCE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown resource service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()
