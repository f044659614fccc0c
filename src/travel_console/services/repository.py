"""
Per-resource cached repository.

Pages read lists through a ResourceRepository instead of calling the
service directly. Entries live in a DiskCache tagged with the resource
key so that ``clear()`` drops exactly one resource, and expire after
``TRAVEL_CONSOLE_CACHE_TTL`` seconds (default 60).

Invalidation policy:
- entries expire after the TTL
- ``clear()`` is called after any mutation of the resource
- ``fetch(..., refresh=True)`` bypasses and replaces the cached page
"""

import os
from typing import Any, Mapping

from travel_console.lib import caches, logs, objects, paths
from travel_console.models.common import ResourcePage
from travel_console.services.resource_service import ResourceService

LOG = logs.logger(__file__)

_DEFAULT_TTL = int(os.getenv("TRAVEL_CONSOLE_CACHE_TTL", "60"))


def default_cache() -> caches.DiskCache:
    """Return the shared on-disk cache used by repositories."""
    return caches.DiskCache(paths.cache_dir("repositories"))


class ResourceRepository:
    """
    Cached access to one resource of a ResourceService.

    Attributes:
        service: Backing service.
        resource: Resource key, also used as the cache tag.
        ttl: Entry lifetime in seconds; None disables expiry.
    """

    def __init__(
        self,
        service: ResourceService,
        resource: str,
        ttl: int | None = _DEFAULT_TTL,
        cache: caches.DiskCache | None = None,
    ) -> None:
        self.service = service
        self.resource = resource
        self.ttl = ttl
        self._cache = cache or default_cache()

    def fetch(
        self,
        query: str | None = None,
        page: int = 1,
        page_size: int = 10,
        sort_key: str | None = None,
        sort_direction: str = "asc",
        filters: Mapping[str, Any] | None = None,
        refresh: bool = False,
    ) -> ResourcePage:
        """
        Return one page of the resource, from cache when possible.

        Arguments mirror ResourceService.list_records.
        """
        request = {
            "query": (query or "").strip(),
            "page": page,
            "page_size": page_size,
            "sort_key": sort_key,
            "sort_direction": sort_direction,
            "filters": dict(filters or {}),
        }
        key = self._key("list", request)

        def _load() -> dict:
            return self.service.list_records(
                self.resource,
                query=request["query"] or None,
                page=page,
                page_size=page_size,
                sort_key=sort_key,
                sort_direction=sort_direction,
                filters=request["filters"],
            ).to_dict()

        if refresh:
            self._cache.delete(key)
        entry = self._cache.get_or_load(key, _load, expire=self.ttl, tag=self.resource)
        LOG.debug("fetch %s page:%s hit:%s", self.resource, page, entry.hit)
        return ResourcePage.from_dict(entry.value)

    def get_by_id(self, record_id: str) -> Mapping[str, Any] | None:
        """Return a single record, cached under the same resource tag."""
        key = self._key("record", str(record_id))
        cached = self._cache.get(key)
        if cached is not None:
            return cached.value
        record = self.service.get_record(self.resource, str(record_id))
        if record is not None:
            self._cache.set(key, dict(record), expire=self.ttl, tag=self.resource)
        return record

    def clear(self) -> int:
        """
        Drop every cached entry of this resource.

        Returns:
            Number of entries removed.
        """
        removed = self._cache.evict(self.resource)
        LOG.info("Cleared %s cache entries for %s", removed, self.resource)
        return removed

    def _key(self, kind: str, payload: Any) -> str:
        return objects.hash([self.resource, kind, payload])
