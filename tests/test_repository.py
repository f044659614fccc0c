"""Tests for the cached resource repository."""

from travel_console.services.repository import ResourceRepository
from travel_console.services.resource_service_demo import DemoResourceService


class CountingService(DemoResourceService):
    """Demo service counting backend hits."""

    def __init__(self) -> None:
        super().__init__()
        self.list_calls = 0
        self.get_calls = 0

    def list_records(self, resource, **kwargs):
        self.list_calls += 1
        return super().list_records(resource, **kwargs)

    def get_record(self, resource, record_id):
        self.get_calls += 1
        return super().get_record(resource, record_id)


class TestResourceRepository:
    def test_fetch_is_cached_per_request(self, disk_cache):
        service = CountingService()
        repo = ResourceRepository(service, "contracts", cache=disk_cache)

        first = repo.fetch(page=1, page_size=2)
        second = repo.fetch(page=1, page_size=2)
        other = repo.fetch(page=2, page_size=2)

        assert service.list_calls == 2
        assert first.to_dict() == second.to_dict()
        assert first.total == other.total == 4
        assert [r["id"] for r in first.items] != [r["id"] for r in other.items]

    def test_refresh_bypasses_cache(self, disk_cache):
        service = CountingService()
        repo = ResourceRepository(service, "contracts", cache=disk_cache)
        repo.fetch()
        repo.fetch(refresh=True)
        assert service.list_calls == 2

    def test_clear_only_drops_own_resource(self, disk_cache):
        service = CountingService()
        contracts = ResourceRepository(service, "contracts", cache=disk_cache)
        budgets = ResourceRepository(service, "budgets", cache=disk_cache)
        contracts.fetch()
        budgets.fetch()

        assert contracts.clear() == 1
        contracts.fetch()
        budgets.fetch()
        assert service.list_calls == 3

    def test_get_by_id_caches_record(self, disk_cache):
        service = CountingService()
        repo = ResourceRepository(service, "documents", cache=disk_cache)
        assert repo.get_by_id("doc-2")["title"].startswith("Passport")
        assert repo.get_by_id("doc-2")["id"] == "doc-2"
        assert service.get_calls == 1

    def test_get_by_id_missing(self, disk_cache):
        repo = ResourceRepository(CountingService(), "documents", cache=disk_cache)
        assert repo.get_by_id("nope") is None

    def test_search_and_filters_are_part_of_key(self, disk_cache):
        service = CountingService()
        repo = ResourceRepository(service, "contracts", cache=disk_cache)
        active = repo.fetch(filters={"status": "Active"})
        searched = repo.fetch(query="tigris")
        assert active.total == 2
        assert [r["id"] for r in searched.items] == ["cc-19"]
        assert service.list_calls == 2
