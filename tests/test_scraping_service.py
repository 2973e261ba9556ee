from __future__ import annotations

from campscout.services import NO_CAMPSITES_PLACEHOLDER, NO_DATA_PLACEHOLDER, ScrapingService
from campscout.storage import ScrapeStores
from tests.conftest import FakeSession, listing, read_json, search_payload

RECENT = "2999-01-01T00:00:00.000Z"


def _seed(stores: ScrapeStores, *campsites: dict) -> None:
    stores.campsites.save(list(campsites))
    stores.dates.save({"week1": "2025-06-01"})


class TestRefreshStale:
    def test_scrapes_first_stale_campsite(
        self,
        service: ScrapingService,
        stores: ScrapeStores,
        session: FakeSession,
    ) -> None:
        _seed(
            stores,
            {"code": "FRESH", "name": "Fresh", "lastUpdate": RECENT},
            {"code": "STALE", "name": "Stale", "lastUpdate": "2020-01-01T00:00:00.000Z"},
            {"code": "NEVER", "name": "Never"},
        )
        session.search_outcomes["2025-06-01"] = search_payload(listing(1))

        summary = service.refresh_stale()

        assert summary is not None
        assert summary.campsite == "STALE"
        assert session.posts[0]["json"]["parameters"]["site"] == "Stale"

    def test_noop_when_everything_is_fresh(
        self,
        service: ScrapingService,
        stores: ScrapeStores,
        session: FakeSession,
    ) -> None:
        _seed(stores, {"code": "FRESH", "name": "Fresh", "lastUpdate": RECENT})

        assert service.refresh_stale() is None
        assert session.posts == []
        assert not stores.results.exists()


class TestDeleteAndScrapeAll:
    def test_clears_everything_then_scrapes_registry_in_order(
        self,
        service: ScrapingService,
        stores: ScrapeStores,
        session: FakeSession,
    ) -> None:
        _seed(
            stores,
            {"code": "A", "name": "Alpha", "lastUpdate": RECENT},
            {"code": "B", "name": "Bravo"},
        )
        stores.results.save({"REMOVED_from_ALLCAMPS_at_2024-01-01_#1": {"campsite": "REMOVED"}})
        session.search_outcomes["2025-06-01"] = search_payload(listing(9))

        summaries = service.delete_and_scrape_all()

        assert [summary.campsite for summary in summaries] == ["A", "B"]
        assert [post["json"]["parameters"]["site"] for post in session.posts] == ["Alpha", "Bravo"]
        assert sorted(stores.results.load({})) == [
            "A_from_ALLCAMPS_at_2025-06-01_#9",
            "B_from_ALLCAMPS_at_2025-06-01_#9",
        ]


class TestForcedScrape:
    def test_find_and_scrape_ignores_staleness(
        self,
        service: ScrapingService,
        stores: ScrapeStores,
        session: FakeSession,
    ) -> None:
        _seed(stores, {"code": "A", "name": "Alpha", "lastUpdate": RECENT, "notes": "seaside"})
        session.search_outcomes["2025-06-01"] = search_payload(listing(3))

        campsite = service.find_campsite("A")
        assert campsite is not None
        summary = service.scrape_campsite(campsite)

        assert summary.records_scraped == 1
        entry = read_json(stores.campsites.path)[0]
        assert entry["lastUpdate"] != RECENT
        assert entry["notes"] == "seaside"

    def test_unknown_code(self, service: ScrapingService, stores: ScrapeStores) -> None:
        _seed(stores, {"code": "A", "name": "Alpha"})
        assert service.find_campsite("Z") is None


class TestAccessors:
    def test_placeholders_when_stores_are_missing(self, service: ScrapingService) -> None:
        assert service.get_results() == NO_DATA_PLACEHOLDER
        assert service.get_campsites() == NO_CAMPSITES_PLACEHOLDER

    def test_placeholder_when_results_are_empty(self, service: ScrapingService, stores: ScrapeStores) -> None:
        stores.results.save({})
        assert service.get_results() == NO_DATA_PLACEHOLDER

    def test_returns_store_contents_as_is(self, service: ScrapingService, stores: ScrapeStores) -> None:
        stores.results.save({"k": {"campsite": "A"}})
        stores.campsites.save([{"code": "A"}])

        assert service.get_results() == {"k": {"campsite": "A"}}
        assert service.get_campsites() == [{"code": "A"}]


class TestInitializeStores:
    def test_creates_empty_supplier_cache(self, service: ScrapingService, stores: ScrapeStores) -> None:
        service.initialize_stores()
        assert read_json(stores.supplier_cache.path) == {}

    def test_keeps_existing_supplier_cache(self, service: ScrapingService, stores: ScrapeStores) -> None:
        stores.supplier_cache.save({"1": None})
        service.initialize_stores()
        assert stores.supplier_cache.load({}) == {"1": None}
