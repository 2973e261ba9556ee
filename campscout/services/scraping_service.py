"""
campscout/services/scraping_service.py

Scrape triggers and read accessors over the persisted stores.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any

import requests

from campscout.config import ScrapeSettings
from campscout.domain import Campsite, CampsiteScrapeSummary
from campscout.scraping.client import AccommodationSearchClient
from campscout.scraping.engine import CampsiteScrapingEngine
from campscout.scraping.rate_limiter import JitterRateLimiter
from campscout.scraping.registry import CampsiteRegistry
from campscout.scraping.selection import select_stale_campsite
from campscout.scraping.supplier_cache import SupplierCache
from campscout.scraping.transformer import ListingTransformer
from campscout.storage import ScrapeStores

logger = logging.getLogger(__name__)

NO_DATA_PLACEHOLDER = {"error": "No data found. Please run a scrape first."}
NO_CAMPSITES_PLACEHOLDER = {"error": "No campsites found. Please check setup configuration."}


def build_scraping_engine(
    *,
    settings: ScrapeSettings,
    stores: ScrapeStores,
    session: requests.Session | None = None,
    rate_limiter: JitterRateLimiter | None = None,
) -> CampsiteScrapingEngine:
    """
    Wire client, supplier cache, transformer and engine around shared stores.
    """

    limiter = rate_limiter or JitterRateLimiter()
    client = AccommodationSearchClient(settings=settings, session=session)
    supplier_cache = SupplierCache(
        store=stores.supplier_cache,
        fetcher=client,
        rate_limiter=limiter,
        settings=settings,
    )
    return CampsiteScrapingEngine(
        settings=settings,
        stores=stores,
        client=client,
        transformer=ListingTransformer(supplier_cache=supplier_cache),
        rate_limiter=limiter,
    )


class ScrapingService:
    """
    Entry points behind the HTTP routes, the scheduler and the CLI.
    """

    def __init__(
        self,
        *,
        settings: ScrapeSettings,
        stores: ScrapeStores,
        engine: CampsiteScrapingEngine,
    ) -> None:
        self._settings = settings
        self._stores = stores
        self._engine = engine
        self._registry = CampsiteRegistry(stores.campsites)

    def initialize_stores(self) -> None:
        """
        Create an empty supplier cache document when none exists yet.
        """

        if not self._stores.supplier_cache.exists():
            self._stores.supplier_cache.save({})
            logger.info("Initialized empty supplier cache")

    def refresh_stale(self) -> CampsiteScrapeSummary | None:
        """
        Scrape the first campsite whose data is older than the refresh interval.
        """

        candidate = select_stale_campsite(
            self._registry.load(),
            refresh_interval=timedelta(hours=self._settings.refresh_interval_hours),
        )
        if candidate is None:
            logger.info("No campsites need updating")
            return None
        return self._engine.scrape(candidate)

    def delete_and_scrape_all(self) -> list[CampsiteScrapeSummary]:
        """
        Clear the whole result store, then scrape every campsite in registry order.
        """

        with self._stores.lock:
            self._stores.results.save({})
        summaries = [self._engine.scrape(campsite) for campsite in self._registry.load()]
        logger.info("Full rescrape completed campsites=%d", len(summaries))
        return summaries

    def find_campsite(self, code: str) -> Campsite | None:
        return self._registry.find(code)

    def scrape_campsite(self, campsite: Campsite) -> CampsiteScrapeSummary:
        """
        Scrape one campsite immediately, ignoring its staleness.
        """

        return self._engine.scrape(campsite)

    def get_results(self) -> Any:
        results = self._stores.results.load(None)
        return results if results else dict(NO_DATA_PLACEHOLDER)

    def get_campsites(self) -> Any:
        campsites = self._stores.campsites.load(None)
        return campsites if campsites else dict(NO_CAMPSITES_PLACEHOLDER)
