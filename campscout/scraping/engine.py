"""
Campsite scraping engine.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, Protocol

from campscout.config import ScrapeSettings
from campscout.domain import Campsite, CampsiteScrapeSummary, format_last_update
from campscout.logging_utils import log_event, log_outcome
from campscout.scraping.errors import ListingTransformError, SearchFetchError
from campscout.scraping.rate_limiter import JitterRateLimiter
from campscout.scraping.registry import CampsiteRegistry, load_dates
from campscout.scraping.transformer import ListingTransformer
from campscout.storage import ScrapeStores

logger = logging.getLogger(__name__)


class ListingSearcher(Protocol):
    def search(self, *, campsite: Campsite, date: str) -> list[dict[str, Any]]: ...


class CampsiteScrapingEngine:
    """
    Scrapes every registered date for one campsite and reconciles the result store.
    """

    def __init__(
        self,
        *,
        settings: ScrapeSettings,
        stores: ScrapeStores,
        client: ListingSearcher,
        transformer: ListingTransformer,
        rate_limiter: JitterRateLimiter,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._settings = settings
        self._stores = stores
        self._client = client
        self._transformer = transformer
        self._rate_limiter = rate_limiter
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._registry = CampsiteRegistry(stores.campsites)

    def scrape(self, campsite: Campsite) -> CampsiteScrapeSummary:
        dates = load_dates(self._stores.dates)
        new_results: dict[str, dict[str, Any]] = {}
        failed_dates = 0
        errors: list[str] = []

        for label, date in dates:
            log_event(
                logger,
                logging.INFO,
                "campsite_date_fetching",
                campsite=campsite.code,
                label=label,
                date=date,
            )
            try:
                new_results.update(self._scrape_date(campsite, date))
            except SearchFetchError as exc:
                failed_dates += 1
                errors.append(str(exc))
                log_event(
                    logger,
                    logging.ERROR,
                    "campsite_date_failed",
                    campsite=campsite.code,
                    label=label,
                    date=date,
                    error=str(exc),
                )
            self._rate_limiter.wait(
                min_seconds=self._settings.date_delay_min_seconds,
                max_seconds=self._settings.date_delay_max_seconds,
            )

        with self._stores.lock:
            removed = self._reconcile(campsite, new_results)
            stamped = self._stamp_last_update(campsite, has_results=bool(new_results))

        if failed_dates == 0:
            status = "success"
        else:
            status = "partial_success" if new_results else "failed"
        summary = CampsiteScrapeSummary(
            campsite=campsite.code,
            dates_requested=len(dates),
            dates_failed=failed_dates,
            records_scraped=len(new_results),
            records_removed=removed,
            last_update_stamped=stamped,
            status=status,
            errors=errors,
        )
        log_outcome(logger, "campsite_scrape_completed", summary, exclude=("errors",))
        return summary

    def _scrape_date(self, campsite: Campsite, date: str) -> dict[str, dict[str, Any]]:
        listings = self._client.search(campsite=campsite, date=date)
        scraped_at = self._clock()
        records: dict[str, dict[str, Any]] = {}
        for index, listing in enumerate(listings):
            try:
                record = self._transformer.transform(
                    listing,
                    campsite,
                    date,
                    self._settings.source_label,
                    scraped_at=scraped_at,
                )
            except ListingTransformError as exc:
                log_event(
                    logger,
                    logging.WARNING,
                    "listing_skipped",
                    campsite=campsite.code,
                    date=date,
                    position=index,
                    error=str(exc),
                )
                continue
            records[record.key] = record.to_dict()
            self._rate_limiter.wait(max_seconds=self._settings.listing_jitter_max_seconds)
        return records

    def _reconcile(self, campsite: Campsite, new_results: dict[str, dict[str, Any]]) -> int:
        """
        Replace every stored record of ``campsite`` with ``new_results`` in one write.
        """

        current = self._stores.results.load({})
        if not isinstance(current, dict):
            logger.error("Result store is not an object; rebuilding it")
            current = {}

        kept = {
            key: value
            for key, value in current.items()
            if not (isinstance(value, dict) and value.get("campsite") == campsite.code)
        }
        removed = len(current) - len(kept)
        kept.update(new_results)
        self._stores.results.save(kept)
        return removed

    def _stamp_last_update(self, campsite: Campsite, *, has_results: bool) -> bool:
        if not has_results:
            log_event(
                logger,
                logging.WARNING,
                "last_update_skipped",
                campsite=campsite.code,
                reason="no new results",
            )
            return False

        timestamp = format_last_update(self._clock())
        if not self._registry.stamp_last_update(campsite.code, timestamp):
            log_event(
                logger,
                logging.ERROR,
                "last_update_campsite_missing",
                campsite=campsite.code,
            )
            return False

        log_event(
            logger,
            logging.INFO,
            "last_update_stamped",
            campsite=campsite.code,
            last_update=timestamp,
        )
        return True
