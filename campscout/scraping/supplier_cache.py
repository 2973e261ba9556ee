"""
Memoized supplier identity lookups.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from campscout.config import ScrapeSettings
from campscout.logging_utils import log_event
from campscout.scraping.errors import SupplierLookupError
from campscout.scraping.rate_limiter import JitterRateLimiter
from campscout.storage import JSONStore

logger = logging.getLogger(__name__)


class SupplierFetcher(Protocol):
    def fetch_supplier(self, item_id: Any) -> Any: ...


class SupplierCache:
    """
    Resolves item ids to supplier identities, backed by a persisted cache.

    Entries are never evicted and never refetched once present, including
    cached ``None`` values. Failed lookups are not recorded, so the next
    scrape tries the same id again.
    """

    def __init__(
        self,
        *,
        store: JSONStore,
        fetcher: SupplierFetcher,
        rate_limiter: JitterRateLimiter,
        settings: ScrapeSettings,
    ) -> None:
        self._store = store
        self._fetcher = fetcher
        self._rate_limiter = rate_limiter
        self._settings = settings

    def resolve(self, item_id: Any) -> Any:
        key = str(item_id)
        cache = self._load()
        if key in cache:
            logger.debug("Supplier cache hit item_id=%s", key)
            return cache[key]

        logger.info("Supplier cache miss item_id=%s, fetching", key)
        max_attempts = self._settings.supplier_max_attempts
        for attempt in range(1, max_attempts + 1):
            self._rate_limiter.wait(max_seconds=self._settings.supplier_jitter_max_seconds)
            try:
                supplier = self._fetcher.fetch_supplier(item_id)
            except SupplierLookupError as exc:
                log_event(
                    logger,
                    logging.WARNING,
                    "supplier_lookup_failed",
                    item_id=key,
                    attempt=attempt,
                    max_attempts=max_attempts,
                    error=exc.reason,
                )
                if attempt < max_attempts:
                    self._rate_limiter.pause(self._settings.supplier_retry_delay_seconds)
                continue

            self._remember(key, supplier)
            return supplier

        log_event(
            logger,
            logging.ERROR,
            "supplier_lookup_exhausted",
            item_id=key,
            attempts=max_attempts,
        )
        return None

    def _load(self) -> dict[str, Any]:
        cache = self._store.load({})
        return cache if isinstance(cache, dict) else {}

    def _remember(self, key: str, supplier: Any) -> None:
        # Re-read so entries written since the lookup started are kept.
        cache = self._load()
        cache[key] = supplier
        self._store.save(cache)
