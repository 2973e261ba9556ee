"""
Bundle of the JSON stores shared by the scrape pipeline.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from campscout.config import StoreSettings
from campscout.storage.base import JSONStore
from campscout.storage.json_file_store import JSONFileStore


@dataclass
class ScrapeStores:
    """
    Store handle constructed once at process start and injected everywhere.

    ``lock`` guards read-modify-write cycles on the result store and the
    campsite registry.
    """

    campsites: JSONStore
    dates: JSONStore
    results: JSONStore
    supplier_cache: JSONStore
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> "ScrapeStores":
        return cls(
            campsites=JSONFileStore(settings.campsites_path),
            dates=JSONFileStore(settings.dates_path),
            results=JSONFileStore(settings.results_path),
            supplier_cache=JSONFileStore(settings.supplier_cache_path),
        )
