"""
Shared fixtures: JSON stores in a temp dir, a scripted HTTP session and a
sleep recorder so no test waits for real.
"""

from __future__ import annotations

import json
import random
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pytest
import requests

from campscout.config import ScrapeSettings, StoreSettings
from campscout.scraping.client import AccommodationSearchClient
from campscout.scraping.engine import CampsiteScrapingEngine
from campscout.scraping.rate_limiter import JitterRateLimiter
from campscout.scraping.supplier_cache import SupplierCache
from campscout.scraping.transformer import ListingTransformer
from campscout.services import ScrapingService
from campscout.storage import ScrapeStores

FIXED_NOW = datetime(2025, 6, 1, 12, 34, 56, tzinfo=timezone.utc)


class FakeResponse:
    def __init__(self, *, payload: Any = None, status_code: int = 200, body: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self._body = body

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}", response=self)

    def json(self) -> Any:
        if self._body is not None:
            return json.loads(self._body)
        return self._payload


class FakeSession:
    """
    Stand-in for ``requests.Session``.

    ``search_outcomes`` maps a requested date to a payload dict, a
    FakeResponse or an exception. ``supplier_outcomes`` maps an item id to
    one outcome or a list consumed one call at a time.
    """

    def __init__(self) -> None:
        self.search_outcomes: dict[str, Any] = {}
        self.supplier_outcomes: dict[str, Any] = {}
        self.posts: list[dict[str, Any]] = []
        self.gets: list[str] = []

    def post(self, url: str, json: Any = None, headers: Any = None, timeout: Any = None) -> FakeResponse:
        self.posts.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        date = json["parameters"]["date"]
        return self._respond(self.search_outcomes.get(date, {"data": {}}))

    def get(self, url: str, headers: Any = None, timeout: Any = None) -> FakeResponse:
        self.gets.append(url)
        item_id = url.rsplit("/", 1)[-1]
        outcome = self.supplier_outcomes.get(item_id, {"supplier": None})
        if isinstance(outcome, list):
            outcome = outcome.pop(0)
        return self._respond(outcome)

    @staticmethod
    def _respond(outcome: Any) -> FakeResponse:
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, FakeResponse):
            return outcome
        return FakeResponse(payload=outcome)

    def supplier_calls(self, item_id: Any) -> int:
        return sum(1 for url in self.gets if url.endswith(f"/{item_id}"))


class SleepRecorder:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def search_payload(*accommodations: dict[str, Any], alternatives: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    return {"data": {"accommodations": list(accommodations), "alternatives": alternatives or []}}


def listing(item_id: Any, **fields: Any) -> dict[str, Any]:
    base = {
        "id": item_id,
        "name": f"Mobile home {item_id}",
        "category": "Mobile home",
        "categorySlug": "mobile-home",
        "maxPersons": 4,
        "bedrooms": 2,
        "aircondition": True,
        "dogAllowed": False,
        "priceBeforeFeesBeforeDiscount": 910.0,
        "priceBeforeFeesAfterDiscount": 819.0,
        "size": 28,
        "arrivalDate": "2025-06-01",
        "duration": 7,
    }
    base.update(fields)
    return base


def read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture()
def store_settings(tmp_path: Path) -> StoreSettings:
    return StoreSettings(data_dir=tmp_path)


@pytest.fixture()
def stores(store_settings: StoreSettings) -> ScrapeStores:
    return ScrapeStores.from_settings(store_settings)


@pytest.fixture()
def settings() -> ScrapeSettings:
    return ScrapeSettings()


@pytest.fixture()
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture()
def sleeps() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture()
def rate_limiter(sleeps: SleepRecorder) -> JitterRateLimiter:
    return JitterRateLimiter(sleep=sleeps, rng=random.Random(7))


@pytest.fixture()
def client(settings: ScrapeSettings, session: FakeSession) -> AccommodationSearchClient:
    return AccommodationSearchClient(settings=settings, session=session)


@pytest.fixture()
def engine(
    settings: ScrapeSettings,
    stores: ScrapeStores,
    client: AccommodationSearchClient,
    rate_limiter: JitterRateLimiter,
) -> CampsiteScrapingEngine:
    supplier_cache = SupplierCache(
        store=stores.supplier_cache,
        fetcher=client,
        rate_limiter=rate_limiter,
        settings=settings,
    )
    return CampsiteScrapingEngine(
        settings=settings,
        stores=stores,
        client=client,
        transformer=ListingTransformer(supplier_cache=supplier_cache),
        rate_limiter=rate_limiter,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture()
def service(settings: ScrapeSettings, stores: ScrapeStores, engine: CampsiteScrapingEngine) -> ScrapingService:
    return ScrapingService(settings=settings, stores=stores, engine=engine)
