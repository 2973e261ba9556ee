"""
HTTP client for the ALLCAMPS accommodation search and supplier card endpoints.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from campscout.config import ScrapeSettings
from campscout.domain import Campsite
from campscout.logging_utils import log_event
from campscout.scraping.errors import SearchFetchError, SupplierLookupError

logger = logging.getLogger(__name__)


class AccommodationSearchClient:
    """
    Issues one search request per (campsite, date) and per-item supplier lookups.
    """

    def __init__(
        self,
        *,
        settings: ScrapeSettings,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings
        self.session = session or requests.Session()
        self.request_headers = {
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
        }

    def build_search_body(self, *, campsite: Campsite, date: str) -> dict[str, Any]:
        """
        Request body for a fixed-duration, two-adult mobile-home search.
        """

        return {
            "filters": {
                "site": {"facilities": []},
                "accommodation": {
                    "categories": [self.settings.accommodation_category],
                    "bedrooms": [],
                },
            },
            "parameters": {
                "map": False,
                "includeTopFacilities": True,
                "funnel": "camping",
                "date": date,
                "duration": self.settings.stay_duration_nights,
                "country": campsite.country,
                "area": campsite.region,
                "persons": {"adults": self.settings.adults, "children": []},
                "site": campsite.name,
            },
            "meta": {
                "limit": self.settings.result_limit,
                "order": "desc",
                "orderBy": "popular",
                "orderSettingsLabel": "popular-desc",
                "page": 1,
            },
        }

    def search(self, *, campsite: Campsite, date: str) -> list[dict[str, Any]]:
        """
        Return primary accommodations followed by alternatives.

        Raises SearchFetchError on any transport, status or payload error.
        """

        body = self.build_search_body(campsite=campsite, date=date)
        try:
            response = self.session.post(
                self.settings.search_url,
                json=body,
                headers=self.request_headers,
                timeout=self.settings.timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise SearchFetchError(
                campsite_code=campsite.code,
                date=date,
                reason=str(exc),
            ) from exc

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise SearchFetchError(
                campsite_code=campsite.code,
                date=date,
                reason="Response payload has no 'data' object.",
            )

        accommodations = data.get("accommodations") or []
        alternatives = data.get("alternatives") or []
        if not isinstance(accommodations, list) or not isinstance(alternatives, list):
            raise SearchFetchError(
                campsite_code=campsite.code,
                date=date,
                reason="Listing arrays have an unexpected shape.",
            )

        log_event(
            logger,
            logging.DEBUG,
            "search_completed",
            campsite=campsite.code,
            date=date,
            accommodations=len(accommodations),
            alternatives=len(alternatives),
        )
        return [*accommodations, *alternatives]

    def fetch_supplier(self, item_id: Any) -> Any:
        """
        Return the ``supplier`` field of an item's card, or None when absent.

        Raises SupplierLookupError on any transport, status or payload error.
        """

        url = f"{self.settings.supplier_url}/{item_id}"
        try:
            response = self.session.get(
                url,
                headers=self.request_headers,
                timeout=self.settings.timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise SupplierLookupError(item_id=str(item_id), reason=str(exc)) from exc

        if not isinstance(payload, dict):
            return None
        return payload.get("supplier") or None
