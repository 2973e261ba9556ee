"""
Mapping of raw search listings to result records.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Protocol

from campscout.domain import Campsite, ResultRecord, build_result_key, format_scraped_at
from campscout.scraping.errors import ListingTransformError


class SupplierResolver(Protocol):
    def resolve(self, item_id: Any) -> Any: ...


class ListingTransformer:
    """
    Normalizes one listing and attaches its resolved supplier.
    """

    def __init__(self, *, supplier_cache: SupplierResolver) -> None:
        self._supplier_cache = supplier_cache

    def transform(
        self,
        listing: dict[str, Any],
        campsite: Campsite,
        date: str,
        source_label: str,
        *,
        scraped_at: datetime | None = None,
    ) -> ResultRecord:
        if not isinstance(listing, dict):
            raise ListingTransformError(f"Listing is not an object: {listing!r}")
        item_id = listing.get("id")
        if item_id is None or item_id == "":
            raise ListingTransformError(f"Listing has no id: name={listing.get('name')!r}")

        supplier = self._supplier_cache.resolve(item_id)
        moment = scraped_at or datetime.now(timezone.utc)

        return ResultRecord(
            key=build_result_key(
                campsite_code=campsite.code,
                source=source_label,
                date=date,
                item_id=item_id,
            ),
            item_id=item_id,
            name=listing.get("name"),
            category=listing.get("category"),
            category_slug=listing.get("categorySlug"),
            max_persons=listing.get("maxPersons"),
            bedrooms=listing.get("bedrooms"),
            aircondition=listing.get("aircondition"),
            dog_allowed=listing.get("dogAllowed"),
            price_before_discount=listing.get("priceBeforeFeesBeforeDiscount"),
            price_after_discount=listing.get("priceBeforeFeesAfterDiscount"),
            size=listing.get("size"),
            arrival_date=listing.get("arrivalDate"),
            duration=listing.get("duration"),
            supplier=supplier,
            campsite=campsite.code,
            requested_date=date,
            website=source_label,
            timestamp=format_scraped_at(moment),
        )
