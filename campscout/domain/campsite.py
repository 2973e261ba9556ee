"""
campscout/domain/campsite.py

Domain models for campsites, scraped listings and scrape outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def format_last_update(moment: datetime) -> str:
    """
    Render a registry ``lastUpdate`` value, e.g. ``2025-06-01T12:00:00.000Z``.
    """

    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def parse_last_update(raw: str | int | float) -> datetime:
    """
    Parse a registry ``lastUpdate`` value. Naive values are taken as UTC and
    numbers as epoch milliseconds.

    Raises ValueError for unparseable input.
    """

    if isinstance(raw, bool):
        raise ValueError(f"Unsupported lastUpdate value: {raw!r}")
    if isinstance(raw, (int, float)):
        try:
            return datetime.fromtimestamp(raw / 1000, tz=timezone.utc)
        except (OverflowError, OSError) as exc:
            raise ValueError(f"Epoch milliseconds out of range: {raw!r}") from exc
    if not isinstance(raw, str):
        raise ValueError(f"Unsupported lastUpdate value: {raw!r}")

    text = raw.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_scraped_at(moment: datetime) -> str:
    """
    Render a result ingestion timestamp at minute granularity, e.g. ``2025-06-01, 12:34``.
    """

    return moment.astimezone(timezone.utc).strftime("%Y-%m-%d, %H:%M")


def build_result_key(*, campsite_code: str, source: str, date: str, item_id: Any) -> str:
    """
    Composite result key: ``<campsite>_from_<source>_at_<date>_#<item>``.
    """

    return f"{campsite_code}_from_{source}_at_{date}_#{item_id}"


def _coerce_last_update(raw: Any) -> str | int | float | None:
    if raw is None or raw == "" or raw is False:
        return None
    if isinstance(raw, (str, int, float)) and not isinstance(raw, bool):
        return raw
    # Other JSON types never parse as a timestamp.
    return str(raw)


@dataclass(frozen=True)
class Campsite:
    """
    One registry entry. ``last_update`` is an ISO string or epoch milliseconds.
    """

    code: str
    name: str = ""
    country: str = ""
    region: str = ""
    last_update: str | int | float | None = None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Campsite":
        code = payload.get("code")
        if code is None or str(code).strip() == "":
            raise ValueError("Campsite entry is missing a code.")
        return cls(
            code=str(code),
            name=payload.get("name") or "",
            country=payload.get("country") or "",
            region=payload.get("region") or "",
            last_update=_coerce_last_update(payload.get("lastUpdate")),
        )


@dataclass(frozen=True)
class ResultRecord:
    """
    One normalized listing, persisted under its composite key.
    """

    key: str
    item_id: Any
    name: Any
    category: Any
    category_slug: Any
    max_persons: Any
    bedrooms: Any
    aircondition: Any
    dog_allowed: Any
    price_before_discount: Any
    price_after_discount: Any
    size: Any
    arrival_date: Any
    duration: Any
    supplier: Any
    campsite: str
    requested_date: str
    website: str
    timestamp: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.item_id,
            "name": self.name,
            "category": self.category,
            "categorySlug": self.category_slug,
            "maxPersons": self.max_persons,
            "bedrooms": self.bedrooms,
            "aircondition": self.aircondition,
            "dogAllowed": self.dog_allowed,
            "priceBeforeFeesBeforeDiscount": self.price_before_discount,
            "priceBeforeFeesAfterDiscount": self.price_after_discount,
            "size": self.size,
            "arrivalDate": self.arrival_date,
            "duration": self.duration,
            "supplier": self.supplier,
            "campsite": self.campsite,
            "requestedDate": self.requested_date,
            "website": self.website,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class CampsiteScrapeSummary:
    """
    Summary for one campsite scrape run.
    """

    campsite: str
    dates_requested: int
    dates_failed: int
    records_scraped: int
    records_removed: int
    last_update_stamped: bool
    status: str
    errors: list[str] = field(default_factory=list)
