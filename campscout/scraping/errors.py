"""
Scrape pipeline error types.
"""

from __future__ import annotations


class ScrapeError(Exception):
    """
    Base class for recoverable scrape failures.
    """


class SearchFetchError(ScrapeError):
    """
    The accommodation search for one (campsite, date) pair failed.
    """

    def __init__(self, *, campsite_code: str, date: str, reason: str) -> None:
        self.campsite_code = campsite_code
        self.date = date
        self.reason = reason
        super().__init__(f"Search failed for campsite={campsite_code} date={date}: {reason}")


class SupplierLookupError(ScrapeError):
    """
    The supplier card lookup for one item failed.
    """

    def __init__(self, *, item_id: str, reason: str) -> None:
        self.item_id = item_id
        self.reason = reason
        super().__init__(f"Supplier lookup failed for item={item_id}: {reason}")


class ListingTransformError(ScrapeError, ValueError):
    """
    A raw listing could not be mapped to a result record.
    """
