"""
campscout/domain package marker.
"""

from campscout.domain.campsite import (
    Campsite,
    CampsiteScrapeSummary,
    ResultRecord,
    build_result_key,
    format_last_update,
    format_scraped_at,
    parse_last_update,
)

__all__ = [
    "Campsite",
    "CampsiteScrapeSummary",
    "ResultRecord",
    "build_result_key",
    "format_last_update",
    "format_scraped_at",
    "parse_last_update",
]
