"""
campscout/services package marker.
"""

from campscout.services.scraping_service import (
    NO_CAMPSITES_PLACEHOLDER,
    NO_DATA_PLACEHOLDER,
    ScrapingService,
    build_scraping_engine,
)

__all__ = [
    "NO_CAMPSITES_PLACEHOLDER",
    "NO_DATA_PLACEHOLDER",
    "ScrapingService",
    "build_scraping_engine",
]
