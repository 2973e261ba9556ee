"""
campscout/api/routers package marker.
"""

from campscout.api.routers.data import router as data_router
from campscout.api.routers.scraping import router as scraping_router

__all__ = [
    "data_router",
    "scraping_router",
]
