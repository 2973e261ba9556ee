"""
campscout/schemas package marker.
"""

from campscout.schemas.scraping import CampsiteScrapeSummaryResponse, HealthResponse

__all__ = ["CampsiteScrapeSummaryResponse", "HealthResponse"]
