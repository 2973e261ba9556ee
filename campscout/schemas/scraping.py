"""
campscout/schemas/scraping.py

Response schemas for scrape operations.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """
    API response model for the liveness probe.
    """

    status: str
    maintenance_mode: bool
    scheduler_running: bool
    queued_jobs: int = Field(..., ge=0)


class CampsiteScrapeSummaryResponse(BaseModel):
    """
    Serialized outcome of one campsite scrape, as printed by the CLI runner.
    """

    campsite: str
    dates_requested: int = Field(..., ge=0)
    dates_failed: int = Field(..., ge=0)
    records_scraped: int = Field(..., ge=0)
    records_removed: int = Field(..., ge=0)
    last_update_stamped: bool
    status: str
    errors: list[str] = Field(default_factory=list)
