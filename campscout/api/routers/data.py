"""
campscout/api/routers/data.py

Read-only views over the result store and the campsite registry.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from campscout.api.dependencies import get_scraping_service
from campscout.services import ScrapingService

router = APIRouter(tags=["data"])


@router.get("/data")
def get_data(scraping_service: ScrapingService = Depends(get_scraping_service)) -> Any:
    return scraping_service.get_results()


@router.get("/getCampsites")
def get_campsites(scraping_service: ScrapingService = Depends(get_scraping_service)) -> Any:
    return scraping_service.get_campsites()
