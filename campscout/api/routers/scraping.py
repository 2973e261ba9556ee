"""
campscout/api/routers/scraping.py

Scrape trigger endpoints. Work is queued and runs after the response is sent.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from campscout.api.dependencies import get_scraping_service, get_task_queue
from campscout.scheduler import ScrapeTaskQueue
from campscout.services import ScrapingService

router = APIRouter(tags=["scraping"])

JOB_ID_HEADER = "X-Scrape-Job-Id"


def _accepted(message: str, job_id: str) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status.HTTP_200_OK, headers={JOB_ID_HEADER: job_id})


def _rejected(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


@router.get("/scrape", response_class=PlainTextResponse)
def scrape_stale_campsite(
    scraping_service: ScrapingService = Depends(get_scraping_service),
    task_queue: ScrapeTaskQueue = Depends(get_task_queue),
) -> PlainTextResponse:
    """
    Queue a refresh of the first campsite whose data is stale.
    """

    job_id = task_queue.submit(scraping_service.refresh_stale, name="refresh_stale")
    return _accepted("Scraping started", job_id)


@router.get("/deleteAndScrapeAll", response_class=PlainTextResponse)
def delete_and_scrape_all(
    scraping_service: ScrapingService = Depends(get_scraping_service),
    task_queue: ScrapeTaskQueue = Depends(get_task_queue),
) -> PlainTextResponse:
    """
    Queue a wipe of all results followed by a scrape of every campsite.
    """

    job_id = task_queue.submit(scraping_service.delete_and_scrape_all, name="delete_and_scrape_all")
    return _accepted("Deleting and scraping all data started", job_id)


@router.get("/forceScrape", response_class=PlainTextResponse)
def force_scrape(
    campsite: str | None = Query(default=None, description="Campsite code to scrape"),
    scraping_service: ScrapingService = Depends(get_scraping_service),
    task_queue: ScrapeTaskQueue = Depends(get_task_queue),
) -> Response:
    """
    Queue an immediate scrape of one campsite, bypassing the staleness check.
    """

    if not campsite:
        return _rejected(status.HTTP_400_BAD_REQUEST, "Missing campsite code.")

    target = scraping_service.find_campsite(campsite)
    if target is None:
        return _rejected(status.HTTP_404_NOT_FOUND, f"Campsite '{campsite}' not found.")

    job_id = task_queue.submit(
        scraping_service.scrape_campsite,
        target,
        name=f"force_scrape:{target.code}",
    )
    return _accepted(f"Force scraping started for campsite '{campsite}'", job_id)
