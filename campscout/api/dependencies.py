"""
campscout/api/dependencies.py

Shared FastAPI dependencies resolving process-wide components from app state.
"""

from __future__ import annotations

from fastapi import Request

from campscout.scheduler import ScrapeTaskQueue
from campscout.services import ScrapingService


def get_scraping_service(request: Request) -> ScrapingService:
    return request.app.state.scraping_service


def get_task_queue(request: Request) -> ScrapeTaskQueue:
    return request.app.state.task_queue
