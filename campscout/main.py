from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import PlainTextResponse

from campscout.config import AppSettings, get_app_settings
from campscout.scheduler import ScrapeTaskQueue
from campscout.schemas import HealthResponse
from campscout.services import ScrapingService, build_scraping_engine
from campscout.storage import ScrapeStores

MAINTENANCE_MESSAGE = "Server is under maintenance. Please try again later."


def _configure_logging(log_level: str) -> None:
    """
    Configure root logging once for the API process.
    """

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Prepare the stores and start the scrape queue on boot; shut it down on exit."""
    log = logging.getLogger(__name__)
    settings: AppSettings = application.state.settings
    scraping_service: ScrapingService = application.state.scraping_service
    task_queue: ScrapeTaskQueue = application.state.task_queue

    scraping_service.initialize_stores()
    if settings.scrape.schedule_minutes > 0:
        task_queue.schedule_periodic(
            scraping_service.refresh_stale,
            minutes=settings.scrape.schedule_minutes,
            name="periodic_refresh_stale",
        )
    task_queue.start()
    log.info("Scrape queue started with %d jobs", task_queue.job_count())
    try:
        yield
    finally:
        task_queue.shutdown(wait=True)
        log.info("Scrape queue shut down")


def create_app(
    *,
    settings: AppSettings | None = None,
    scraping_service: ScrapingService | None = None,
    task_queue: ScrapeTaskQueue | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Components not supplied are built from ``settings`` once, here, and shared
    through ``app.state``.
    """

    settings = settings or get_app_settings()
    _configure_logging(settings.log_level)

    if scraping_service is None:
        stores = ScrapeStores.from_settings(settings.stores)
        scraping_service = ScrapingService(
            settings=settings.scrape,
            stores=stores,
            engine=build_scraping_engine(settings=settings.scrape, stores=stores),
        )

    application = FastAPI(
        title="CampScout API",
        version="1.0.0",
        lifespan=_lifespan,
    )
    application.state.settings = settings
    application.state.scraping_service = scraping_service
    application.state.task_queue = task_queue or ScrapeTaskQueue()

    @application.middleware("http")
    async def maintenance_gate(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        if request.app.state.settings.maintenance_mode:
            return PlainTextResponse(
                MAINTENANCE_MESSAGE,
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return await call_next(request)

    from campscout.api.routers import data_router, scraping_router

    application.include_router(scraping_router)
    application.include_router(data_router)

    @application.get("/health")
    def healthcheck() -> HealthResponse:
        queue: ScrapeTaskQueue = application.state.task_queue
        return HealthResponse(
            status="ok",
            maintenance_mode=settings.maintenance_mode,
            scheduler_running=queue.running,
            queued_jobs=queue.job_count(),
        )

    return application


app = create_app()
