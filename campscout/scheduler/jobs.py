"""
campscout/scheduler/jobs.py

APScheduler-backed task queue for scrape work.

Every scrape, whether triggered over HTTP or by the periodic refresh job,
runs on one worker thread. Two scrapes therefore never interleave their
reads and writes of the JSON stores.

Lifecycle
----------
Build one ``ScrapeTaskQueue`` at process start. Start it on app boot; shut it
down gracefully on app shutdown. The queue is wired into FastAPI via the
``lifespan`` context in main.py.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from typing import Any

from apscheduler.executors.pool import ThreadPoolExecutor
from apscheduler.schedulers.background import BackgroundScheduler

logger = logging.getLogger(__name__)

REFRESH_STALE_JOB_ID = "refresh_stale_campsite"


def _run_job(name: str, func: Callable[..., Any], *args: Any) -> Any:
    """Run one unit of scrape work, logging instead of killing the worker on failure."""
    logger.info("Scheduler: %s starting", name)
    try:
        result = func(*args)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Scheduler: %s failed: %s", name, exc)
        return None
    logger.info("Scheduler: %s complete", name)
    return result


class ScrapeTaskQueue:
    """
    Single-worker queue draining scrape jobs in submission order.
    """

    def __init__(self, scheduler: BackgroundScheduler | None = None) -> None:
        self._scheduler = scheduler or BackgroundScheduler(
            timezone="UTC",
            executors={"default": ThreadPoolExecutor(max_workers=1)},
            job_defaults={"coalesce": True, "misfire_grace_time": None},
        )

    @property
    def running(self) -> bool:
        return self._scheduler.running

    def submit(self, func: Callable[..., Any], *args: Any, name: str) -> str:
        """
        Enqueue ``func(*args)`` to run as soon as the worker is free; return the job id.
        """

        job_id = uuid.uuid4().hex
        self._scheduler.add_job(
            _run_job,
            args=(name, func, *args),
            id=job_id,
            name=name,
        )
        logger.info("Scheduler: queued %s job_id=%s", name, job_id)
        return job_id

    def schedule_periodic(self, func: Callable[..., Any], *, minutes: int, name: str) -> None:
        """
        Register ``func`` to run every ``minutes`` minutes on the same worker.
        """

        self._scheduler.add_job(
            _run_job,
            trigger="interval",
            minutes=minutes,
            args=(name, func),
            id=REFRESH_STALE_JOB_ID,
            name=name,
            replace_existing=True,
            max_instances=1,
        )

    def job_count(self) -> int:
        return len(self._scheduler.get_jobs())

    def start(self) -> None:
        self._scheduler.start()

    def shutdown(self, *, wait: bool = True) -> None:
        if self._scheduler.running:
            self._scheduler.shutdown(wait=wait)
