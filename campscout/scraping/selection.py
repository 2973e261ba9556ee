"""
Selection of the next campsite due for a refresh.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from campscout.domain import Campsite, parse_last_update

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL = timedelta(hours=48)


def is_stale(
    campsite: Campsite,
    *,
    refresh_interval: timedelta = DEFAULT_REFRESH_INTERVAL,
    now: datetime | None = None,
) -> bool:
    """
    True when ``lastUpdate`` is absent or older than ``now - refresh_interval``.

    An unparseable ``lastUpdate`` never counts as stale.
    """

    if not campsite.last_update:
        return True
    try:
        last_update = parse_last_update(campsite.last_update)
    except ValueError:
        logger.warning(
            "Ignoring campsite code=%s with unparseable lastUpdate=%r",
            campsite.code,
            campsite.last_update,
        )
        return False

    cutoff = (now or datetime.now(timezone.utc)) - refresh_interval
    return last_update < cutoff


def select_stale_campsite(
    campsites: Iterable[Campsite],
    *,
    refresh_interval: timedelta = DEFAULT_REFRESH_INTERVAL,
    now: datetime | None = None,
) -> Campsite | None:
    """
    Return the first stale campsite in registry order, or None if all are fresh.
    """

    moment = now or datetime.now(timezone.utc)
    for campsite in campsites:
        if is_stale(campsite, refresh_interval=refresh_interval, now=moment):
            return campsite
    return None
