"""
Run a campsite scrape from the CLI, synchronously.
"""

from __future__ import annotations

import argparse
import json
import logging

from campscout.config import get_app_settings
from campscout.schemas import CampsiteScrapeSummaryResponse
from campscout.services import ScrapingService, build_scraping_engine
from campscout.storage import ScrapeStores


def main() -> int:
    parser = argparse.ArgumentParser(description="Run a campsite availability scrape.")
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--campsite",
        dest="campsite",
        default=None,
        help="Campsite code to scrape regardless of staleness.",
    )
    group.add_argument(
        "--all",
        dest="scrape_all",
        action="store_true",
        help="Clear all results and scrape every campsite.",
    )
    args = parser.parse_args()

    settings = get_app_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    stores = ScrapeStores.from_settings(settings.stores)
    service = ScrapingService(
        settings=settings.scrape,
        stores=stores,
        engine=build_scraping_engine(settings=settings.scrape, stores=stores),
    )
    service.initialize_stores()

    if args.scrape_all:
        summaries = service.delete_and_scrape_all()
    elif args.campsite:
        campsite = service.find_campsite(args.campsite)
        if campsite is None:
            parser.error(f"Campsite '{args.campsite}' not found.")
        summaries = [service.scrape_campsite(campsite)]
    else:
        summary = service.refresh_stale()
        summaries = [summary] if summary is not None else []

    payload = [
        CampsiteScrapeSummaryResponse(
            campsite=summary.campsite,
            dates_requested=summary.dates_requested,
            dates_failed=summary.dates_failed,
            records_scraped=summary.records_scraped,
            records_removed=summary.records_removed,
            last_update_stamped=summary.last_update_stamped,
            status=summary.status,
            errors=summary.errors,
        ).model_dump()
        for summary in summaries
    ]
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
