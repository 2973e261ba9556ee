from __future__ import annotations

import json
import logging

import pytest

from campscout.domain import CampsiteScrapeSummary
from campscout.logging_utils import log_event, log_outcome

logger = logging.getLogger("campscout.tests")


def _summary(status: str) -> CampsiteScrapeSummary:
    return CampsiteScrapeSummary(
        campsite="ABC",
        dates_requested=2,
        dates_failed=1 if status != "success" else 0,
        records_scraped=3,
        records_removed=1,
        last_update_stamped=True,
        status=status,
        errors=["boom"],
    )


def test_log_event_emits_sorted_json(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="campscout.tests"):
        log_event(logger, logging.INFO, "store_load_failed", path="results.json")

    assert json.loads(caplog.records[0].getMessage()) == {"event": "store_load_failed", "path": "results.json"}


def test_log_event_skips_disabled_levels(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="campscout.tests"):
        log_event(logger, logging.DEBUG, "search_completed")

    assert caplog.records == []


@pytest.mark.parametrize("status, level", [("success", logging.INFO), ("failed", logging.WARNING)])
def test_log_outcome_level_follows_status(caplog: pytest.LogCaptureFixture, status: str, level: int) -> None:
    with caplog.at_level(logging.INFO, logger="campscout.tests"):
        log_outcome(logger, "campsite_scrape_completed", _summary(status), exclude=("errors",))

    record = caplog.records[0]
    assert record.levelno == level
    payload = json.loads(record.getMessage())
    assert payload["campsite"] == "ABC"
    assert "errors" not in payload
