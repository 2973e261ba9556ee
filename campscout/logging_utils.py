"""
Structured logging helpers shared by the stores and the scrape pipeline.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    **fields: Any,
) -> None:
    """
    Emit one structured log line as compact JSON, e.g.
    ``{"campsite": "ABC", "date": "2025-06-01", "event": "campsite_date_failed"}``.
    """

    if not logger.isEnabledFor(level):
        return
    payload = {"event": event, **fields}
    logger.log(level, json.dumps(payload, default=str, sort_keys=True, ensure_ascii=False))


def log_outcome(logger: logging.Logger, event: str, outcome: Any, *, exclude: tuple[str, ...] = ()) -> None:
    """
    Log a dataclass outcome at INFO, or WARNING when its ``status`` is not ``success``.
    """

    fields = {key: value for key, value in dataclasses.asdict(outcome).items() if key not in exclude}
    level = logging.INFO if fields.get("status", "success") == "success" else logging.WARNING
    log_event(logger, level, event, **fields)
