"""
Read and update helpers for the campsite and date registries.
"""

from __future__ import annotations

import logging
from typing import Any

from campscout.domain import Campsite
from campscout.storage import JSONStore

logger = logging.getLogger(__name__)


class CampsiteRegistry:
    """
    Typed access to the campsite registry document (an ordered list).
    """

    def __init__(self, store: JSONStore) -> None:
        self._store = store

    def load_raw(self) -> list[dict[str, Any]]:
        entries = self._store.load([])
        if not isinstance(entries, list):
            logger.error("Campsite registry is not a list; treating as empty")
            return []
        return [entry for entry in entries if isinstance(entry, dict)]

    def load(self) -> list[Campsite]:
        campsites: list[Campsite] = []
        for entry in self.load_raw():
            try:
                campsites.append(Campsite.from_dict(entry))
            except ValueError as exc:
                logger.warning("Skipping campsite registry entry %r: %s", entry, exc)
        return campsites

    def find(self, code: str) -> Campsite | None:
        for campsite in self.load():
            if campsite.code == code:
                return campsite
        return None

    def stamp_last_update(self, code: str, last_update: str) -> bool:
        """
        Set ``lastUpdate`` on the entry with ``code`` and persist the registry.

        Returns False when no entry matches.
        """

        entries = self.load_raw()
        for entry in entries:
            if str(entry.get("code")) == code:
                entry["lastUpdate"] = last_update
                self._store.save(entries)
                return True
        return False


def load_dates(store: JSONStore) -> list[tuple[str, str]]:
    """
    Return ``(label, date)`` pairs in registry order.
    """

    dates = store.load({})
    if not isinstance(dates, dict):
        logger.error("Date registry is not an object; treating as empty")
        return []
    return [(str(label), str(date)) for label, date in dates.items()]
