"""
File-backed JSON document storage.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from campscout.logging_utils import log_event
from campscout.storage.base import JSONStore

logger = logging.getLogger(__name__)


class JSONFileStore(JSONStore):
    """
    Persist one JSON document as a pretty-printed file.

    Writes go to a sibling temp file that replaces the target, so readers
    never observe a half-written document.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self, default: Any) -> Any:
        if not self.path.exists():
            return copy.deepcopy(default)

        try:
            raw = self.path.read_text(encoding="utf-8")
            if not raw.strip():
                return copy.deepcopy(default)
            return json.loads(raw)
        except (OSError, ValueError) as exc:
            log_event(
                logger,
                logging.ERROR,
                "store_load_failed",
                path=str(self.path),
                error=str(exc),
            )
            return copy.deepcopy(default)

    def save(self, data: Any) -> bool:
        tmp_name: str | None = None
        try:
            payload = json.dumps(data, indent=2, ensure_ascii=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                dir=self.path.parent,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
            return True
        except (OSError, TypeError, ValueError) as exc:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            log_event(
                logger,
                logging.ERROR,
                "store_save_failed",
                path=str(self.path),
                error=str(exc),
            )
            return False

    def __repr__(self) -> str:
        return f"JSONFileStore({str(self.path)!r})"
