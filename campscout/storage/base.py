"""
Storage layer interfaces for persisted JSON documents.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class JSONStore(ABC):
    """
    Storage abstraction for one whole-document JSON blob.

    Implementations never raise from ``load`` or ``save``: read failures
    fall back to the caller's default and write failures are logged.
    """

    @abstractmethod
    def load(self, default: Any) -> Any:
        """
        Return the stored document, or ``default`` when missing or unreadable.
        """

    @abstractmethod
    def save(self, data: Any) -> bool:
        """
        Overwrite the stored document and return whether the write succeeded.
        """

    @abstractmethod
    def exists(self) -> bool:
        """
        Whether the document has ever been written.
        """
