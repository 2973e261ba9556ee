"""
Storage layer exports.
"""

from campscout.storage.base import JSONStore
from campscout.storage.handle import ScrapeStores
from campscout.storage.json_file_store import JSONFileStore

__all__ = ["JSONFileStore", "JSONStore", "ScrapeStores"]
