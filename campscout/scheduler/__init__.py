"""
campscout/scheduler package marker.
"""

from campscout.scheduler.jobs import ScrapeTaskQueue

__all__ = ["ScrapeTaskQueue"]
