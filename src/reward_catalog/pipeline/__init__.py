"""
Reward Catalog - Pipeline

Configuration, the paginated crawl, and final ordering/serialization.
"""

from .config import CrawlConfig, CrawlConfigError
from .crawler import CrawlResult, CrawlStats, RewardCrawler, crawl, work_items
from .finalizer import finalize, sort_records, to_json

__all__ = [
    "CrawlConfig",
    "CrawlConfigError",
    "CrawlResult",
    "CrawlStats",
    "RewardCrawler",
    "crawl",
    "work_items",
    "finalize",
    "sort_records",
    "to_json",
]
