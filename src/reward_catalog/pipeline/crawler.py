"""
Reward Catalog - Pagination Coordinator

Fans out one fetch per (slug, page) over a bounded thread pool and merges
every page's records into a single deduplicated set.

The page range is a fixed upper bound: the API has no end-of-catalog
marker, so pages past the real data just come back empty.

Workers never share state. Each returns its own PageResult and only the
coordinating thread folds them into the accumulator, in whatever order
they finish; set union makes that order irrelevant.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Set, Tuple

from ..api_fetcher.myvip_api import MyVipRewardsClient, PageOutcome, PageResult
from ..api_fetcher.schema import RewardRecord
from .config import CrawlConfig

logger = logging.getLogger(__name__)

FetchPage = Callable[[str, int], PageResult]

WORKER_ERROR = "worker_error"


@dataclass
class CrawlStats:
    pages_requested: int = 0
    outcomes: Counter = field(default_factory=Counter)
    records_seen: int = 0
    records_unique: int = 0
    duration_seconds: float = 0.0

    def add(self, result: PageResult) -> None:
        self.outcomes[result.outcome.value] += 1
        self.records_seen += len(result.records)

    @property
    def pages_ok(self) -> int:
        return self.outcomes[PageOutcome.OK.value]

    @property
    def http_errors(self) -> int:
        return self.outcomes[PageOutcome.HTTP_ERROR.value]

    def as_dict(self) -> Dict[str, object]:
        return {
            "pages_requested": self.pages_requested,
            "outcomes": dict(self.outcomes),
            "records_seen": self.records_seen,
            "records_unique": self.records_unique,
            "duration_seconds": round(self.duration_seconds, 3),
        }


@dataclass
class CrawlResult:
    records: Set[RewardRecord]
    stats: CrawlStats


def work_items(slugs: Iterable[str], max_page: int) -> List[Tuple[str, int]]:
    """Every (slug, page) pair, pages 0..max_page inclusive."""
    return [(slug, page) for slug in slugs for page in range(max_page + 1)]


def crawl(
    fetch: FetchPage,
    slugs: Iterable[str],
    max_page: int,
    concurrency: int,
) -> CrawlResult:
    """
    Run ``fetch`` for every page of every slug, at most ``concurrency`` at
    a time, and return the union of all records.

    Blocks until every page has finished. A page that fails, including a
    fetch that raises, contributes nothing and does not stop the others.
    """
    items = work_items(slugs, max_page)
    stats = CrawlStats(pages_requested=len(items))
    records: Set[RewardRecord] = set()

    t0 = time.time()
    with ThreadPoolExecutor(max_workers=concurrency, thread_name_prefix="page-fetch") as executor:
        futures = {executor.submit(fetch, slug, page): (slug, page) for slug, page in items}

        for future in as_completed(futures):
            slug, page = futures[future]
            try:
                result = future.result()
            except Exception as e:
                stats.outcomes[WORKER_ERROR] += 1
                logger.error(f"Unexpected failure on {slug} page {page}: {e}")
                logger.debug("Exception details", exc_info=True)
                continue

            stats.add(result)
            records |= result.records

    stats.records_unique = len(records)
    stats.duration_seconds = time.time() - t0
    return CrawlResult(records=records, stats=stats)


class RewardCrawler:
    """
    Binds a CrawlConfig to a MyVipRewardsClient and runs one crawl.

    Usage:
        with RewardCrawler(CrawlConfig.from_env()) as crawler:
            result = crawler.run()
    """

    def __init__(self, config: CrawlConfig) -> None:
        self.config = config
        self.client = MyVipRewardsClient(
            base_url=config.base_url,
            timeout=config.timeout_sec,
            pool_size=config.concurrency,
        )

    def run(self) -> CrawlResult:
        cfg = self.config
        logger.info(
            f"Crawling {cfg.page_count} pages ({', '.join(cfg.slugs)}; pages 0..{cfg.max_page}) "
            f"with concurrency {cfg.concurrency}"
        )

        result = crawl(self.client.fetch_page, cfg.slugs, cfg.max_page, cfg.concurrency)
        stats = result.stats

        logger.info(
            f"Crawl complete: {stats.pages_ok}/{stats.pages_requested} pages with data, "
            f"{stats.records_seen} records seen, {stats.records_unique} unique "
            f"in {stats.duration_seconds:.2f}s"
        )
        if stats.http_errors:
            # 404 is the normal end of a slug; anything else may be auth, rate limiting or 5xx.
            logger.warning(
                f"{stats.http_errors} page(s) returned a non-200, non-404 status; "
                "treated as empty"
            )
        logger.debug(f"Crawl stats: {stats.as_dict()}")

        return result

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "RewardCrawler":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
