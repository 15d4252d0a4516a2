"""
Reward Catalog - one-shot catalog dump

Crawls every configured slug/page, deduplicates, sorts, and prints the
catalog as a JSON array on stdout. Diagnostics go to stderr (and an
optional log file) so stdout stays machine-readable.

Exit status: 0 once the array is printed, however many pages failed;
2 on invalid configuration.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .pipeline.config import CrawlConfig, CrawlConfigError, parse_slugs
from .pipeline.crawler import RewardCrawler
from .pipeline.finalizer import finalize


def setup_logging(log_level: str, log_file: Optional[Path]) -> logging.Logger:
    # Handlers live on the package logger so every module's logger inherits them.
    logger = logging.getLogger("reward_catalog")
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    logger.handlers.clear()

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    ch.setLevel(logger.level)
    logger.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        fh.setLevel(logger.level)
        logger.addHandler(fh)

    return logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Dump the myVIP rewards catalog as a sorted, deduplicated JSON array"
    )
    p.add_argument(
        "--base-url",
        default=None,
        help="API section root (env: MYVIP_REWARDS_BASE_URL).",
    )
    p.add_argument(
        "--slugs",
        default=None,
        help="Comma-separated collection slugs, e.g. category,destination (env: MYVIP_REWARDS_SLUGS).",
    )
    p.add_argument(
        "--max-page",
        type=int,
        default=None,
        help="Last page index to request per slug, inclusive (env: MYVIP_REWARDS_MAX_PAGE).",
    )
    p.add_argument(
        "--concurrency",
        type=int,
        default=None,
        help="Maximum requests in flight (env: MYVIP_REWARDS_CONCURRENCY).",
    )
    p.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (env: MYVIP_REWARDS_TIMEOUT_SEC).",
    )
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    p.add_argument(
        "--log-file",
        default="",
        help="Optional log file path (e.g., logs/reward_catalog.log).",
    )
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> CrawlConfig:
    return CrawlConfig.from_env().with_overrides(
        base_url=args.base_url,
        slugs=parse_slugs(args.slugs) if args.slugs is not None else None,
        max_page=args.max_page,
        concurrency=args.concurrency,
        timeout_sec=args.timeout,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    log_file = Path(args.log_file) if args.log_file.strip() else None
    logger = setup_logging(args.log_level, log_file)

    try:
        config = build_config(args)
    except CrawlConfigError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    with RewardCrawler(config) as crawler:
        result = crawler.run()

    ordered = finalize(result.records, sys.stdout)
    logger.info("Wrote %d rewards", len(ordered))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
