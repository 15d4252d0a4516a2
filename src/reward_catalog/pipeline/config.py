"""
Run configuration for the reward catalog crawl.

Values come from environment variables with the defaults below; the CLI
can override any of them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Optional, Tuple, TypeVar
from urllib.parse import urlparse

from ..api_fetcher.myvip_api import MyVipRewardsClient


DEFAULT_SLUGS: Tuple[str, ...] = ("category",)
DEFAULT_MAX_PAGE = 50
DEFAULT_CONCURRENCY = 4
DEFAULT_TIMEOUT_SEC = 15.0

Number = TypeVar("Number", int, float)


class CrawlConfigError(RuntimeError):
    """Raised when configuration is missing or invalid."""


@dataclass(frozen=True)
class CrawlConfig:
    base_url: str = MyVipRewardsClient.DEFAULT_BASE_URL
    slugs: Tuple[str, ...] = field(default=DEFAULT_SLUGS)
    max_page: int = DEFAULT_MAX_PAGE  # inclusive
    concurrency: int = DEFAULT_CONCURRENCY
    timeout_sec: float = DEFAULT_TIMEOUT_SEC

    def __post_init__(self) -> None:
        parsed = urlparse(self.base_url)
        if not parsed.scheme or not parsed.netloc:
            raise CrawlConfigError(f"Base URL is not a valid URL: '{self.base_url}'")
        if not self.slugs or any(not s for s in self.slugs):
            raise CrawlConfigError("At least one non-empty collection slug is required.")
        if self.max_page < 0:
            raise CrawlConfigError(f"Max page must be >= 0, got {self.max_page}.")
        if self.concurrency < 1:
            raise CrawlConfigError(f"Concurrency must be >= 1, got {self.concurrency}.")
        if not self.timeout_sec > 0:
            raise CrawlConfigError(f"Timeout must be > 0, got {self.timeout_sec}.")

    @property
    def page_count(self) -> int:
        return len(self.slugs) * (self.max_page + 1)

    @classmethod
    def from_env(cls) -> "CrawlConfig":
        """
        Build config from the environment:

            MYVIP_REWARDS_BASE_URL     - API section root
            MYVIP_REWARDS_SLUGS        - comma-separated slugs (default: category)
            MYVIP_REWARDS_MAX_PAGE     - inclusive last page index (default: 50)
            MYVIP_REWARDS_CONCURRENCY  - requests in flight (default: 4)
            MYVIP_REWARDS_TIMEOUT_SEC  - per-request timeout (default: 15)
        """
        return cls(
            base_url=os.getenv("MYVIP_REWARDS_BASE_URL") or MyVipRewardsClient.DEFAULT_BASE_URL,
            slugs=parse_slugs(os.getenv("MYVIP_REWARDS_SLUGS", ",".join(DEFAULT_SLUGS))),
            max_page=_env_number("MYVIP_REWARDS_MAX_PAGE", DEFAULT_MAX_PAGE, int),
            concurrency=_env_number("MYVIP_REWARDS_CONCURRENCY", DEFAULT_CONCURRENCY, int),
            timeout_sec=_env_number("MYVIP_REWARDS_TIMEOUT_SEC", DEFAULT_TIMEOUT_SEC, float),
        )

    def with_overrides(self, **overrides: Optional[Any]) -> "CrawlConfig":
        """Copy with every non-None override applied (and re-validated)."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def parse_slugs(raw: str) -> Tuple[str, ...]:
    slugs: List[str] = [s.strip() for s in raw.split(",") if s.strip()]
    return tuple(slugs)


def _env_number(name: str, default: Number, cast: Callable[[str], Number]) -> Number:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as e:
        raise CrawlConfigError(f"{name} must be a number, got '{raw}'.") from e
