from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Set

from pydantic import ValidationError

from .client_base import (
    BaseAPIClient,
    APIClientError,
    APIClientDecodeError,
    APIClientHTTPError,
    APIClientTimeout,
)
from .normalizer import normalize_page
from .schema import PageWrapper, RewardRecord


logger = logging.getLogger(__name__)


class PageOutcome(str, enum.Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    HTTP_ERROR = "http_error"
    TRANSPORT_ERROR = "transport_error"
    DECODE_ERROR = "decode_error"


@dataclass(frozen=True)
class PageResult:
    """What one ``{slug}/{page}`` request produced."""

    slug: str
    page: int
    outcome: PageOutcome
    records: FrozenSet[RewardRecord] = field(default_factory=frozenset)
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.outcome is PageOutcome.OK


class MyVipRewardsClient(BaseAPIClient):
    """
    Page fetcher for the myVIP loyalty rewards catalog.

    Each call issues exactly one GET to ``{base_url}/{slug}/{page}``; retries
    are disabled. Every failure mode is turned into an empty PageResult with
    an outcome, so callers never see an exception from a single bad page:

    - 404 and other non-200 statuses are silent. Pagination has no end marker,
      so a missing page is the normal way a slug runs out.
    - Transport and decode failures are logged.
    """

    DEFAULT_BASE_URL = "https://loyalty-award-api.myvip.co/api/proxy/rewards/section/"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        pool_size: Optional[int] = None,
    ) -> None:
        super().__init__(
            base_url=base_url or self.DEFAULT_BASE_URL,
            timeout=timeout,
            pool_size=pool_size,
        )

    @staticmethod
    def page_endpoint(slug: str, page: int) -> str:
        return f"{slug}/{page}"

    def fetch_page(self, slug: str, page: int) -> PageResult:
        endpoint = self.page_endpoint(slug, page)

        try:
            payload = self.get_json(endpoint)
        except APIClientHTTPError as e:
            outcome = PageOutcome.NOT_FOUND if e.status_code == 404 else PageOutcome.HTTP_ERROR
            return PageResult(slug, page, outcome, status_code=e.status_code)
        except APIClientDecodeError as e:
            logger.error(f"Error decoding {slug} page {page}: {e}")
            return PageResult(slug, page, PageOutcome.DECODE_ERROR, status_code=200)
        except (APIClientTimeout, APIClientError) as e:
            logger.error(f"Error fetching {slug} page {page}: {e}")
            return PageResult(slug, page, PageOutcome.TRANSPORT_ERROR)

        # A JSON null body is an empty page, not a decode failure.
        if payload is None:
            payload = {}

        try:
            wrapper = PageWrapper.model_validate(payload)
        except ValidationError as e:
            logger.error(
                f"Error decoding {slug} page {page}: "
                f"{e.error_count()} schema error(s), first: {e.errors()[0]['msg']}"
            )
            return PageResult(slug, page, PageOutcome.DECODE_ERROR, status_code=200)

        records = normalize_page(wrapper)
        logger.debug(f"{slug} page {page}: {len(wrapper.lanes)} lanes, {len(records)} records")
        return PageResult(slug, page, PageOutcome.OK, frozenset(records), status_code=200)

    def fetch_records(self, slug: str, page: int) -> Set[RewardRecord]:
        """Records of one page; empty on any failure."""
        return set(self.fetch_page(slug, page).records)
