"""
Reward Catalog - API Fetcher Module

Clients and schema for pulling reward listings from the myVIP loyalty
rewards API.

The API serves a catalog section as numbered pages under a collection slug:

    GET {base_url}/{slug}/{page}

Each page holds lanes, each lane holds awards. There is no "last page"
marker; a page past the end simply answers with a non-200 status.

Usage:
------
    from reward_catalog.api_fetcher import MyVipRewardsClient

    with MyVipRewardsClient() as client:
        result = client.fetch_page("category", 0)
        records = result.records        # frozenset of RewardRecord
        result.outcome                  # PageOutcome.OK / NOT_FOUND / ...
"""

# -----------------------------------------------------------------------------
# Base client
# -----------------------------------------------------------------------------
from .client_base import (
    BaseAPIClient,
    APIClientError,
    APIClientDecodeError,
    APIClientHTTPError,
    APIClientTimeout,
)

# -----------------------------------------------------------------------------
# myVIP rewards page fetcher
# -----------------------------------------------------------------------------
from .myvip_api import MyVipRewardsClient, PageOutcome, PageResult

# -----------------------------------------------------------------------------
# Award -> RewardRecord normalization
# -----------------------------------------------------------------------------
from .normalizer import normalize_award, normalize_lane, normalize_page

# -----------------------------------------------------------------------------
# Wire schema and normalized record
# -----------------------------------------------------------------------------
from .schema import Award, Lane, PageWrapper, RewardRecord


__all__ = [
    # Base client
    "BaseAPIClient",
    "APIClientError",
    "APIClientDecodeError",
    "APIClientHTTPError",
    "APIClientTimeout",
    # myVIP client
    "MyVipRewardsClient",
    "PageOutcome",
    "PageResult",
    # Normalizer
    "normalize_award",
    "normalize_lane",
    "normalize_page",
    # Schema
    "Award",
    "Lane",
    "PageWrapper",
    "RewardRecord",
]
