from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry


logger = logging.getLogger(__name__)


class APIClientError(RuntimeError):
    """Base error for API client failures."""


class APIClientTimeout(APIClientError):
    """Raised when request times out."""


class APIClientHTTPError(APIClientError):
    """Raised for non-success HTTP responses."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class APIClientDecodeError(APIClientError):
    """Raised when a success response body is not valid JSON."""


class BaseAPIClient:
    """
    Reusable base HTTP client for external APIs.

    Features:
    - Persistent session, shareable by worker threads
    - Default headers
    - Single attempt per request (no retry, no backoff)
    - Configurable timeout
    - Safe JSON parsing
    """

    DEFAULT_TIMEOUT = 15  # seconds
    DEFAULT_POOL_SIZE = 10

    def __init__(
        self,
        base_url: str,
        default_headers: Optional[Dict[str, str]] = None,
        timeout: Optional[float] = None,
        pool_size: Optional[int] = None,
    ) -> None:

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout or self.DEFAULT_TIMEOUT

        self.session = requests.Session()

        headers = {
            "User-Agent": "RewardCatalog/1.0",
            "Accept": "application/json",
        }

        if default_headers:
            headers.update(default_headers)

        self.session.headers.update(headers)

        # Every call is a single attempt; a failed request surfaces immediately.
        retry_strategy = Retry(total=0, read=False, raise_on_status=False)

        # One connection per worker thread, otherwise urllib3 discards the extras.
        pool = pool_size or self.DEFAULT_POOL_SIZE
        adapter = HTTPAdapter(
            max_retries=retry_strategy,
            pool_connections=pool,
            pool_maxsize=pool,
        )
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "BaseAPIClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # ---------------------------------------------------
    # Core request method
    # ---------------------------------------------------
    def get_json(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Send GET request and return parsed JSON.

        Only HTTP 200 counts as success; every other status raises
        APIClientHTTPError with the status attached.
        """

        url = f"{self.base_url}/{endpoint.lstrip('/')}"

        try:
            response = self.session.get(
                url,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise APIClientTimeout(
                f"Request timed out calling {url}"
            ) from e
        except requests.RequestException as e:
            raise APIClientError(
                f"Request failed calling {url}: {e}"
            ) from e

        if response.status_code != 200:
            raise APIClientHTTPError(
                f"HTTP {response.status_code} returned from {url}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise APIClientDecodeError(
                f"Invalid JSON returned from {url}"
            ) from e
