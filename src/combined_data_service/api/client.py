"""
HTTP client for the upstream collection endpoints.

This module provides an async client that downloads a JSON array of records
from an upstream URL and classifies every failure as a transport or decode
error. Requests are not retried.
"""

from typing import Any, Dict, List, Optional

import httpx
from loguru import logger

from ..config import get_settings
from ..errors import DecodeError, TransportError

RawRecord = Dict[str, Any]


class CollectionClient:
    """
    Async client for fetching record collections.

    The client either owns its ``httpx.AsyncClient`` (and closes it on
    ``aclose``) or borrows one supplied by the caller, such as the
    application-wide client created in the FastAPI lifespan.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Initialize the collection client.

        Args:
            timeout: Per-request timeout in seconds
            client: Existing HTTP client to reuse instead of creating one
        """
        settings = get_settings()
        self.timeout = timeout or settings.request_timeout
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))

    async def __aenter__(self) -> "CollectionClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

    async def fetch(self, url: str) -> List[RawRecord]:
        """
        Fetch a collection of untyped records.

        Args:
            url: Absolute URL of a JSON array endpoint

        Returns:
            List[RawRecord]: Decoded records in fetch order

        Raises:
            TransportError: If the request fails, times out or returns a non-2xx status
            DecodeError: If the body is not a JSON array of objects
        """
        logger.debug(f"Fetching collection from {url}")

        try:
            response = await self.client.get(url, timeout=self.timeout)
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to {url} timed out after {self.timeout}s", url=url) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {url} failed: {e}", url=url) from e

        if not response.is_success:
            raise TransportError(
                f"HTTP {response.status_code} from {url}",
                url=url,
                status_code=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"Invalid JSON from {url}: {e}", url=url) from e

        if not isinstance(data, list):
            raise DecodeError(
                f"Expected a JSON array from {url}, got {type(data).__name__}",
                url=url
            )
        for index, item in enumerate(data):
            if not isinstance(item, dict):
                raise DecodeError(
                    f"Expected a JSON object at index {index} from {url}, got {type(item).__name__}",
                    url=url
                )

        logger.info(f"Fetched {len(data)} records from {url}")
        return data
