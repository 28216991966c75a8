"""HTTP client for the DepartureVision pages, backed by the document cache."""

import asyncio
import logging
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

import aiohttp

from njt_departures.adapters.api_rate_limiter import ApiRateLimiter
from njt_departures.adapters.api_request_logger import log_api_request
from njt_departures.adapters.njt_html.constants import DEFAULT_HEADERS
from njt_departures.adapters.njt_html.document_cache import DocumentCache
from njt_departures.domain.errors import FetchError
from njt_departures.domain.models import ErrorDetails

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

DEFAULT_TIMEOUT_SECONDS = 10
# Minimum delay between live requests to the same host
DEFAULT_MIN_DELAY_SECONDS = 0.5


class NjtHttpClient:
    """Fetches documents, returning the cached copy while it is fresh."""

    def __init__(
        self,
        session: "ClientSession",
        cache: DocumentCache,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        min_delay_seconds: float = DEFAULT_MIN_DELAY_SECONDS,
    ) -> None:
        """Initialize with an aiohttp session and a document cache."""
        self._session = session
        self._cache = cache
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._min_delay_seconds = min_delay_seconds

    async def fetch(self, url: str) -> bytes:
        """Retrieve a document from the network.

        Raises:
            FetchError: The request failed or returned a non-200 status.
        """
        host = urlsplit(url).hostname or url
        rate_limiter = await ApiRateLimiter.get_instance(host, self._min_delay_seconds)
        await rate_limiter.acquire()

        log_api_request("GET", url, headers=DEFAULT_HEADERS)

        try:
            async with self._session.get(
                url, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                if response.status != 200:
                    raise FetchError(
                        url, ErrorDetails(status_code=response.status, reason=response.reason or "")
                    )
                return await response.read()
        except aiohttp.ClientError as e:
            raise FetchError(url, ErrorDetails(reason=str(e) or type(e).__name__)) from e
        except asyncio.TimeoutError as e:
            raise FetchError(url, ErrorDetails(reason="request timed out")) from e

    async def fetch_cached(self, url: str, file_name: str) -> str:
        """Return the document text, refreshing the cached copy when stale."""
        if self._cache.is_fresh(file_name):
            logger.debug(f"Using cached {self._cache.path_for(file_name)}")
        else:
            self._cache.write(file_name, await self.fetch(url))

        text = self._cache.read(file_name)
        logger.debug(f"read {len(text)} bytes from {self._cache.path_for(file_name)}")
        return text
