"""Async HTTP client for the shelf feed."""
import httpx
from typing import List, Optional
import logging

from goodreads_feed.client import SKIP_MESSAGE
from goodreads_feed.errors import ConfigSkip, FetchError
from goodreads_feed.models import BookEntry
from goodreads_feed.parse import parse_feed

logger = logging.getLogger(__name__)


class AsyncFeedReader:
    """Async counterpart of FeedReader."""

    def __init__(
        self,
        timeout: Optional[float] = 30,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize async reader.

        Args:
            timeout: Request timeout (None waits forever)
            user_agent: User-Agent header value
            transport: Custom transport, mainly for tests
        """
        self.timeout = timeout
        headers = {"User-Agent": user_agent} if user_agent else None

        # Create async HTTP client
        self.client = httpx.AsyncClient(
            timeout=timeout,
            headers=headers,
            transport=transport,
            follow_redirects=True
        )

    async def read(self, url: str) -> List[BookEntry]:
        """Fetch and parse the feed; raises ConfigSkip or FetchError."""
        if not url:
            raise ConfigSkip()

        logger.info(f"Async fetch: {url}")

        try:
            response = await self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(f"Request failed: {e}", url=url) from e

        if not response.is_success:
            raise FetchError(
                f"Status code {response.status_code}",
                url=url,
                status_code=response.status_code
            )

        feed = parse_feed(response.content)
        logger.info(f"Fetched {len(feed.items)} items")
        return feed.items

    async def fetch(self, url: str) -> List[BookEntry]:
        """Fetch raw entries; empty list when no URL is set."""
        try:
            return await self.read(url)
        except ConfigSkip:
            logger.info(SKIP_MESSAGE)
            return []

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
