"""HTTP client that reads a Goodreads shelf RSS feed."""
import requests
from typing import List, Optional
import logging

from goodreads_feed.errors import ConfigSkip, FetchError
from goodreads_feed.models import BookEntry
from goodreads_feed.parse import parse_feed

logger = logging.getLogger(__name__)

SKIP_MESSAGE = "📚 No Goodreads RSS feed found (set GOODREADS_RSS_FEED_URL)."


class FeedReader:
    """Fetches and parses one feed per call. Single attempt, no retries."""

    def __init__(
        self,
        timeout: Optional[float] = 30,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the feed reader.

        Args:
            timeout: Request timeout in seconds (None waits forever)
            user_agent: User-Agent header value
            session: Existing session to use instead of a new one
        """
        self.timeout = timeout

        # Create session for connection pooling
        self.session = session or requests.Session()
        if user_agent:
            self.session.headers.update({"User-Agent": user_agent})

    def read(self, url: str) -> List[BookEntry]:
        """
        Fetch and parse the feed at ``url``.

        Raises:
            ConfigSkip: If no URL is given
            FetchError: On network failure, non-2xx status or bad XML
        """
        if not url:
            raise ConfigSkip()

        logger.info(f"Fetching feed: {url}")

        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise FetchError(f"Request failed: {e}", url=url) from e

        if not 200 <= response.status_code < 300:
            raise FetchError(
                f"Status code {response.status_code}",
                url=url,
                status_code=response.status_code
            )

        feed = parse_feed(response.content)
        logger.info(f"Fetched {len(feed.items)} items")
        return feed.items

    def fetch(self, url: str) -> List[BookEntry]:
        """
        Fetch raw entries, returning an empty list when no URL is set.

        Args:
            url: Feed URL (may be empty)

        Returns:
            Entries in feed order, before normalization
        """
        try:
            return self.read(url)
        except ConfigSkip:
            logger.info(SKIP_MESSAGE)
            return []

    def close(self):
        """Close the session."""
        self.session.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
