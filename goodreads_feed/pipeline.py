"""Fetch, clean and save the shelf feed."""
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union
import logging

from goodreads_feed.async_client import AsyncFeedReader
from goodreads_feed.client import FeedReader, SKIP_MESSAGE
from goodreads_feed.errors import ConfigSkip
from goodreads_feed.models import BookEntry
from goodreads_feed.normalize import normalize_entry
from goodreads_feed.storage import write_books

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Outcome of one run."""
    count: int
    output_path: Optional[Path]
    skipped: bool = False


def _save(raw: List[BookEntry], output_path: Union[str, Path]) -> SyncResult:
    books = [normalize_entry(entry) for entry in raw]
    path = write_books(books, output_path)
    logger.info(f"Wrote {len(books)} books to {path}")
    return SyncResult(count=len(books), output_path=path)


def _skipped() -> SyncResult:
    logger.info(SKIP_MESSAGE)
    return SyncResult(count=0, output_path=None, skipped=True)


def sync_books(
    feed_url: str,
    output_path: Union[str, Path],
    reader: Optional[FeedReader] = None
) -> SyncResult:
    """
    Fetch the feed, normalize every entry and write the JSON file.

    No URL means nothing is fetched and nothing is written. A feed that
    was fetched but holds no items still writes an empty array.

    Args:
        feed_url: Feed URL (may be empty)
        output_path: JSON file to replace
        reader: Reader to use; a default FeedReader is created otherwise

    Returns:
        SyncResult with the number of books written

    Raises:
        FetchError: If the feed could not be fetched or parsed
    """
    own_reader = reader is None
    reader = reader or FeedReader()

    try:
        raw = reader.read(feed_url)
    except ConfigSkip:
        return _skipped()
    finally:
        if own_reader:
            reader.close()

    return _save(raw, output_path)


async def sync_books_async(
    feed_url: str,
    output_path: Union[str, Path],
    reader: Optional[AsyncFeedReader] = None
) -> SyncResult:
    """Same as sync_books, fetching with AsyncFeedReader."""
    own_reader = reader is None
    reader = reader or AsyncFeedReader()

    try:
        raw = await reader.read(feed_url)
    except ConfigSkip:
        return _skipped()
    finally:
        if own_reader:
            await reader.close()

    return _save(raw, output_path)
