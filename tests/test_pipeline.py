"""Tests for the fetch-normalize-write pipeline."""
import asyncio
import json
from unittest.mock import MagicMock

import httpx
import pytest

from goodreads_feed.async_client import AsyncFeedReader
from goodreads_feed.client import FeedReader
from goodreads_feed.errors import ConfigSkip, FetchError
from goodreads_feed.models import BookEntry
from goodreads_feed.pipeline import sync_books, sync_books_async

FEED_URL = "https://www.goodreads.com/review/list_rss/1?shelf=read"


def make_reader(items=None, error=None):
    """Fake FeedReader whose read() returns items or raises."""
    reader = MagicMock(spec=FeedReader)
    if error is not None:
        reader.read.side_effect = error
    else:
        reader.read.return_value = items or []
    return reader


def test_sync_writes_normalized_books(tmp_path):
    """Test entries are cleaned and written in order."""
    items = [
        BookEntry(title="A", link="http://a", book_description="“A <b>bold</b> claim.”"),
        BookEntry(title="B", link="http://b", content="Line1\nLine2"),
        BookEntry(title="C", link="http://c"),
    ]
    output = tmp_path / "data" / "goodreads.books.json"

    result = sync_books(FEED_URL, output, reader=make_reader(items))

    assert result.count == 3
    assert result.skipped is False
    assert result.output_path == output
    data = json.loads(output.read_text(encoding="utf-8"))
    assert [d["title"] for d in data] == ["A", "B", "C"]
    assert data[0]["bookDescription"] == "A bold claim."
    assert data[1]["content"] == "Line1 Line2"
    assert data[2] == {"title": "C", "link": "http://c"}


def test_sync_keeps_duplicates(tmp_path):
    """Test one output entry per input entry."""
    item = BookEntry(title="Same", link="http://same", guid="g")
    output = tmp_path / "books.json"

    result = sync_books(FEED_URL, output, reader=make_reader([item, item]))

    assert result.count == 2
    assert len(json.loads(output.read_text(encoding="utf-8"))) == 2


def test_sync_empty_url_writes_nothing(tmp_path):
    """Test the skip path leaves the output untouched."""
    output = tmp_path / "books.json"
    output.write_text("previous", encoding="utf-8")

    result = sync_books("", output, reader=make_reader(error=ConfigSkip()))

    assert result.skipped is True
    assert result.count == 0
    assert result.output_path is None
    assert output.read_text(encoding="utf-8") == "previous"


def test_sync_empty_url_with_real_reader(tmp_path):
    """Test no file is created when no URL is configured."""
    output = tmp_path / "data" / "books.json"

    result = sync_books("", output)

    assert result.skipped is True
    assert not output.exists()
    assert not output.parent.exists()


def test_sync_empty_feed_writes_empty_array(tmp_path):
    """Test a fetched feed with no items still writes a file."""
    output = tmp_path / "books.json"

    result = sync_books(FEED_URL, output, reader=make_reader([]))

    assert result.skipped is False
    assert result.count == 0
    assert json.loads(output.read_text(encoding="utf-8")) == []


def test_sync_fetch_error_propagates(tmp_path):
    """Test fetch failures propagate and nothing is written."""
    output = tmp_path / "books.json"

    with pytest.raises(FetchError):
        sync_books(FEED_URL, output, reader=make_reader(error=FetchError("down")))

    assert not output.exists()


def test_sync_replaces_previous_file(tmp_path):
    """Test the output is fully overwritten."""
    output = tmp_path / "books.json"
    output.write_text(json.dumps([{"title": "Old", "link": "x"}] * 5), encoding="utf-8")

    sync_books(FEED_URL, output, reader=make_reader([BookEntry(title="New", link="y")]))

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data == [{"title": "New", "link": "y"}]


def test_sync_async(tmp_path, sample_rss):
    """Test the async pipeline end to end over a mock transport."""
    output = tmp_path / "books.json"

    async def go():
        transport = httpx.MockTransport(lambda request: httpx.Response(200, content=sample_rss))
        async with AsyncFeedReader(transport=transport) as reader:
            return await sync_books_async(FEED_URL, output, reader=reader)

    result = asyncio.run(go())

    assert result.count == 3
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data[0]["bookDescription"].startswith("A groundbreaking work")
    assert data[2] == {
        "title": "Bare Minimum",
        "link": "https://www.goodreads.com/review/show/7003",
    }


def test_sync_async_empty_url(tmp_path):
    """Test the async skip path."""
    output = tmp_path / "books.json"

    result = asyncio.run(sync_books_async("", output))

    assert result.skipped is True
    assert not output.exists()
