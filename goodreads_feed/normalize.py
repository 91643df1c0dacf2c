"""Text clean-up for raw feed entries."""
import re
from dataclasses import replace

from goodreads_feed.models import BookEntry

# Unterminated trailing tags are removed too
MARKUP_RE = re.compile(r"<[^>]*(>|$)")
MULTI_SPACE_RE = re.compile(r"\s\s+")
EDGE_QUOTES_RE = re.compile(r"^[\"“\s]+|[\"”\s]+$")
PERIOD_RE = re.compile(r"\.([a-zA-Z0-9])")


def strip_markup(text: str) -> str:
    """Remove HTML-like tags."""
    return MARKUP_RE.sub("", text)


def normalize_whitespace(text: str) -> str:
    """Turn newlines into spaces, collapse whitespace runs, trim."""
    text = text.replace("\n", " ")
    return MULTI_SPACE_RE.sub(" ", text).strip()


def trim_quotes(text: str) -> str:
    """Drop leading and trailing runs of double quotes and any whitespace they enclose."""
    return EDGE_QUOTES_RE.sub("", text)


def space_after_periods(text: str) -> str:
    """'etc.Next' -> 'etc. Next', for every occurrence."""
    return PERIOD_RE.sub(r". \1", text)


def clean_description(text: str) -> str:
    """
    Clean a book description.

    The steps run in this order: markup, whitespace, quotes, periods.
    Stripping tags first keeps collapsed tags from leaving double spaces.
    """
    text = strip_markup(text)
    text = normalize_whitespace(text)
    text = trim_quotes(text)
    return space_after_periods(text)


def normalize_entry(entry: BookEntry) -> BookEntry:
    """
    Return a cleaned copy of an entry.

    Only ``content`` and ``book_description`` are touched; missing or empty
    values are left as they are.

    Args:
        entry: Raw entry from the feed

    Returns:
        New BookEntry
    """
    changes = {}

    if entry.content:
        changes["content"] = normalize_whitespace(entry.content)

    if entry.book_description:
        changes["book_description"] = clean_description(entry.book_description)

    return replace(entry, **changes)
