"""Parse Goodreads RSS (and plain Atom) documents into book entries."""
import xml.etree.ElementTree as ET
from typing import Dict, Optional, Union
import logging

from goodreads_feed.errors import FetchError
from goodreads_feed.models import BookEntry, Feed, FIELD_MAP

logger = logging.getLogger(__name__)

ATOM_NS = "http://www.w3.org/2005/Atom"
CONTENT_ENCODED = "{http://purl.org/rss/1.0/modules/content/}encoded"


def _element_text(element: ET.Element) -> str:
    """Full text of an element, including any nested markup's text."""
    return "".join(element.itertext())


def parse_item(item: ET.Element) -> BookEntry:
    """
    Parse a single RSS <item> element.

    Args:
        item: The <item> element

    Returns:
        BookEntry with every mapped element that is present
    """
    # First occurrence wins; unmapped elements are dropped
    children: Dict[str, ET.Element] = {}
    for child in item:
        children.setdefault(child.tag, child)

    values = {}
    for element_name, attr, _ in FIELD_MAP:
        child = children.get(element_name)
        if child is not None:
            values[attr] = _element_text(child)

    if "content" not in values and CONTENT_ENCODED in children:
        values["content"] = _element_text(children[CONTENT_ENCODED])

    values.setdefault("title", "")
    values.setdefault("link", "")
    return BookEntry(**values)


def _atom(tag: str) -> str:
    return f"{{{ATOM_NS}}}{tag}"


def _atom_link(element: ET.Element) -> Optional[str]:
    """Prefer the rel="alternate" link, falling back to the first one."""
    links = element.findall(_atom("link"))
    for link in links:
        if link.get("rel", "alternate") == "alternate":
            return link.get("href")
    return links[0].get("href") if links else None


def parse_atom_entry(entry: ET.Element) -> BookEntry:
    """Parse an Atom <entry> into the same shape as an RSS item."""
    values = {}

    for tag, attr in (("id", "guid"), ("title", "title")):
        child = entry.find(_atom(tag))
        if child is not None:
            values[attr] = _element_text(child)

    for tag in ("updated", "published"):
        child = entry.find(_atom(tag))
        if child is not None:
            values["pub_date"] = _element_text(child)
            break

    for tag in ("content", "summary"):
        child = entry.find(_atom(tag))
        if child is not None:
            values["content"] = _element_text(child)
            break

    link = _atom_link(entry)
    if link is not None:
        values["link"] = link

    values.setdefault("title", "")
    values.setdefault("link", "")
    return BookEntry(**values)


def _parse_rss(root: ET.Element) -> Feed:
    channel = root.find("channel")
    if channel is None:
        raise FetchError("RSS document has no <channel> element")

    return Feed(
        title=channel.findtext("title"),
        link=channel.findtext("link"),
        description=channel.findtext("description"),
        items=[parse_item(item) for item in channel.findall("item")],
    )


def _parse_atom(root: ET.Element) -> Feed:
    return Feed(
        title=root.findtext(_atom("title")),
        link=_atom_link(root),
        description=root.findtext(_atom("subtitle")),
        items=[parse_atom_entry(entry) for entry in root.findall(_atom("entry"))],
    )


def parse_feed(document: Union[bytes, str]) -> Feed:
    """
    Parse a feed document.

    Args:
        document: Raw RSS 2.0 or Atom XML

    Returns:
        Feed with items in document order

    Raises:
        FetchError: If the document is not well-formed or not a feed
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as e:
        raise FetchError(f"Malformed feed document: {e}") from e

    if root.tag == "rss":
        feed = _parse_rss(root)
    elif root.tag == _atom("feed"):
        feed = _parse_atom(root)
    else:
        raise FetchError(f"Unrecognised feed root element: {root.tag}")

    logger.debug(f"Parsed {len(feed.items)} items from feed {feed.title!r}")
    return feed
