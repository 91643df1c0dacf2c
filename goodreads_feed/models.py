"""Data models for Goodreads shelf feed entries."""
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any, Tuple


# (feed element, attribute, JSON key), in output order.
# title and link come from the item itself, everything else is optional.
FIELD_MAP: List[Tuple[str, str, str]] = [
    ("guid", "guid", "guid"),
    ("pubDate", "pub_date", "pubDate"),
    ("title", "title", "title"),
    ("link", "link", "link"),
    ("book_id", "id", "id"),
    ("book_image_url", "book_image_url", "bookImageUrl"),
    ("book_small_image_url", "book_small_image_url", "bookSmallImageUrl"),
    ("book_medium_image_url", "book_medium_image_url", "bookMediumImageUrl"),
    ("book_large_image_url", "book_large_image_url", "bookLargeImageUrl"),
    ("book_description", "book_description", "bookDescription"),
    ("author_name", "author_name", "authorName"),
    ("isbn", "isbn", "isbn"),
    ("user_name", "user_name", "userName"),
    ("user_rating", "user_rating", "userRating"),
    ("user_read_at", "user_read_at", "userReadAt"),
    ("user_date_added", "user_date_added", "userDateAdded"),
    ("user_date_created", "user_date_created", "userDateCreated"),
    ("user_shelves", "user_shelves", "userShelves"),
    ("user_review", "user_review", "userReview"),
    ("average_rating", "average_rating", "averageRating"),
    ("book_published", "book_published", "bookPublished"),
    ("description", "content", "content"),
]


@dataclass
class BookEntry:
    """One shelf event: a book plus the user's reading data.

    Values stay as the feed-native strings. ``None`` means the element was
    missing from the item and the key is left out of the JSON output.
    """
    title: str
    link: str
    guid: Optional[str] = None
    pub_date: Optional[str] = None
    id: Optional[str] = None
    book_image_url: Optional[str] = None
    book_small_image_url: Optional[str] = None
    book_medium_image_url: Optional[str] = None
    book_large_image_url: Optional[str] = None
    book_description: Optional[str] = None
    author_name: Optional[str] = None
    isbn: Optional[str] = None
    user_name: Optional[str] = None
    user_rating: Optional[str] = None
    user_read_at: Optional[str] = None
    user_date_added: Optional[str] = None
    user_date_created: Optional[str] = None
    user_shelves: Optional[str] = None
    user_review: Optional[str] = None
    average_rating: Optional[str] = None
    book_published: Optional[str] = None
    content: Optional[str] = None

    @property
    def rating_str(self) -> str:
        """User rating for display, '-' when unrated."""
        if not self.user_rating or self.user_rating == "0":
            return "-"
        return self.user_rating

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready mapping with camelCase keys and absent fields dropped."""
        data = {}
        for _, attr, key in FIELD_MAP:
            value = getattr(self, attr)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BookEntry":
        """Build an entry from a mapping produced by ``to_dict``.

        Unknown keys are ignored.
        """
        kwargs = {
            attr: data[key]
            for _, attr, key in FIELD_MAP
            if key in data
        }
        kwargs.setdefault("title", "")
        kwargs.setdefault("link", "")
        return cls(**kwargs)


@dataclass
class Feed:
    """Parsed feed: channel metadata plus its items in document order."""
    title: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None
    items: List[BookEntry] = field(default_factory=list)

