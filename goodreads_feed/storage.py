"""JSON output for the site generator's data directory."""
import json
from pathlib import Path
from typing import Iterable, List, Union
import logging

from goodreads_feed.models import BookEntry

logger = logging.getLogger(__name__)


def dump_books(entries: Iterable[BookEntry]) -> str:
    """Serialize entries as a pretty JSON array (2-space indent)."""
    data = [entry.to_dict() for entry in entries]
    return json.dumps(data, indent=2, ensure_ascii=False)


def write_books(entries: Iterable[BookEntry], path: Union[str, Path]) -> Path:
    """
    Write entries to ``path``, replacing whatever was there.

    Parent directories are created as needed. I/O errors propagate.

    Args:
        entries: Normalized entries
        path: Output file

    Returns:
        The path written
    """
    path = Path(path)
    text = dump_books(entries)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)

    logger.debug(f"Wrote {len(text)} characters to {path}")
    return path


def load_books(path: Union[str, Path]) -> List[BookEntry]:
    """Read a file written by ``write_books``."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return [BookEntry.from_dict(item) for item in data]
