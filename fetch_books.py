#!/usr/bin/env python3
"""Goodreads shelf feed CLI - fetch the RSS feed into a JSON data file."""
import argparse
import asyncio
import sys
import json
from tabulate import tabulate
from goodreads_feed.async_client import AsyncFeedReader
from goodreads_feed.client import FeedReader
from goodreads_feed.config import Config
from goodreads_feed.errors import FetchError
from goodreads_feed.pipeline import sync_books, sync_books_async
from goodreads_feed.storage import load_books
import logging

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure root logging for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


def fetch_books(args, config: Config):
    """Fetch the feed and write the JSON file."""
    url = args.url if args.url is not None else config.GOODREADS_RSS_FEED_URL
    output = args.output or config.GOODREADS_OUTPUT_FILE
    timeout = args.timeout if args.timeout is not None else config.FEED_TIMEOUT

    if args.use_async:
        reader = AsyncFeedReader(timeout=timeout, user_agent=config.FEED_USER_AGENT)
        result = asyncio.run(_fetch_async(reader, url, output))
    else:
        with FeedReader(timeout=timeout, user_agent=config.FEED_USER_AGENT) as reader:
            result = sync_books(url, output, reader=reader)

    if result.skipped:
        print("📚 No Goodreads RSS feed found (set GOODREADS_RSS_FEED_URL).")
    else:
        print(f"✅ Wrote {result.count} books to {result.output_path}")

    return result


async def _fetch_async(reader: AsyncFeedReader, url: str, output: str):
    async with reader:
        return await sync_books_async(url, output, reader=reader)


def display_books(books, format_type: str):
    """Display books in specified format."""
    if format_type == "table":
        headers = ["Title", "Author", "Rating", "Read", "Shelves"]
        rows = [
            [
                book.title[:50] + "..." if len(book.title) > 50 else book.title,
                book.author_name or "Unknown",
                book.rating_str,
                book.user_read_at or "",
                book.user_shelves or ""
            ]
            for book in books
        ]
        print("\n" + tabulate(rows, headers=headers, tablefmt="grid"))

    elif format_type == "json":
        print(json.dumps([book.to_dict() for book in books], indent=2, ensure_ascii=False))

    elif format_type == "compact":
        for i, book in enumerate(books, 1):
            print(f"{i}. {book.title} - {book.author_name or 'Unknown'}")


def show_books(args, config: Config):
    """Show a previously written data file."""
    path = args.input or config.GOODREADS_OUTPUT_FILE
    books = load_books(path)

    if args.limit:
        books = books[:args.limit]

    display_books(books, args.format)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Goodreads shelf feed - RSS to JSON for static sites",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fetch using GOODREADS_RSS_FEED_URL from the environment or .env
  %(prog)s fetch

  # Explicit feed and output file
  %(prog)s fetch --url "https://www.goodreads.com/review/list_rss/1?shelf=read" --output data/books.json

  # Look at what was written
  %(prog)s show --format table --limit 10
        """
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Fetch command
    fetch_parser = subparsers.add_parser("fetch", help="Fetch the feed and write JSON")
    fetch_parser.add_argument("--url", help="Feed URL (default: GOODREADS_RSS_FEED_URL)")
    fetch_parser.add_argument("--output", help="Output file (default: GOODREADS_OUTPUT_FILE)")
    fetch_parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    fetch_parser.add_argument("--async", dest="use_async", action="store_true", help="Use async client")

    # Show command
    show_parser = subparsers.add_parser("show", help="Display a written data file")
    show_parser.add_argument("--input", help="Data file (default: GOODREADS_OUTPUT_FILE)")
    show_parser.add_argument("--format", choices=["table", "json", "compact"], default="table", help="Output format")
    show_parser.add_argument("--limit", type=int, help="Limit results")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(args.verbose)

    try:
        config = Config()

        if args.command == "fetch":
            fetch_books(args, config)

        elif args.command == "show":
            show_books(args, config)

    except KeyboardInterrupt:
        logger.info("\n⚠️  Interrupted by user")
        sys.exit(0)
    except FetchError as e:
        print(f"❌ Error fetching Goodreads RSS feed: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.error(f"❌ Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
