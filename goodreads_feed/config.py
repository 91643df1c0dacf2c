"""Configuration management."""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

VERSION = "0.1.0"


class Config:
    """Application configuration, read from the environment when created."""

    def __init__(self):
        # Feed
        self.GOODREADS_RSS_FEED_URL = os.getenv("GOODREADS_RSS_FEED_URL", "")

        # Output (Hugo data directory by default)
        self.GOODREADS_OUTPUT_FILE = os.getenv(
            "GOODREADS_OUTPUT_FILE", "data/goodreads.books.json"
        )

        # HTTP
        self.FEED_TIMEOUT = float(os.getenv("FEED_TIMEOUT", "30"))
        self.FEED_USER_AGENT = os.getenv(
            "FEED_USER_AGENT", f"goodreads-feed/{VERSION}"
        )
