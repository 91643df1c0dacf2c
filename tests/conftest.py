"""Shared fixtures."""
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_rss() -> bytes:
    """A Goodreads 'read' shelf feed with three items."""
    return (FIXTURES / "goodreads_read.xml").read_bytes()
