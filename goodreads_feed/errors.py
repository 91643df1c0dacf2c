"""Exceptions raised while fetching the shelf feed."""


class GoodreadsFeedError(Exception):
    """Base class for feed errors."""


class ConfigSkip(GoodreadsFeedError):
    """No feed URL is configured; nothing to fetch or write."""

    def __init__(self, message: str = "No Goodreads RSS feed URL configured"):
        super().__init__(message)


class FetchError(GoodreadsFeedError):
    """Feed could not be retrieved or parsed."""

    def __init__(self, message: str, url: str = "", status_code: int = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
