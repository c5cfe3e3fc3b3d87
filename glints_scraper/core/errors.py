"""
Exceptions raised by the scraping pipeline.

Each one also derives from the matching builtin (``ConnectionError`` or
``TimeoutError``) so callers can catch either.
"""


class ScraperError(Exception):
    """Base class for every error the scraper raises."""


class BrowserConnectionError(ScraperError, ConnectionError):
    """The browser could not be launched or the remote endpoint refused us."""


class NavigationTimeoutError(ScraperError, TimeoutError):
    """The search page did not finish loading in time."""


class NoListingsError(ScraperError, TimeoutError):
    """No job card showed up before the selector wait expired."""


class DeadlineExceededError(ScraperError, TimeoutError):
    """The whole scrape took longer than the configured deadline."""
