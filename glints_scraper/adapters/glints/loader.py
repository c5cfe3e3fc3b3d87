"""
Search page loading for Glints.
Handles URL construction, navigation, lazy-load scrolling and the wait for job cards.
"""

import logging
import time
import urllib.parse
from typing import Optional
from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from glints_scraper.config.settings import settings
from glints_scraper.core.errors import NavigationTimeoutError, NoListingsError
from glints_scraper.adapters.glints.config import SEARCH_URL, SEARCH_FILTERS
from glints_scraper.adapters.glints.selectors import JOB_CARD_SELECTOR

logger = logging.getLogger(__name__)


def build_search_url(query: str) -> str:
    """
    Build the explore-page URL for a query. Spaces are form-encoded as ``+``.
    """
    if not query or not query.strip():
        raise ValueError("Search query must not be empty")

    params = {"keyword": query.strip(), **SEARCH_FILTERS}
    return f"{SEARCH_URL}?{urllib.parse.urlencode(params)}"


async def auto_scroll(
    page: Page,
    distance: Optional[int] = None,
    interval: Optional[int] = None,
    max_steps: Optional[int] = None,
    max_seconds: Optional[float] = None,
) -> int:
    """
    Scroll down in fixed steps until the distance scrolled reaches the page's
    scroll height. The height is re-read every step, so content that lazy-loads
    while scrolling keeps the loop going. Stops early at ``max_steps`` steps or
    ``max_seconds`` seconds so endlessly growing pages cannot hang the scrape.

    Returns the number of scroll steps taken.
    """
    distance = distance or settings.SCROLL_DISTANCE
    interval = settings.SCROLL_INTERVAL if interval is None else interval
    max_steps = max_steps or settings.MAX_SCROLL_STEPS
    max_seconds = settings.MAX_SCROLL_SECONDS if max_seconds is None else max_seconds

    total_height = 0
    steps = 0
    started = time.monotonic()

    while True:
        scroll_height = await page.evaluate("document.body.scrollHeight")
        await page.evaluate(f"window.scrollBy(0, {distance})")
        total_height += distance
        steps += 1

        if total_height >= scroll_height:
            logger.info(f"Reached bottom after {steps} scrolls ({scroll_height}px)")
            return steps

        if steps >= max_steps:
            logger.warning(f"Stopped scrolling at step limit ({max_steps})")
            return steps

        if time.monotonic() - started >= max_seconds:
            logger.warning(f"Stopped scrolling after {max_seconds}s without settling")
            return steps

        await page.wait_for_timeout(interval)


async def load_search_results(page: Page, query: str) -> None:
    """
    Open the search results for ``query`` and wait until job cards are rendered.
    """
    url = build_search_url(query)

    logger.info(f"Navigating to Glints search: {url}")
    try:
        await page.goto(
            url,
            wait_until="networkidle",
            timeout=settings.NAVIGATION_TIMEOUT,
        )
    except PlaywrightTimeoutError as e:
        raise NavigationTimeoutError(f"Timed out loading {url}") from e

    # Cards lazy-load as the viewport moves down
    await auto_scroll(page)

    try:
        await page.wait_for_selector(
            JOB_CARD_SELECTOR, timeout=settings.SELECTOR_TIMEOUT
        )
    except PlaywrightTimeoutError as e:
        logger.warning(f"No job cards appeared for '{query}'")
        raise NoListingsError(f"No job cards found for '{query}'") from e
