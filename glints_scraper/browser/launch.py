"""
Browser Acquisition

Either attaches to a remote browser automation service over CDP/WebSocket
or launches a local headless Chromium, depending on configuration.
"""

import logging
from playwright.async_api import Browser, Error as PlaywrightError, Playwright

from glints_scraper.config.settings import settings
from glints_scraper.core.errors import BrowserConnectionError

logger = logging.getLogger(__name__)

# Local launch arguments to reduce automation fingerprints
LAUNCH_ARGS = [
    "--disable-blink-features=AutomationControlled",
    "--disable-dev-shm-usage",
    "--no-sandbox",
    "--no-first-run",
    "--disable-gpu",
    "--hide-scrollbars",
    "--mute-audio",
]


def _auth_headers() -> dict:
    if settings.BROWSER_TOKEN:
        return {"Authorization": f"Bearer {settings.BROWSER_TOKEN}"}
    return {}


async def create_browser(playwright: Playwright) -> Browser:
    """
    Acquire a Chromium browser.

    Args:
        playwright: Started Playwright instance

    Returns:
        Browser instance

    Raises:
        BrowserConnectionError: if the remote endpoint is unreachable, rejects
            the token, or the local binary cannot start.
    """
    endpoint = settings.BROWSER_WS_ENDPOINT
    try:
        if endpoint:
            browser = await playwright.chromium.connect_over_cdp(
                endpoint,
                headers=_auth_headers(),
                timeout=settings.CONNECT_TIMEOUT,
            )
            logger.info("Connected to remote browser endpoint.")
        else:
            browser = await playwright.chromium.launch(
                headless=settings.HEADLESS,
                args=LAUNCH_ARGS,
            )
            logger.info(f"Browser launched (Headless: {settings.HEADLESS}).")
    except PlaywrightError as e:
        target = "remote browser" if endpoint else "local browser"
        raise BrowserConnectionError(f"Could not acquire {target}: {e}") from e

    return browser
