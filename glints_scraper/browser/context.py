"""
Browser Context Factory

One isolated context per scrape, presenting a realistic desktop identity.
"""

import logging
from playwright.async_api import Browser, BrowserContext

from glints_scraper.config.settings import settings
from glints_scraper.browser.stealth import apply_stealth_scripts

logger = logging.getLogger(__name__)

EXTRA_HTTP_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
    "Accept-Language": "id-ID,id;q=0.9,en-US;q=0.8,en;q=0.7",
    "Upgrade-Insecure-Requests": "1",
}


async def create_context(browser: Browser, user_agent: str) -> BrowserContext:
    """
    Create a browsing context with a spoofed user agent and identity headers.

    Args:
        browser: Browser instance
        user_agent: User-agent string to present

    Returns:
        BrowserContext instance
    """
    context = await browser.new_context(
        user_agent=user_agent,
        viewport={"width": 1366, "height": 768},
        locale=settings.LOCALE,
        ignore_https_errors=settings.IGNORE_HTTPS_ERRORS,
        extra_http_headers=EXTRA_HTTP_HEADERS,
    )

    await apply_stealth_scripts(context, user_agent)

    logger.info(f"Browser context created (User Agent: {user_agent})")
    return context
