import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Playwright,
)

from glints_scraper.browser.context import create_context
from glints_scraper.browser.launch import create_browser
from glints_scraper.browser.user_agent import UserAgentProvider
from glints_scraper.core.errors import BrowserConnectionError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BrowserSession:
    """
    Owns one browser connection and one browsing context for the duration of
    an ``async with`` block.

    Each session belongs to the call that opened it and is never shared.
    The browser, context and Playwright driver are released on every exit path.

    Example:
        async with BrowserSession() as context:
            page = await context.new_page()
    """

    def __init__(
        self,
        playwright_factory: Callable[[], Any] = async_playwright,
        user_agent: Optional[str] = None,
    ):
        self._playwright_factory = playwright_factory
        self._user_agent = user_agent
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None

    @property
    def context(self) -> Optional[BrowserContext]:
        return self._context

    async def open(self) -> BrowserContext:
        """
        Start Playwright, acquire a browser and create the browsing context.
        Anything acquired before a failure is released before re-raising.
        """
        try:
            self._playwright = await self._playwright_factory().start()
            logger.info("Playwright started.")

            self._browser = await create_browser(self._playwright)

            user_agent = self._user_agent or UserAgentProvider.get()
            self._context = await create_context(self._browser, user_agent)
        except PlaywrightError as e:
            await self.close()
            raise BrowserConnectionError(f"Could not open browser session: {e}") from e
        except BaseException:
            await self.close()
            raise

        return self._context

    async def close(self):
        """
        Close the context and browser and stop Playwright. Teardown errors are
        logged, never raised, so they cannot mask the error that ended the session.
        """
        if self._context:
            try:
                await self._context.close()
                logger.info("Browser context closed.")
            except Exception as e:
                logger.warning(f"Error closing browser context: {e}")
            self._context = None

        if self._browser:
            try:
                await self._browser.close()
                logger.info("Browser closed.")
            except Exception as e:
                logger.warning(f"Error closing browser: {e}")
            self._browser = None

        if self._playwright:
            try:
                await self._playwright.stop()
                logger.info("Playwright stopped.")
            except Exception as e:
                logger.warning(f"Error stopping Playwright: {e}")
            self._playwright = None

    async def __aenter__(self) -> BrowserContext:
        return await self.open()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


async def with_session(
    action: Callable[[BrowserContext], Awaitable[T]], **session_kwargs
) -> T:
    """
    Run ``action`` with a fresh browsing context and return its result.
    The session is torn down whether ``action`` returns or raises.
    """
    async with BrowserSession(**session_kwargs) as context:
        return await action(context)
