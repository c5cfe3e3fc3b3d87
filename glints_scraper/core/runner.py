import asyncio
import logging
from typing import Callable, Dict, Iterable, List, Optional, Type
from glints_scraper.config.settings import settings
from glints_scraper.browser.session import BrowserSession
from glints_scraper.adapters.base import JobBoardAdapter
from glints_scraper.adapters.glints.adapter import GlintsAdapter
from glints_scraper.core.errors import (
    DeadlineExceededError,
    NoListingsError,
    ScraperError,
)
from glints_scraper.core.models import JobRecord
from glints_scraper.core.rate_limit import session_limiter, with_retry

logger = logging.getLogger(__name__)

ADAPTERS: Dict[str, Type[JobBoardAdapter]] = {
    adapter.name: adapter for adapter in (GlintsAdapter,)
}


def build_query(skills: Iterable[str], desired_industry: Optional[str] = "") -> str:
    """
    Join a profile's skills and desired industry into one search phrase.
    """
    terms = [term.strip() for term in [*skills, desired_industry or ""]]
    return " ".join(term for term in terms if term)


def summarize_results(records: List[JobRecord]) -> str:
    """
    One-line, user-facing summary of a scrape.
    """
    if not records:
        return "No jobs found, try again with a different search."
    noun = "job" if len(records) == 1 else "jobs"
    return f"Showing {len(records)} {noun}"


class Runner:
    """
    Runs the scrape pipeline: open session -> load results -> extract -> close.
    """

    def __init__(self, session_factory: Callable[[], BrowserSession] = BrowserSession):
        self._session_factory = session_factory

    async def run(
        self, query: str, portal: str = "glints", limit: Optional[int] = None
    ) -> List[JobRecord]:
        """
        Scrape job records for ``query`` within the configured deadline.

        Returns an empty list when the board shows no listings. Raises
        BrowserConnectionError, NavigationTimeoutError or DeadlineExceededError
        otherwise; the browser session is always closed first.
        """
        adapter_cls = ADAPTERS.get(portal.lower())
        if not adapter_cls:
            raise ValueError(
                f"Portal '{portal}' not supported. Available portals: {list(ADAPTERS.keys())}"
            )

        adapter = adapter_cls(limit=limit)  # type: ignore[call-arg]
        # Fail on a blank query before any browser is opened
        adapter.build_search_url(query)

        logger.info(f"Starting scrape for {portal} (Query: {query})")
        try:
            jobs = await asyncio.wait_for(
                self._run_pipeline(adapter, query),
                timeout=settings.SCRAPE_DEADLINE,
            )
        except ScraperError:
            raise
        except asyncio.TimeoutError as e:
            logger.error(f"Scrape for '{query}' exceeded {settings.SCRAPE_DEADLINE}s")
            raise DeadlineExceededError(
                f"Scrape did not finish within {settings.SCRAPE_DEADLINE}s"
            ) from e

        logger.info(f"Successfully scraped {len(jobs)} jobs.")
        return jobs

    @with_retry()
    async def _run_pipeline(
        self, adapter: JobBoardAdapter, query: str
    ) -> List[JobRecord]:
        async with session_limiter:
            async with self._session_factory() as context:
                page = await context.new_page()
                try:
                    await adapter.load_search_results(page, query)
                except NoListingsError:
                    return []
                return await adapter.extract_listings(page)


runner = Runner()
