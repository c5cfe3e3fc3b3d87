from abc import ABC, abstractmethod
from typing import List
from playwright.async_api import Page
from glints_scraper.core.models import JobRecord


class JobBoardAdapter(ABC):
    """
    Abstract base class for job board adapters.

    The pipeline only talks to this interface; selectors and text heuristics
    stay inside each concrete adapter.
    """

    # Registry key in the runner's ADAPTERS map
    name: str = ""

    @abstractmethod
    def build_search_url(self, query: str) -> str:
        """
        Build the search results URL for a free-text query.
        Raises:
            ValueError: if the query is blank.
        """
        pass

    @abstractmethod
    async def load_search_results(self, page: Page, query: str) -> None:
        """
        Navigate to the search results and make sure job cards are rendered.
        Raises:
            NavigationTimeoutError: if the page did not load in time.
            NoListingsError: if no job card appeared in time.
        """
        pass

    @abstractmethod
    async def extract_listings(self, page: Page) -> List[JobRecord]:
        """
        Parse the loaded results into job records. Never raises for a single
        bad card.
        """
        pass
