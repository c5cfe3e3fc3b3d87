"""
GlintsAdapter - Job board adapter for glints.com (Indonesia)

Implements JobBoardAdapter. Delegates the work to submodules:
- loader.py for URL construction, navigation and lazy-load scrolling
- extraction/ for turning job cards into JobRecords
"""

import logging
from typing import List, Optional
from playwright.async_api import Page

from glints_scraper.adapters.base import JobBoardAdapter
from glints_scraper.core.models import JobRecord
from glints_scraper.adapters.glints import loader as loader_module
from glints_scraper.adapters.glints.extraction.dom import extract_jobs_from_dom

logger = logging.getLogger(__name__)


class GlintsAdapter(JobBoardAdapter):
    """
    Glints explore-page adapter.
    """

    name = "glints"

    def __init__(self, limit: Optional[int] = None):
        self.limit = limit

    def build_search_url(self, query: str) -> str:
        return loader_module.build_search_url(query)

    async def load_search_results(self, page: Page, query: str) -> None:
        await loader_module.load_search_results(page, query)

    async def extract_listings(self, page: Page) -> List[JobRecord]:
        return await extract_jobs_from_dom(page, self.limit)
