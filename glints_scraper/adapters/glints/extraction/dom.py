"""
Job card extraction from the Glints explore page DOM.

The browser only collects raw text per card (one ``page.evaluate`` round
trip); all parsing happens here in Python so it can be tested without a page.
"""

import logging
from typing import Any, Dict, List, Optional
from playwright.async_api import Page

from glints_scraper.config.settings import settings
from glints_scraper.core.models import JobRecord
from glints_scraper.adapters.glints.config import RESULTS_CEILING
from glints_scraper.adapters.glints.selectors import (
    JOB_CARD_SELECTOR,
    TITLE_SELECTOR,
    COMPANY_LOCATION_SELECTOR,
    TAG_SELECTOR,
    LINK_SELECTOR,
)
from glints_scraper.adapters.glints.extraction.company import split_company_location
from glints_scraper.adapters.glints.extraction.fields import (
    parse_tags,
    parse_salary,
    normalize_link,
)

logger = logging.getLogger(__name__)

# Returns one snapshot per card, in DOM order
CARD_SNAPSHOT_SCRIPT = """
(selectors) => Array.from(document.querySelectorAll(selectors.card)).map((card) => {
    const textOf = (el) => (el && el.textContent) || "";
    const anchor = card.querySelector(selectors.link);
    return {
        title: textOf(card.querySelector(selectors.title)),
        companyLocation: textOf(card.querySelector(selectors.companyLocation)),
        tags: Array.from(card.querySelectorAll(selectors.tag)).map(textOf),
        href: anchor ? anchor.getAttribute("href") || "" : "",
        text: card.innerText || "",
    };
})
"""

SNAPSHOT_SELECTORS = {
    "card": JOB_CARD_SELECTOR,
    "title": TITLE_SELECTOR,
    "companyLocation": COMPANY_LOCATION_SELECTOR,
    "tag": TAG_SELECTOR,
    "link": LINK_SELECTOR,
}


def result_limit(limit: Optional[int] = None) -> int:
    """Configured record cap, clamped to 1..RESULTS_CEILING."""
    limit = settings.MAX_RESULTS if limit is None else limit
    return max(1, min(limit, RESULTS_CEILING))


def parse_card(raw: Dict[str, Any]) -> Optional[JobRecord]:
    """
    Build a JobRecord from a card snapshot.
    Returns None when the title or company cannot be recovered.
    """
    title = (raw.get("title") or "").strip()
    company, location = split_company_location(raw.get("companyLocation"))

    if not title or not company:
        return None

    return JobRecord(
        title=title,
        company=company,
        location=location,
        salary=parse_salary(raw.get("text")),
        tags=parse_tags(raw.get("tags") or []),
        link=normalize_link(raw.get("href")),
    )


def parse_cards(raw_cards: List[Dict[str, Any]], limit: int) -> List[JobRecord]:
    """Parse snapshots in order, skipping bad cards, until ``limit`` records."""
    records: List[JobRecord] = []
    for index, raw in enumerate(raw_cards):
        if len(records) >= limit:
            break
        try:
            record = parse_card(raw)
        except (AttributeError, TypeError, ValueError) as e:
            logger.debug(f"Skipping malformed job card {index}: {e}")
            continue

        if record is None:
            logger.debug(f"Skipping job card {index}: missing title or company")
            continue
        records.append(record)

    return records


async def extract_jobs_from_dom(
    page: Page, limit: Optional[int] = None
) -> List[JobRecord]:
    """
    Extract up to ``limit`` job records from the loaded explore page.
    """
    raw_cards = await page.evaluate(CARD_SNAPSHOT_SCRIPT, SNAPSHOT_SELECTORS)
    logger.info(f"Found {len(raw_cards)} job cards")

    records = parse_cards(raw_cards, result_limit(limit))
    logger.info(f"Extracted {len(records)} jobs from DOM")
    return records
