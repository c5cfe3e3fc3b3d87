"""
Per-field parsers for a job card snapshot: tags, salary and link.
"""

import urllib.parse
from typing import Iterable, List, Optional

from glints_scraper.core.models import SALARY_NOT_SPECIFIED
from glints_scraper.adapters.glints.config import BASE_URL
from glints_scraper.adapters.glints.selectors import PLACEHOLDER_TAGS, SALARY_PREFIX

MAX_TAGS = 3


def parse_tags(chips: Iterable[Optional[str]]) -> List[str]:
    """Trimmed chip labels minus badges and blanks, first three only."""
    tags = []
    for chip in chips:
        label = (chip or "").strip()
        if label and label not in PLACEHOLDER_TAGS:
            tags.append(label)
    return tags[:MAX_TAGS]


def parse_salary(card_text: Optional[str]) -> str:
    """First line of the card that starts with the rupiah prefix."""
    for line in (card_text or "").splitlines():
        line = line.strip()
        if line.startswith(SALARY_PREFIX):
            return line
    return SALARY_NOT_SPECIFIED


def normalize_link(href: Optional[str]) -> str:
    """Keep absolute URLs, resolve anything else against the Glints origin."""
    href = (href or "").strip()
    if urllib.parse.urlparse(href).scheme:
        return href
    return urllib.parse.urljoin(BASE_URL, href)
