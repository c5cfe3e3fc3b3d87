"""
All selectors and markup assumptions used by the Glints adapter.
Centralized here so that a layout change only needs edits in one place.
"""

# One job card per listing on the explore page
JOB_CARD_SELECTOR = "div[aria-label^='Job:']"

# Inside a card
TITLE_SELECTOR = "h2"
COMPANY_LOCATION_SELECTOR = "span[data-cy='company_name_job_card']"
TAG_SELECTOR = ".TagStyle__TagContentWrapper-sc-r1wv7a-1"
LINK_SELECTOR = "a"

# Chip labels that are badges, not job attributes
PLACEHOLDER_TAGS = frozenset({"Perusahaan Premium", "Premium Company"})

# Salary lines start with the rupiah prefix
SALARY_PREFIX = "Rp"
