"""
Glints-specific constants.
"""

# Base URLs
BASE_URL = "https://glints.com"
SEARCH_URL = "https://glints.com/id/opportunities/jobs/explore"

# Fixed search filters: all of Indonesia
SEARCH_FILTERS = {
    "country": "ID",
    "locationName": "All Cities/Provinces",
    "lowestLocationLevel": 1,
}

# Hard upper bound on records per scrape, whatever MAX_RESULTS says
RESULTS_CEILING = 9
