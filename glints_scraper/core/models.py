from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

SALARY_NOT_SPECIFIED = "Not specified"


@dataclass
class JobRecord:
    """
    One job listing scraped from a search results page.
    """

    title: str
    company: str
    location: str = ""
    salary: str = SALARY_NOT_SPECIFIED
    tags: List[str] = field(default_factory=list)
    link: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Shape stored in a chat message's ``metadata.jobs`` list."""
        return asdict(self)
