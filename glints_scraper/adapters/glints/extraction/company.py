"""
Company / location splitting.

Glints renders the company name and its location in a single span, so they
reach us glued together ("Acme Inc (PT)Jakarta, Indonesia"). Each splitter
below takes the stripped text and returns ``(company, location)`` or None;
``split_company_location`` tries them in order and the first hit wins.
"""

import re
from typing import Callable, Optional, Tuple

Split = Optional[Tuple[str, str]]

# First words that mark the start of a location when there is no comma to go by
LOCATION_WORDS = frozenset(
    {
        "remote",
        "hybrid",
        "indonesia",
        "singapore",
        "malaysia",
        "vietnam",
        "taiwan",
        "dki",
        "kota",
        "kabupaten",
        "jakarta",
        "tangerang",
        "bekasi",
        "depok",
        "bogor",
        "bandung",
        "semarang",
        "yogyakarta",
        "surakarta",
        "solo",
        "surabaya",
        "malang",
        "sidoarjo",
        "bali",
        "denpasar",
        "medan",
        "palembang",
        "pekanbaru",
        "batam",
        "padang",
        "lampung",
        "makassar",
        "manado",
        "balikpapan",
        "samarinda",
        "pontianak",
        "banjarmasin",
        "jawa",
        "sumatera",
        "kalimantan",
        "sulawesi",
        "banten",
        "papua",
    }
)

_CASE_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


def looks_like_location(text: str) -> bool:
    if not text:
        return False
    if "," in text:
        return True
    first_word = re.split(r"[\s,]+", text, maxsplit=1)[0].lower()
    return first_word in LOCATION_WORDS


def split_on_line_break(text: str) -> Split:
    """First line is the company, the remaining lines are the location."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        return None
    return lines[0], ", ".join(lines[1:])


def split_on_parenthetical(text: str) -> Split:
    """
    Split right after the last top-level ``)`` that is immediately followed by
    more text: "Acme Inc (PT)Jakarta, Indonesia" -> ("Acme Inc (PT)", "Jakarta, Indonesia").
    """
    depth = 0
    boundary = None
    for index, char in enumerate(text):
        if char == "(":
            depth += 1
        elif char == ")" and depth > 0:
            depth -= 1
            following = text[index + 1 : index + 2]
            if depth == 0 and following and not following.isspace():
                boundary = index + 1

    if boundary is None:
        return None
    return text[:boundary].strip(), text[boundary:].strip()


def split_on_case_transition(text: str) -> Split:
    """
    Split where a lowercase letter runs straight into an uppercase one and the
    rest reads as a location: "AcmeCorpRemote" -> ("AcmeCorp", "Remote").
    The latest qualifying boundary wins.
    """
    for match in reversed(list(_CASE_BOUNDARY.finditer(text))):
        company = text[: match.start()].strip()
        location = text[match.start() :].strip()
        if company and looks_like_location(location):
            return company, location
    return None


def no_split(text: str) -> Split:
    return text, ""


COMPANY_SPLITTERS: Tuple[Callable[[str], Split], ...] = (
    split_on_line_break,
    split_on_parenthetical,
    split_on_case_transition,
    no_split,
)


def split_company_location(text: Optional[str]) -> Tuple[str, str]:
    """Return ``(company, location)``; both empty when there is no text."""
    text = (text or "").strip()
    if not text:
        return "", ""

    for splitter in COMPANY_SPLITTERS:
        result = splitter(text)
        if result and result[0]:
            return result
    return text, ""
