"""
Citation Parser

Pure regex helpers for Australian / New Zealand citations:
- neutral citations:  [1992] HCA 23, [2008] NSWSC 323
- reported citations: (1992) 175 CLR 1, [2024] 1 NZLR 456

The two matchers are independent; a single string may contain both.
"""

import re
from typing import NamedTuple

from src.config.jurisdictions import COURT_TO_JURISDICTION

# [YYYY] COURT NUM. Court is one or two uppercase letter tokens; a volume
# number between the year and the court means a reported citation instead.
NEUTRAL_CITATION_RE = re.compile(r"\[(\d{4})\]\s*([A-Z]+(?:\s+[A-Z]+)?)\s*(\d+)")

# (YYYY) VOL REPORTER PAGE or [YYYY] VOL REPORTER PAGE
REPORTED_CITATION_RE = re.compile(r"(?:\((\d{4})\)|\[(\d{4})\])\s+(\d+)\s+([A-Z]{2,6})\s+(\d+)")


class NeutralCitation(NamedTuple):
    citation: str  # the matched substring, e.g. "[1992] HCA 23"
    year: str
    court: str  # whitespace removed, e.g. "HCA"
    number: str


def extract_reported_citation(text: str | None) -> str | None:
    """Return the first reported citation in *text*, e.g. '(2024) 350 ALR 123'."""
    if not text:
        return None
    match = REPORTED_CITATION_RE.search(text)
    return match.group(0) if match else None


def parse_neutral_citation(text: str | None) -> NeutralCitation | None:
    """Return the first neutral citation in *text* with its parts, or None."""
    if not text:
        return None
    match = NEUTRAL_CITATION_RE.search(text)
    if not match:
        return None
    year, court, number = match.groups()
    return NeutralCitation(
        citation=match.group(0),
        year=year,
        court=re.sub(r"\s+", "", court),
        number=number,
    )


def extract_neutral_citation(text: str | None) -> str | None:
    """Return the first neutral citation in *text*, e.g. '[2024] HCA 26'."""
    parsed = parse_neutral_citation(text)
    return parsed.citation if parsed else None


def get_jurisdiction_from_court(court: str | None) -> str | None:
    """Map a court abbreviation (HCA, NSWSC, NZHC, ...) to a jurisdiction code."""
    if not court:
        return None
    normalized = re.sub(r"\s+", "", court).upper()
    return COURT_TO_JURISDICTION.get(normalized)
