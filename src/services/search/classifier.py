"""
Query Classifier

Decides whether a free-text query names a specific authority (a case name,
a "Re X" matter, a neutral citation, or a quoted phrase) or describes a topic.

The classification is computed once per query and carries the extracted
parties / citation, so the sort-mode selector and the relevance booster read
the same result instead of re-running their own patterns.
"""

import re
from dataclasses import dataclass
from enum import Enum

from src.services.search.citations import NEUTRAL_CITATION_RE

# "Donoghue v Stevenson", "Smith v. Jones"
PARTY_RE = re.compile(r"\b(\w+)\s+v\.?\s+(\w+)", re.IGNORECASE)
# "Re Wakim", "In re Wakim"
MATTER_RE = re.compile(r"\b(?:re|in\s+re)\s+\w+", re.IGNORECASE)


class QueryKind(str, Enum):
    PARTY = "party"  # X v Y
    MATTER = "matter"  # Re X / In re X
    CITATION = "citation"  # [1992] HCA 23
    PHRASE = "phrase"  # contains a double quote
    TOPIC = "topic"


@dataclass(frozen=True)
class QueryClassification:
    kind: QueryKind
    parties: tuple[str, str] | None = None
    citation: str | None = None

    @property
    def is_named_authority(self) -> bool:
        return self.kind is not QueryKind.TOPIC


def classify_query(query: str | None) -> QueryClassification:
    """Classify *query*; the first matching rule (party, matter, citation, phrase) sets the kind."""
    if not query or not query.strip():
        return QueryClassification(kind=QueryKind.TOPIC)

    party_match = PARTY_RE.search(query)
    parties = (party_match.group(1), party_match.group(2)) if party_match else None
    citation_match = NEUTRAL_CITATION_RE.search(query)
    citation = citation_match.group(0) if citation_match else None

    if parties:
        kind = QueryKind.PARTY
    elif MATTER_RE.search(query):
        kind = QueryKind.MATTER
    elif citation:
        kind = QueryKind.CITATION
    elif '"' in query:
        kind = QueryKind.PHRASE
    else:
        kind = QueryKind.TOPIC

    return QueryClassification(kind=kind, parties=parties, citation=citation)


def is_case_name_query(query: str | None) -> bool:
    """True if the query looks like it names one specific case or document."""
    return classify_query(query).is_named_authority


def extract_parties(query: str | None) -> tuple[str, str] | None:
    """Return the (first, second) party tokens of an 'X v Y' query, if any."""
    return classify_query(query).parties
