"""
Search Domain Models

SearchResult, RawSearchRecord and JadeArticle are plain frozen dataclasses.
SearchOptions is a frozen pydantic model so that bad request values are
rejected once, at the boundary, instead of deep inside the ranking code.
"""

from dataclasses import asdict, dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from src.config.settings import config

ResultType = Literal["case", "legislation"]
SortBy = Literal["relevance", "date", "auto"]
SortMode = Literal["relevance", "date"]
SearchMethod = Literal["auto", "title", "phrase", "all", "any", "near", "legis", "boolean"]
Jurisdiction = Literal["cth", "vic", "nsw", "qld", "sa", "wa", "tas", "nt", "act", "federal", "nz", "other"]


@dataclass(frozen=True)
class SearchResult:
    """One canonical search hit from a provider"""

    title: str
    url: str  # absolute, search decoration stripped
    source: str  # "austlii" | "jade"
    type: str  # "case" | "legislation"

    neutral_citation: str | None = None  # e.g. "[1992] HCA 23"
    reported_citation: str | None = None  # e.g. "(1992) 175 CLR 1"
    summary: str | None = None
    jurisdiction: str | None = None
    year: str | None = None

    # jade.io lookup link attached by cross-reference enrichment
    jade_url: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class RawSearchRecord:
    """A candidate as scraped from a provider result page, before normalization"""

    title: str
    url: str  # href as found, may be relative
    meta_html: str = ""  # ancillary metadata block markup


@dataclass(frozen=True)
class JadeArticle:
    """Metadata resolved from a jade.io article page"""

    id: int
    title: str
    url: str
    accessible: bool
    neutral_citation: str | None = None
    jurisdiction: str | None = None
    year: str | None = None


class SearchOptions(BaseModel):
    """Per-request search options. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    type: ResultType = "case"
    jurisdiction: Jurisdiction | None = None
    limit: int = Field(default=config.DEFAULT_SEARCH_LIMIT, ge=1, le=config.MAX_SEARCH_LIMIT)
    # Deployment default (DEFAULT_SORT_BY) applies only when the caller omits sort_by
    sort_by: SortBy | None = Field(default_factory=lambda: config.DEFAULT_SORT_BY)
    method: SearchMethod = "auto"
    offset: int = Field(default=0, ge=0)
