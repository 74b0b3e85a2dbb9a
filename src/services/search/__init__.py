"""
Legal search core: citation parsing, query classification, sort-mode
selection, result normalization, title-match boosting and cross-source
reconciliation for AustLII and jade.io.
"""

from .austlii import AustLiiClient, build_search_params
from .booster import boost_title_matches, score_title_match, should_boost
from .citations import (
    extract_neutral_citation,
    extract_reported_citation,
    get_jurisdiction_from_court,
    parse_neutral_citation,
)
from .classifier import QueryClassification, QueryKind, classify_query, is_case_name_query
from .errors import AustLiiError, LegalSearchError
from .jade import enrich_with_jade_links, resolve_articles
from .models import RawSearchRecord, SearchOptions, SearchResult
from .normalizer import normalize_result, normalize_results
from .reconciler import apply_limit, deduplicate_results, merge_search_results
from .service import LegalSearchService
from .sort_mode import determine_sort_mode

__all__ = [
    "AustLiiClient",
    "AustLiiError",
    "LegalSearchError",
    "LegalSearchService",
    "QueryClassification",
    "QueryKind",
    "RawSearchRecord",
    "SearchOptions",
    "SearchResult",
    "apply_limit",
    "boost_title_matches",
    "build_search_params",
    "classify_query",
    "deduplicate_results",
    "determine_sort_mode",
    "enrich_with_jade_links",
    "extract_neutral_citation",
    "extract_reported_citation",
    "get_jurisdiction_from_court",
    "is_case_name_query",
    "merge_search_results",
    "normalize_result",
    "normalize_results",
    "parse_neutral_citation",
    "resolve_articles",
    "score_title_match",
    "should_boost",
]
