"""
Relevance Booster

Re-scores a provider's result list against a named-authority query so the
case actually being searched for comes first, not merely documents that
mention it. Reorders only: output length always equals input length.
"""

import re

from src.config.logging_config import setup_logger
from src.services.search.classifier import QueryClassification, classify_query
from src.services.search.models import SearchResult, SortMode

logger = setup_logger(__name__)

WORD_MATCH_SCORE = 10
SUBSTRING_SCORE = 50
PREFIX_SCORE = 30
BOTH_PARTIES_SCORE = 100
ONE_PARTY_SCORE = 20

MIN_WORD_LENGTH = 3
PREFIX_WORDS = 3
MIN_PREFIX_LENGTH = 6

_NON_WORD_RE = re.compile(r"[^\w\s]")


def normalize_text(text: str) -> str:
    """Lowercase, punctuation to spaces, whitespace collapsed."""
    return " ".join(_NON_WORD_RE.sub(" ", text.lower()).split())


def should_boost(sort_mode: SortMode, classification: QueryClassification) -> bool:
    return sort_mode == "relevance" and classification.is_named_authority


def score_title_match(
    title: str,
    query: str,
    classification: QueryClassification | None = None,
) -> int:
    """Score how closely *title* matches *query*. Higher is better."""
    if classification is None:
        classification = classify_query(query)

    normalized_query = normalize_text(query)
    normalized_title = normalize_text(title)
    title_words = set(normalized_title.split())
    query_words = {w for w in normalized_query.split() if len(w) >= MIN_WORD_LENGTH}

    score = WORD_MATCH_SCORE * len(query_words & title_words)

    if normalized_query and normalized_query in normalized_title:
        score += SUBSTRING_SCORE

    query_start = " ".join(normalized_query.split()[:PREFIX_WORDS])
    if len(query_start) >= MIN_PREFIX_LENGTH and normalized_title.startswith(query_start):
        score += PREFIX_SCORE

    if classification.parties:
        first, second = (party.lower() for party in classification.parties)
        has_first = first in normalized_title
        has_second = second in normalized_title
        if has_first and has_second:
            score += BOTH_PARTIES_SCORE
        elif has_first or has_second:
            score += ONE_PARTY_SCORE

    return score


def boost_title_matches(
    results: list[SearchResult],
    query: str,
    classification: QueryClassification | None = None,
) -> list[SearchResult]:
    """Return a new list ordered by title-match score, ties kept in input order."""
    if not results:
        return []
    if classification is None:
        classification = classify_query(query)

    scores = [score_title_match(result.title, query, classification) for result in results]
    order = sorted(range(len(results)), key=lambda i: scores[i], reverse=True)
    logger.debug("Boosted %s results for %r (top score %s)", len(results), query, scores[order[0]])
    return [results[i] for i in order]
