"""
Cross-Source Reconciler

Merges result lists from several providers into one list with at most one
entry per neutral citation. When two providers hold the same authority the
preferred provider's copy is kept, in the position the authority was first
seen. Results without a neutral citation are never treated as duplicates.

Callers merging two provider lists put the preferred provider first, so that
first-encounter-wins also implements provider preference.
"""

from src.config.logging_config import setup_logger
from src.config.settings import config
from src.services.search.booster import normalize_text
from src.services.search.models import SearchResult

logger = setup_logger(__name__)

# Minimum word overlap (Jaccard) for two same-citation titles to count as one document
TITLE_OVERLAP_THRESHOLD = 0.3


def _title_words(title: str) -> set[str]:
    return {w for w in normalize_text(title).split() if len(w) > 2 and not w.isdigit()}


def titles_compatible(first: str, second: str) -> bool:
    """Loose check that two titles plausibly name the same document."""
    a, b = _title_words(first), _title_words(second)
    if not a or not b:
        return True
    return len(a & b) / len(a | b) >= TITLE_OVERLAP_THRESHOLD


def deduplicate_results(
    results: list[SearchResult],
    preferred_source: str | None = None,
    check_titles: bool | None = None,
) -> list[SearchResult]:
    """
    Collapse results sharing a neutral citation.

    Args:
        results: Results from one or more providers, in priority order.
        preferred_source: Provider whose copy wins a collision. Defaults to PREFERRED_SOURCE.
        check_titles: Only merge collisions whose titles overlap. Defaults to DEDUP_TITLE_CHECK.

    Returns:
        New list in first-seen order. The input is not modified.
    """
    preferred_source = preferred_source or config.PREFERRED_SOURCE
    if check_titles is None:
        check_titles = config.DEDUP_TITLE_CHECK

    merged: list[SearchResult] = []
    # one slot per distinct document; several only when title checking splits a citation
    indices_by_citation: dict[str, list[int]] = {}
    replaced = dropped = 0

    for result in results:
        key = result.neutral_citation
        if not key:
            merged.append(result)
            continue

        slots = indices_by_citation.setdefault(key, [])
        idx = next(
            (i for i in slots if not check_titles or titles_compatible(merged[i].title, result.title)),
            None,
        )
        if idx is None:
            if slots:
                logger.warning(
                    "Citation %s shared by unrelated titles %r and %r; keeping both",
                    key,
                    merged[slots[0]].title,
                    result.title,
                )
            slots.append(len(merged))
            merged.append(result)
            continue

        existing = merged[idx]
        if result.source == preferred_source and existing.source != preferred_source:
            merged[idx] = result
            replaced += 1
        else:
            dropped += 1

    if replaced or dropped:
        logger.debug(
            "Deduplicated %s results to %s (%s replaced by %s, %s dropped)",
            len(results),
            len(merged),
            replaced,
            preferred_source,
            dropped,
        )
    return merged


def merge_search_results(
    primary: list[SearchResult],
    preferred: list[SearchResult],
    preferred_source: str | None = None,
) -> list[SearchResult]:
    """Merge two provider lists; *preferred* may be a partial (even empty) subset."""
    return deduplicate_results([*preferred, *primary], preferred_source=preferred_source)


def apply_limit(results: list[SearchResult], limit: int) -> list[SearchResult]:
    return results[: max(limit, 0)]
