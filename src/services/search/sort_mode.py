"""
Sort-Mode Selector

Named-authority lookups must surface the exact document regardless of age,
so they sort by relevance. Topic lookups sort by date. Legislation titles do
not follow case-naming conventions and always default to date.
"""

from src.services.search.classifier import QueryClassification, classify_query
from src.services.search.models import SearchOptions, SortMode


def determine_sort_mode(
    query: str,
    options: SearchOptions,
    classification: QueryClassification | None = None,
) -> SortMode:
    """Pick 'relevance' or 'date' from the explicit preference, the result type and the query shape."""
    if options.sort_by == "relevance":
        return "relevance"
    if options.sort_by == "date":
        return "date"

    # "auto" and None are the same thing
    if options.type == "case":
        if classification is None:
            classification = classify_query(query)
        if classification.is_named_authority:
            return "relevance"

    return "date"
