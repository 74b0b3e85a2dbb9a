"""
Legal Search Service

Orchestrates one search request across providers:
classify once → AustLII search → jade.io article resolution (bounded,
partial results allowed) → boost under the same gate → merge preferring
jade.io → final limit.
"""

from collections.abc import Iterable

import httpx

from src.config.logging_config import setup_logger
from src.services.search import jade
from src.services.search.austlii import AustLiiClient
from src.services.search.booster import boost_title_matches, should_boost
from src.services.search.classifier import classify_query
from src.services.search.models import SearchOptions, SearchResult
from src.services.search.reconciler import apply_limit, merge_search_results
from src.services.search.sort_mode import determine_sort_mode

logger = setup_logger(__name__)


class LegalSearchService:
    """Multi-provider case law / legislation search."""

    def __init__(self, austlii: AustLiiClient | None = None, jade_client: httpx.AsyncClient | None = None):
        """
        Args:
            austlii: AustLII client. Falls back to a default AustLiiClient.
            jade_client: Optional shared httpx.AsyncClient for jade.io lookups.
        """
        self.austlii = austlii or AustLiiClient()
        self.jade_client = jade_client

    async def _jade_results(self, query: str, options: SearchOptions, jade_urls: Iterable[str]) -> list[SearchResult]:
        article_ids = [i for i in (jade.extract_article_id(url) for url in jade_urls) if i is not None]
        articles = await jade.resolve_articles(article_ids, client=self.jade_client)
        results = await jade.search_jade(query, options)
        results.extend(jade.article_to_search_result(article, options.type) for article in articles)
        return results

    async def search(
        self,
        query: str,
        options: SearchOptions,
        jade_urls: Iterable[str] = (),
    ) -> list[SearchResult]:
        """
        Run a search and reconcile providers.

        Args:
            query: Free-text query.
            options: Request options.
            jade_urls: jade.io article URLs to cross-reference (lookups that fail are skipped).

        Returns:
            Deduplicated results, jade.io copies preferred, at most options.limit long.
        """
        classification = classify_query(query)
        sort_mode = determine_sort_mode(query, options, classification)

        austlii_results = await self.austlii.search(query, options, classification)

        jade_results = await self._jade_results(query, options, jade_urls)
        if should_boost(sort_mode, classification):
            jade_results = boost_title_matches(jade_results, query, classification)

        merged = merge_search_results(austlii_results, jade_results)
        logger.info(
            "Search %r → %s results (austlii=%s, jade=%s, kind=%s, sort=%s)",
            query,
            len(merged),
            len(austlii_results),
            len(jade_results),
            classification.kind.value,
            sort_mode,
        )
        return apply_limit(merged, options.limit)
