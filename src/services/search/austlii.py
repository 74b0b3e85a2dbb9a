"""
AustLII search provider

Builds sinosrch.cgi requests, fetches the result page with httpx, and runs
the candidates through the normalizer and (for named-authority queries in
relevance mode) the title-match booster.
"""

import httpx

from src.config.jurisdictions import JURISDICTION_PATH_SEGMENTS, NZ_JURISDICTION
from src.config.logging_config import setup_logger
from src.config.settings import config
from src.services.search.booster import boost_title_matches, should_boost
from src.services.search.classifier import QueryClassification, classify_query
from src.services.search.errors import AustLiiError
from src.services.search.models import SearchOptions, SearchResult, SortMode
from src.services.search.normalizer import normalize_results, parse_search_page
from src.services.search.reconciler import apply_limit
from src.services.search.sort_mode import determine_sort_mode
from src.utils.retry import retry_async

logger = setup_logger(__name__)

AUSTLII_SOURCE = "austlii"

TYPE_MASK_SEGMENTS = {"case": "cases", "legislation": "legis"}
SORT_VIEWS: dict[str, str] = {"relevance": "relevance", "date": "date-latest"}


def build_search_params(query: str, options: SearchOptions, sort_mode: SortMode) -> dict[str, str]:
    """
    Query-string parameters for AustLII's sinosrch.cgi.

    meta selects the concordance (/au, or /austlii for New Zealand);
    mask_path narrows to cases/legislation and, optionally, one jurisdiction.
    """
    type_segment = TYPE_MASK_SEGMENTS[options.type]

    if options.jurisdiction == NZ_JURISDICTION:
        meta = "/austlii"
        mask_path = f"nz/{type_segment}"
    else:
        meta = "/au"
        juri_segment = JURISDICTION_PATH_SEGMENTS.get(options.jurisdiction or "")
        mask_path = f"au/{type_segment}/{juri_segment}" if juri_segment else f"au/{type_segment}"

    params = {
        "method": options.method,
        "query": query,
        "meta": meta,
        "results": str(options.limit),
        "mask_path": mask_path,
    }
    if options.offset > 0:
        params["offset"] = str(options.offset)
    params["view"] = SORT_VIEWS[sort_mode]
    return params


class AustLiiClient:
    """Async client for AustLII case law and legislation search."""

    def __init__(
        self,
        search_url: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        retries: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Args:
            search_url: sinosrch.cgi endpoint. Falls back to AUSTLII_SEARCH_BASE.
            base_url: Host used to absolutize result links. Falls back to AUSTLII_BASE_URL.
            timeout: Request timeout in seconds. Falls back to AUSTLII_TIMEOUT.
            retries: Retries for transient failures. Falls back to HTTP_RETRIES.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        self.search_url = search_url or config.AUSTLII_SEARCH_BASE
        self.base_url = base_url or config.AUSTLII_BASE_URL
        self.timeout = timeout or config.AUSTLII_TIMEOUT
        self.retries = config.HTTP_RETRIES if retries is None else retries
        self.transport = transport
        self.headers = {
            "User-Agent": config.AUSTLII_USER_AGENT,
            "Referer": config.AUSTLII_REFERER,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-AU,en;q=0.9",
        }

    async def fetch_page(self, params: dict[str, str]) -> str:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers=self.headers,
            follow_redirects=True,
            transport=self.transport,
        ) as client:

            async def _get() -> httpx.Response:
                resp = await client.get(self.search_url, params=params)
                resp.raise_for_status()
                return resp

            try:
                resp = await retry_async(_get, retries=self.retries)
            except httpx.HTTPStatusError as e:
                raise AustLiiError(
                    f"AustLII search failed: {e}", status_code=e.response.status_code, cause=e
                ) from e
            except httpx.HTTPError as e:
                raise AustLiiError(f"AustLII search failed: {e}", cause=e) from e
        return resp.text

    async def search(
        self,
        query: str,
        options: SearchOptions,
        classification: QueryClassification | None = None,
    ) -> list[SearchResult]:
        """
        Search AustLII for Australian and New Zealand case law or legislation.

        Args:
            query: Case name, citation or topic.
            options: Request options (type, jurisdiction, limit, sort, method, offset).
            classification: Precomputed query classification, if the caller has one.

        Returns:
            At most options.limit results, boosted by title match for named-authority queries.

        Raises:
            AustLiiError: the request failed after retries.
        """
        if classification is None:
            classification = classify_query(query)
        sort_mode = determine_sort_mode(query, options, classification)
        params = build_search_params(query, options, sort_mode)

        html = await self.fetch_page(params)
        records = parse_search_page(html)
        results = normalize_results(records, options, source=AUSTLII_SOURCE, base_url=self.base_url)

        if should_boost(sort_mode, classification):
            results = boost_title_matches(results, query, classification)

        logger.info(
            "AustLII search → %s results (%s candidates, type=%s, sort=%s)",
            len(results),
            len(records),
            options.type,
            sort_mode,
        )
        return apply_limit(results, options.limit)
