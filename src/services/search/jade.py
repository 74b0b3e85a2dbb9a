"""
jade.io (BarNet Jade) integration

jade.io has no public search API and renders content client-side, but the
initial HTML of an article page carries the case title and neutral citation
in its <title> element. This module provides:

1. jade.io URL detection, article-ID extraction and URL construction
2. Title metadata parsing (citation, year, jurisdiction)
3. Bounded-concurrency article resolution (failed lookups are simply omitted)
4. Conversion of resolved articles to SearchResult and cross-reference links
"""

import asyncio
import re
from collections.abc import Iterable
from dataclasses import replace
from urllib.parse import parse_qs, quote, urlsplit

import httpx
from bs4 import BeautifulSoup

from src.config.logging_config import setup_logger
from src.config.settings import config
from src.services.search.citations import get_jurisdiction_from_court, parse_neutral_citation
from src.services.search.models import JadeArticle, SearchOptions, SearchResult

logger = setup_logger(__name__)

JADE_SOURCE = "jade"

# jade.io's fallback <title> when an article is not publicly accessible
JADE_GENERIC_TITLE = "BarNet Jade - Find recent Australian legal decisions"

_TITLE_SUFFIX_RE = re.compile(r"\s*-\s*BarNet Jade\s*$", re.IGNORECASE)
_ARTICLE_PATH_RE = re.compile(r"/article/(\d+)")
# URI-component characters left unescaped on top of quote()'s defaults
_URI_COMPONENT_SAFE = "!'()*"


# ---------------------------------------------------------------------------
# URL utilities
# ---------------------------------------------------------------------------
def is_jade_url(url: str) -> bool:
    try:
        host = (urlsplit(url).hostname or "").lower()
    except ValueError:
        return False
    return host == "jade.io" or host.endswith(".jade.io")


def extract_article_id(url: str) -> int | None:
    """Article ID from /article/{id}[/...] or ?id={id} URLs."""
    match = _ARTICLE_PATH_RE.search(url)
    if match:
        return int(match.group(1))
    try:
        query = parse_qs(urlsplit(url).query)
    except ValueError:
        return None
    ids = query.get("id") or []
    if ids and ids[0].isdigit():
        return int(ids[0])
    return None


def build_article_url(article_id: int) -> str:
    return f"{config.JADE_BASE_URL}/article/{article_id}"


def build_search_url(query: str) -> str:
    """jade.io search URL. Opens the web app with the search pre-filled; not machine-readable."""
    return f"{config.JADE_BASE_URL}/search/{quote(query, safe=_URI_COMPONENT_SAFE)}"


def build_citation_lookup_url(citation: str) -> str:
    return build_search_url(citation)


# ---------------------------------------------------------------------------
# Title parsing
# ---------------------------------------------------------------------------
def parse_title_metadata(raw_title: str) -> dict:
    """
    Parse a jade.io page title: "Case Name [YYYY] COURT NUM - BarNet Jade".

    Returns dict with keys: title, neutral_citation, jurisdiction, year
    (the last three None when the title carries no neutral citation).
    """
    title = _TITLE_SUFFIX_RE.sub("", raw_title).strip()
    citation = parse_neutral_citation(title)
    if not citation:
        return {"title": title, "neutral_citation": None, "jurisdiction": None, "year": None}
    return {
        "title": title,
        "neutral_citation": citation.citation,
        "jurisdiction": get_jurisdiction_from_court(citation.court),
        "year": citation.year,
    }


# ---------------------------------------------------------------------------
# Article resolution
# ---------------------------------------------------------------------------
def _new_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=config.JADE_TIMEOUT,
        follow_redirects=True,
        headers={"User-Agent": config.JADE_USER_AGENT, "Accept": "text/html"},
    )


async def resolve_article(client: httpx.AsyncClient, article_id: int) -> JadeArticle:
    """Fetch an article page and read its <title>. Never raises for HTTP failures."""
    url = build_article_url(article_id)
    inaccessible = JadeArticle(id=article_id, title="", url=url, accessible=False)

    try:
        resp = await client.get(url)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        logger.warning("jade.io lookup failed for article %s: %s", article_id, e)
        return inaccessible

    soup = BeautifulSoup(resp.text, "html.parser")
    raw_title = " ".join(soup.title.get_text().split()) if soup.title else ""
    if not raw_title or raw_title.startswith(JADE_GENERIC_TITLE):
        logger.info("jade.io article %s is not publicly accessible", article_id)
        return inaccessible

    parsed = parse_title_metadata(raw_title)
    return JadeArticle(
        id=article_id,
        title=parsed["title"],
        url=url,
        accessible=True,
        neutral_citation=parsed["neutral_citation"],
        jurisdiction=parsed["jurisdiction"],
        year=parsed["year"],
    )


async def resolve_articles(
    article_ids: Iterable[int],
    max_concurrency: int | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[JadeArticle]:
    """
    Resolve many articles with at most *max_concurrency* requests in flight.

    Inaccessible or failed articles are left out, so the result can be shorter
    than the input. Order follows *article_ids*; duplicate IDs are resolved once.
    """
    ids = list(dict.fromkeys(article_ids))
    if not ids:
        return []
    semaphore = asyncio.Semaphore(max_concurrency or config.JADE_MAX_CONCURRENCY)

    async def _bounded(http: httpx.AsyncClient, article_id: int) -> JadeArticle:
        async with semaphore:
            return await resolve_article(http, article_id)

    if client is not None:
        articles = await asyncio.gather(*(_bounded(client, i) for i in ids))
    else:
        async with _new_client() as http:
            articles = await asyncio.gather(*(_bounded(http, i) for i in ids))

    resolved = [a for a in articles if a.accessible]
    logger.info("jade.io resolved %s of %s articles", len(resolved), len(ids))
    return resolved


async def resolve_article_from_url(url: str, client: httpx.AsyncClient | None = None) -> JadeArticle | None:
    article_id = extract_article_id(url)
    if article_id is None:
        return None
    if client is not None:
        return await resolve_article(client, article_id)
    async with _new_client() as http:
        return await resolve_article(http, article_id)


# ---------------------------------------------------------------------------
# Search result conversion and cross-reference
# ---------------------------------------------------------------------------
def article_to_search_result(article: JadeArticle, result_type: str) -> SearchResult:
    return SearchResult(
        title=article.title,
        url=article.url,
        source=JADE_SOURCE,
        type=result_type,
        neutral_citation=article.neutral_citation,
        jurisdiction=article.jurisdiction,
        year=article.year,
    )


def enrich_with_jade_links(results: list[SearchResult]) -> list[SearchResult]:
    """Attach a jade.io lookup URL to every result that has a neutral citation."""
    return [
        replace(result, jade_url=build_citation_lookup_url(result.neutral_citation))
        if result.neutral_citation
        else result
        for result in results
    ]


async def search_jade(query: str, options: SearchOptions) -> list[SearchResult]:
    """jade.io exposes no public search API, so there is nothing to query."""
    logger.debug("jade.io search not available; returning no results for %r", query)
    return []
