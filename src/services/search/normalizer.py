"""
Result Normalizer

Turns raw AustLII result-page candidates into canonical SearchResult records:
absolute, de-decorated URLs; primary sources of the requested type only;
neutral/reported citation, year and jurisdiction filled in where the title,
URL or metadata block allow it.

Malformed candidates (no title, no link) are expected scraping noise and are
dropped silently rather than failing the search.
"""

import re
from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

from bs4 import BeautifulSoup

from src.config.jurisdictions import JURISDICTION_PATH_SEGMENTS, NZ_JURISDICTION
from src.config.logging_config import setup_logger
from src.config.settings import config
from src.services.search.citations import extract_reported_citation, parse_neutral_citation
from src.services.search.models import RawSearchRecord, SearchOptions, SearchResult

logger = setup_logger(__name__)

# Query parameters AustLII appends to result links to echo the search.
# They change nothing about the document being shown.
SEARCH_DECORATION_PARAMS = frozenset({"stem", "synonyms", "num", "mask_path", "meta", "query", "method"})

COMMENTARY_PATH = "/journals/"
TYPE_PATHS = {"case": "/cases/", "legislation": "/legis/"}

_AU_JURISDICTION_RE = re.compile(
    r"/au/(?:cases|legis)/(" + "|".join(sorted(set(JURISDICTION_PATH_SEGMENTS.values()))) + r")/",
    re.IGNORECASE,
)
_NZ_PATH_RE = re.compile(r"/nz/(?:cases|legis)/", re.IGNORECASE)
_META_DATE_RE = re.compile(r"(\d{1,2}\s+\w+\s+\d{4})")


def clean_result_url(href: str, base_url: str | None = None) -> str:
    """Make *href* absolute against the provider host and strip search decoration.

    Absolute links to other hosts are returned untouched.
    """
    base_url = base_url or config.AUSTLII_BASE_URL
    href = href.strip()
    if not href:
        return ""

    base_host = urlsplit(base_url).netloc.lower()
    parts = urlsplit(href)
    if parts.netloc and parts.netloc.lower() != base_host:
        return href

    absolute = urlsplit(urljoin(base_url.rstrip("/") + "/", href))
    kept = [
        (key, value)
        for key, value in parse_qsl(absolute.query, keep_blank_values=True)
        if key not in SEARCH_DECORATION_PARAMS
    ]
    return urlunsplit((absolute.scheme, absolute.netloc, absolute.path, urlencode(kept), absolute.fragment))


def extract_jurisdiction(url: str) -> str | None:
    """Jurisdiction code from an AustLII path: au/<cases|legis>/<code>/ or the nz/ prefix."""
    au_match = _AU_JURISDICTION_RE.search(url)
    if au_match:
        return au_match.group(1).lower()
    if _NZ_PATH_RE.search(url):
        return NZ_JURISDICTION
    return None


def meta_text(meta_html: str) -> str:
    if not meta_html or not meta_html.strip():
        return ""
    return BeautifulSoup(meta_html, "html.parser").get_text(" ", strip=True)


def summarize_meta(meta_html: str) -> str | None:
    """Build 'Court - 3 June 1992' from a result's metadata block."""
    if not meta_html or not meta_html.strip():
        return None
    meta = BeautifulSoup(meta_html, "html.parser")
    text = meta.get_text(" ", strip=True)

    date_match = _META_DATE_RE.search(text)
    date_str = date_match.group(1) if date_match else None

    court_link = meta.find("a")
    court = " ".join(court_link.get_text().split()) if court_link else None

    if court:
        return f"{court} - {date_str}" if date_str else court
    return date_str


def is_wanted_path(url: str, result_type: str) -> bool:
    """Primary sources of the requested type only; commentary never."""
    if COMMENTARY_PATH in url:
        return False
    required = TYPE_PATHS.get(result_type)
    return required is None or required in url


def normalize_result(
    record: RawSearchRecord,
    options: SearchOptions,
    source: str = "austlii",
    base_url: str | None = None,
) -> SearchResult | None:
    """Convert one raw candidate into a SearchResult, or None if it should be dropped."""
    title = (record.title or "").strip()
    url = clean_result_url(record.url or "", base_url)
    if not title or not url:
        logger.debug("Dropping candidate without title or link: %r", record)
        return None

    if not is_wanted_path(url, options.type):
        logger.debug("Dropping %s candidate outside %s sources: %s", source, options.type, url)
        return None

    neutral = parse_neutral_citation(title)
    summary = summarize_meta(record.meta_html)

    return SearchResult(
        title=title,
        url=url,
        source=source,
        type=options.type,
        neutral_citation=neutral.citation if neutral else None,
        reported_citation=(
            extract_reported_citation(title)
            or extract_reported_citation(summary)
            or extract_reported_citation(meta_text(record.meta_html))
        ),
        summary=summary,
        jurisdiction=extract_jurisdiction(url),
        year=neutral.year if neutral else None,
    )


def normalize_results(
    records: list[RawSearchRecord],
    options: SearchOptions,
    source: str = "austlii",
    base_url: str | None = None,
) -> list[SearchResult]:
    """Normalize every candidate, keeping input order and dropping the unusable ones."""
    results = []
    for record in records:
        result = normalize_result(record, options, source=source, base_url=base_url)
        if result is not None:
            results.append(result)
    if len(results) < len(records):
        logger.debug("Normalized %s of %s %s candidates", len(results), len(records), source)
    return results


def parse_search_page(html: str) -> list[RawSearchRecord]:
    """Extract raw candidates from an AustLII result page (<li data-count class="multi">)."""
    if not html:
        return []
    soup = BeautifulSoup(html, "html.parser")
    records = []
    for item in soup.select("li[data-count].multi"):
        link = item.find("a")
        if link is None:
            continue
        meta = item.select_one("p.meta")
        records.append(
            RawSearchRecord(
                title=" ".join(link.get_text().split()),
                url=link.get("href") or "",
                meta_html=str(meta) if meta else "",
            )
        )
    return records
