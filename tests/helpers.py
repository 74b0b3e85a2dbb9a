"""
Shared test helpers. Used across unit tests to avoid duplication.
"""

from src.services.search.models import RawSearchRecord, SearchResult


def make_search_result(title: str = "Test Case", **overrides: object) -> SearchResult:
    """Create a minimal AustLII case SearchResult with sensible defaults for tests."""
    defaults: dict[str, object] = {
        "title": title,
        "url": f"https://www.austlii.edu.au/au/cases/cth/{title.replace(' ', '_')}.html",
        "source": "austlii",
        "type": "case",
    }
    defaults.update(overrides)
    return SearchResult(**defaults)


def make_raw_record(title: str, url: str, meta_html: str = "") -> RawSearchRecord:
    return RawSearchRecord(title=title, url=url, meta_html=meta_html)


def make_results_page(*items: tuple[str, str, str]) -> str:
    """Build an AustLII-style result page from (title, href, meta_html) tuples."""
    lis = "\n".join(
        f'<li data-count="{n}." class="multi"><a href="{href}">{title}</a>{meta}</li>'
        for n, (title, href, meta) in enumerate(items, start=1)
    )
    return f"<html><body><ol>{lis}</ol></body></html>"


def make_jade_page(title: str) -> str:
    return f"<html><head><title>{title}</title></head><body><div id='gwt'></div></body></html>"
