"""
Configuration settings for AusLaw Search
"""

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

# Use find_dotenv() to locate .env regardless of the current working directory.
# Falls back to an explicit path relative to this file (project root) if not found.
_dotenv_path = find_dotenv(usecwd=True) or str(Path(__file__).resolve().parent.parent.parent / ".env")
load_dotenv(_dotenv_path)


def _env_bool(name: str, default: str) -> bool:
    return (os.getenv(name, default)).strip().lower() in ("true", "1", "yes")


# ============================================
# Environment-based Configuration
# ============================================


class Config:
    """
    Centralized configuration loaded from environment variables.
    Edit .env file to change these values.
    """

    # AustLII provider
    AUSTLII_BASE_URL: str = os.getenv("AUSTLII_BASE_URL", "https://www.austlii.edu.au")
    AUSTLII_SEARCH_BASE: str = os.getenv("AUSTLII_SEARCH_BASE", "https://www.austlii.edu.au/cgi-bin/sinosrch.cgi")
    AUSTLII_REFERER: str = os.getenv("AUSTLII_REFERER", "https://www.austlii.edu.au/forms/search1.html")
    AUSTLII_USER_AGENT: str = os.getenv(
        "AUSTLII_USER_AGENT",
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    )
    # Seconds. AustLII can be slow on broad queries.
    AUSTLII_TIMEOUT: float = float(os.getenv("AUSTLII_TIMEOUT", "60"))

    # jade.io provider (article resolution only, no public search API)
    JADE_BASE_URL: str = os.getenv("JADE_BASE_URL", "https://jade.io")
    JADE_USER_AGENT: str = os.getenv("JADE_USER_AGENT", "auslaw-search/0.1.0 (legal research tool)")
    JADE_TIMEOUT: float = float(os.getenv("JADE_TIMEOUT", "15"))
    # Ceiling on concurrent article lookups against jade.io.
    JADE_MAX_CONCURRENCY: int = int(os.getenv("JADE_MAX_CONCURRENCY", "5"))

    # Search defaults
    DEFAULT_SEARCH_LIMIT: int = int(os.getenv("DEFAULT_SEARCH_LIMIT", "10"))
    MAX_SEARCH_LIMIT: int = int(os.getenv("MAX_SEARCH_LIMIT", "50"))
    DEFAULT_SORT_BY: str = os.getenv("DEFAULT_SORT_BY", "auto")

    # Reconciliation: provider whose copy wins when two lists hold the same citation.
    PREFERRED_SOURCE: str = os.getenv("PREFERRED_SOURCE", "jade")
    # When true, a citation collision only merges if the titles also overlap.
    DEDUP_TITLE_CHECK: bool = _env_bool("DEDUP_TITLE_CHECK", "false")

    # Retries for transient HTTP failures (timeouts, 429, 5xx)
    HTTP_RETRIES: int = int(os.getenv("HTTP_RETRIES", "2"))


# Singleton instance
config = Config()

VALID_SORT_BY = ("relevance", "date", "auto")
VALID_SOURCES = ("austlii", "jade")


def validate_config_dependencies() -> list[str]:
    """
    Check cross-field consistency of the loaded configuration.

    Returns a list of human-readable problems; empty when the config is usable.
    """
    errors: list[str] = []

    if config.MAX_SEARCH_LIMIT < 1:
        errors.append(f"MAX_SEARCH_LIMIT must be >= 1 (got {config.MAX_SEARCH_LIMIT})")
    if not 1 <= config.DEFAULT_SEARCH_LIMIT <= max(config.MAX_SEARCH_LIMIT, 1):
        errors.append(
            f"DEFAULT_SEARCH_LIMIT must be between 1 and MAX_SEARCH_LIMIT "
            f"(got {config.DEFAULT_SEARCH_LIMIT}, max {config.MAX_SEARCH_LIMIT})"
        )
    if config.AUSTLII_TIMEOUT <= 0:
        errors.append(f"AUSTLII_TIMEOUT must be positive (got {config.AUSTLII_TIMEOUT})")
    if config.JADE_TIMEOUT <= 0:
        errors.append(f"JADE_TIMEOUT must be positive (got {config.JADE_TIMEOUT})")
    if config.JADE_MAX_CONCURRENCY < 1:
        errors.append(f"JADE_MAX_CONCURRENCY must be >= 1 (got {config.JADE_MAX_CONCURRENCY})")
    if config.HTTP_RETRIES < 0:
        errors.append(f"HTTP_RETRIES must be >= 0 (got {config.HTTP_RETRIES})")
    if config.DEFAULT_SORT_BY not in VALID_SORT_BY:
        errors.append(f"DEFAULT_SORT_BY must be one of {', '.join(VALID_SORT_BY)} (got {config.DEFAULT_SORT_BY!r})")
    if config.PREFERRED_SOURCE not in VALID_SOURCES:
        errors.append(
            f"PREFERRED_SOURCE must be one of {', '.join(VALID_SOURCES)} (got {config.PREFERRED_SOURCE!r})"
        )

    return errors
