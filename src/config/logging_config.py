"""
Logging Configuration for AusLaw Search

Every module gets its logger from setup_logger(__name__). Output is one JSON
object per line on stdout (LOG_FORMAT=json, the default) so provider calls,
dedup decisions and lookup failures can be filtered by field; LOG_FORMAT=text
gives plain lines for local debugging.
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "auslaw-search"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _build_formatter(fmt: str) -> logging.Formatter:
    if fmt == "text":
        return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)
    return JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt=DATE_FORMAT,
        rename_fields={"levelname": "level", "asctime": "timestamp"},
        static_fields={"service": SERVICE_NAME},
    )


def setup_logger(
    name: str = "auslaw",
    level: Optional[str] = None,
    fmt: Optional[str] = None,
) -> logging.Logger:
    """
    Create and configure a logger instance.

    Args:
        name: Logger name (usually __name__ of calling module)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
               Defaults to LOG_LEVEL env var or INFO
        fmt: "json" or "text". Defaults to LOG_FORMAT env var or json

    Returns:
        Configured logger instance
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
    if fmt is None:
        fmt = os.getenv("LOG_FORMAT", "json").lower()

    numeric_level = getattr(logging, level, logging.INFO)

    logger = logging.getLogger(name)

    # One handler per logger; repeated setup_logger calls only adjust the level
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(_build_formatter(fmt))
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(numeric_level)

    return logger


# Create default application logger
logger = setup_logger("auslaw")
