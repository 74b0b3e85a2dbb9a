"""
Pytest configuration and shared fixtures.
Run from project root: python -m pytest tests/ -v
"""

import os
import sys
from pathlib import Path

# Set env vars before any app imports (ensures deterministic test behavior)
os.environ["PREFERRED_SOURCE"] = "jade"
os.environ["DEDUP_TITLE_CHECK"] = "false"
os.environ["DEFAULT_SORT_BY"] = "auto"
os.environ["DEFAULT_SEARCH_LIMIT"] = "10"
os.environ["MAX_SEARCH_LIMIT"] = "50"
os.environ["HTTP_RETRIES"] = "0"
os.environ.setdefault("LOG_LEVEL", "WARNING")

# Ensure project root is on path when running tests
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))
