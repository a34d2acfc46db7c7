"""Local configuration for mdguide."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_CACHE_DIR = ".mdguide_cache"
DEFAULT_CACHE_TTL_SECONDS = 24 * 60 * 60
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "mdguide/0.1"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_DOCUMENT_BYTES = 5 * 1024 * 1024

# Local-only cache directory for fetched documents and stored digests.
MDGUIDE_CACHE_PATH = Path(os.getenv("MDGUIDE_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
MDGUIDE_CACHE_TTL_SECONDS = int(os.getenv("MDGUIDE_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS)))
MDGUIDE_FETCH_TIMEOUT_S = float(os.getenv("MDGUIDE_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
MDGUIDE_FETCH_MAX_RETRIES = int(os.getenv("MDGUIDE_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
MDGUIDE_FETCH_BACKOFF_S = float(os.getenv("MDGUIDE_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
MDGUIDE_USER_AGENT = os.getenv("MDGUIDE_USER_AGENT", DEFAULT_USER_AGENT)
MDGUIDE_LOG_LEVEL = os.getenv("MDGUIDE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
MDGUIDE_MAX_DOCUMENT_BYTES = int(os.getenv("MDGUIDE_MAX_DOCUMENT_BYTES", str(DEFAULT_MAX_DOCUMENT_BYTES)))
