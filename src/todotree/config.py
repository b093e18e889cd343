"""Local configuration for todotree."""

from __future__ import annotations

import os
from pathlib import Path


INDENT_UNIT = "    "
DEFAULT_TAB_SIZE = 4
DEFAULT_EXPORT_FILENAME = "todo_list.txt"
DOCUMENT_KEY = "missionLog"

DEFAULT_STORE_DIR = ".todotree_store"
DEFAULT_STORE_TIMEOUT_S = 10.0
DEFAULT_STORE_MAX_RETRIES = 2
DEFAULT_STORE_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "todotree/0.1"
DEFAULT_LOG_LEVEL = "INFO"

TODOTREE_TAB_SIZE = int(os.getenv("TODOTREE_TAB_SIZE", str(DEFAULT_TAB_SIZE)))

# Local record store used when no remote store URL is configured.
TODOTREE_STORE_PATH = Path(os.getenv("TODOTREE_STORE_PATH", DEFAULT_STORE_DIR)).expanduser().resolve()
TODOTREE_STORE_URL = os.getenv("TODOTREE_STORE_URL") or None
TODOTREE_STORE_AUTH = os.getenv("TODOTREE_STORE_AUTH") or None
TODOTREE_STORE_TIMEOUT_S = float(os.getenv("TODOTREE_STORE_TIMEOUT_S", str(DEFAULT_STORE_TIMEOUT_S)))
TODOTREE_STORE_MAX_RETRIES = int(os.getenv("TODOTREE_STORE_MAX_RETRIES", str(DEFAULT_STORE_MAX_RETRIES)))
TODOTREE_STORE_BACKOFF_S = float(os.getenv("TODOTREE_STORE_BACKOFF_S", str(DEFAULT_STORE_BACKOFF_S)))
TODOTREE_USER_AGENT = os.getenv("TODOTREE_USER_AGENT", DEFAULT_USER_AGENT)
TODOTREE_LOG_LEVEL = os.getenv("TODOTREE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
