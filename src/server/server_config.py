"""Server configuration."""

from __future__ import annotations

import os

# Upper bound on outline text accepted in a single request, in characters.
MAX_OUTLINE_CHARS = int(os.getenv("TODOTREE_MAX_OUTLINE_CHARS", str(1_000_000)))

DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 8000
