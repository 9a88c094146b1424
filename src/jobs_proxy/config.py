"""Environment configuration for the jobs proxy."""

import os
from typing import Optional

SHEETDB_URL_ENV = "SHEETDB_API_URL"
SHEETDB_TIMEOUT_ENV = "SHEETDB_TIMEOUT"

DEFAULT_TIMEOUT = 60.0


def get_sheetdb_url() -> Optional[str]:
    """Return the SheetDB endpoint, or None when it is unset or blank."""
    url = os.environ.get(SHEETDB_URL_ENV, "").strip()
    return url or None


def get_timeout() -> float:
    """Return the upstream timeout in seconds."""
    raw = os.environ.get(SHEETDB_TIMEOUT_ENV)
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_TIMEOUT
