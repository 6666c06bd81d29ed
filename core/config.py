"""
HR Dashboard — Configuration
==============================
Reads runtime settings from the environment. ``app.py`` loads ``.env`` with
python-dotenv before anything here is called.

Environment Variables:
    HRDASH_API_URL            : screening backend base URL (default http://localhost:5000)
    HRDASH_BACKEND            : http | mock (default http)
    HRDASH_REQUEST_TIMEOUT    : seconds per request, 0 disables (default 0)
    HRDASH_LOGIN_DELAY        : mocked login delay in seconds (default 1.0)
    HRDASH_SHORTLIST_ATTEMPTS : shortlist fetch attempts, incl. the retry (default 2)
    HRDASH_LOG_LEVEL          : root log level (default INFO)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_API_URL = "http://localhost:5000"


# ---------------------------------------------------------------------------
# Configuration Helpers
# ---------------------------------------------------------------------------

def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()

def _env_float(key: str, default: float) -> float:
    try:
        return float(os.environ.get(key, default))
    except (TypeError, ValueError):
        return default

def _env_int(key: str, default: int) -> int:
    try:
        return int(os.environ.get(key, default))
    except (TypeError, ValueError):
        return default


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DashboardConfig:
    """Immutable snapshot of the dashboard's environment settings."""

    api_url: str = DEFAULT_API_URL
    backend: str = "http"
    request_timeout: Optional[float] = None
    login_delay: float = 1.0
    shortlist_attempts: int = 2
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "DashboardConfig":
        timeout = _env_float("HRDASH_REQUEST_TIMEOUT", 0.0)
        return cls(
            api_url=_env("HRDASH_API_URL", DEFAULT_API_URL).rstrip("/") or DEFAULT_API_URL,
            backend=_env("HRDASH_BACKEND", "http").lower() or "http",
            request_timeout=timeout if timeout > 0 else None,
            login_delay=max(0.0, _env_float("HRDASH_LOGIN_DELAY", 1.0)),
            shortlist_attempts=max(1, _env_int("HRDASH_SHORTLIST_ATTEMPTS", 2)),
            log_level=_env("HRDASH_LOG_LEVEL", "INFO").upper() or "INFO",
        )
