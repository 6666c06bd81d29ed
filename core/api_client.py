"""
HR Dashboard — Backend API Client
===================================
Wraps every call to the screening backend behind one interface so the UI
never imports ``requests`` directly.

Supported Backends (selected via HRDASH_BACKEND env var):
    - ``http``: the Flask screening service at HRDASH_API_URL  [default]
    - ``mock``: canned demo responses for offline use

Endpoints:
    POST /run          body {"sheet_url": str}
    GET  /shortlisted  -> {"candidates": [...]}

Login is mocked in every backend: the credentials are ignored and the call
succeeds after a fixed delay.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from core.config import DashboardConfig
from data.demo import demo_run_response, demo_shortlist_response
from models.candidate import Candidate, decode_shortlist

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    success: bool
    email: str = ""


# ---------------------------------------------------------------------------
# Abstract Base Contract
# ---------------------------------------------------------------------------

class BaseBackendClient(ABC):
    """Abstract base class that every backend client must implement."""

    def __init__(self, login_delay: float = 1.0, **_kwargs) -> None:
        self._login_delay = login_delay

    def login(self, email: str, password: str) -> LoginResult:
        """
        Mocked sign-in. Ignores the credentials and always succeeds after
        ``login_delay`` seconds.
        """
        logger.debug("login() called for %s (mocked)", email)
        if self._login_delay > 0:
            time.sleep(self._login_delay)
        return LoginResult(success=True, email=email.strip())

    @abstractmethod
    def process_sheet(self, sheet_url: str) -> Dict[str, Any]:
        """
        Ask the backend to process the candidates listed in a sheet.

        Returns:
            The decoded JSON response body.

        Raises:
            BackendServiceError: On any network or response failure.
        """

    @abstractmethod
    def fetch_shortlisted(self) -> List[Candidate]:
        """
        Fetch the current shortlist.

        Raises:
            BackendServiceError: On any network, response, or schema failure.
        """


# ---------------------------------------------------------------------------
# HTTP Backend
# ---------------------------------------------------------------------------

class HttpBackendClient(BaseBackendClient):
    """
    Client for the Flask screening service.

    Neither call retries. ``timeout`` of ``None`` waits indefinitely.
    """

    def __init__(
        self,
        api_url: str,
        timeout: Optional[float] = None,
        login_delay: float = 1.0,
        **kwargs,
    ) -> None:
        super().__init__(login_delay=login_delay)
        if not api_url or not api_url.startswith(("http://", "https://")):
            raise BackendConfigurationError(
                f"HRDASH_API_URL must be an http(s) URL, got '{api_url}'."
            )
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        logger.info("HttpBackendClient initialised, api_url=%s", self._api_url)

    @property
    def api_url(self) -> str:
        return self._api_url

    def process_sheet(self, sheet_url: str) -> Dict[str, Any]:
        url = f"{self._api_url}/run"
        try:
            response = requests.post(
                url,
                json={"sheet_url": sheet_url},
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.error("API Error: POST %s failed: %s", url, exc)
            raise BackendServiceError(f"Failed to process sheet: {exc}") from exc

    def fetch_shortlisted(self) -> List[Candidate]:
        url = f"{self._api_url}/shortlisted"
        try:
            response = requests.get(url, timeout=self._timeout)
            response.raise_for_status()
            return decode_shortlist(response.json())
        except ValidationError as exc:
            logger.error("API Error: GET %s returned an unexpected shape: %s", url, exc)
            raise BackendServiceError(f"Unexpected shortlist format: {exc}") from exc
        except (requests.RequestException, ValueError) as exc:
            logger.error("API Error: GET %s failed: %s", url, exc)
            raise BackendServiceError(f"Failed to fetch shortlist: {exc}") from exc


# ---------------------------------------------------------------------------
# Mock Backend (Offline / Demos)
# ---------------------------------------------------------------------------

class MockBackendClient(BaseBackendClient):
    """Serves the demo data without any network access."""

    def process_sheet(self, sheet_url: str) -> Dict[str, Any]:
        logger.debug("MockBackendClient.process_sheet(%s)", sheet_url)
        return demo_run_response()

    def fetch_shortlisted(self) -> List[Candidate]:
        return decode_shortlist(demo_shortlist_response())


# ---------------------------------------------------------------------------
# Factory Function
# ---------------------------------------------------------------------------

def create_backend_client(
    config: Optional[DashboardConfig] = None,
    backend: Optional[str] = None,
) -> BaseBackendClient:
    """
    Factory that instantiates the configured backend client.

    Args:
        config:  Settings to use. Defaults to ``DashboardConfig.from_env()``.
        backend: ``"http"`` | ``"mock"``. Overrides ``config.backend``.
    """
    cfg = config or DashboardConfig.from_env()
    resolved = (backend or cfg.backend).lower()

    backends: dict[str, type] = {
        "http": HttpBackendClient,
        "mock": MockBackendClient,
    }

    cls = backends.get(resolved)
    if cls is None:
        raise BackendConfigurationError(
            f"Unknown backend '{resolved}'. "
            f"Choose from: {', '.join(backends.keys())}"
        )

    logger.info("Creating backend client: backend=%s", resolved)
    return cls(
        api_url=cfg.api_url,
        timeout=cfg.request_timeout,
        login_delay=cfg.login_delay,
    )


# ---------------------------------------------------------------------------
# Custom Exceptions
# ---------------------------------------------------------------------------

class BackendServiceError(RuntimeError):
    """Raised when a call to the screening backend fails at runtime."""

class BackendConfigurationError(ValueError):
    """Raised when the backend client cannot be configured (bad URL, unknown backend)."""
