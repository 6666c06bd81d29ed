"""
HR Dashboard — Shortlist Resolution
=====================================
Decides which candidate rows the Results tab shows.

Precedence:
    1. an explicit, non-empty list handed in by the caller
    2. a non-empty list fetched from ``GET /shortlisted``
    3. the three demo candidates

A failed fetch is reported with a toast but never blocks rendering.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from core.api_client import BaseBackendClient, BackendServiceError
from core.messages import Notifier, null_notifier, toast_candidates_failed
from data.demo import demo_candidates
from models.candidate import Candidate

logger = logging.getLogger(__name__)

SOURCE_PROPS = "props"
SOURCE_BACKEND = "backend"
SOURCE_DEMO = "demo"


@dataclass(frozen=True)
class CandidateListing:
    """Rows to display and where they came from."""

    candidates: List[Candidate] = field(default_factory=list)
    source: str = SOURCE_DEMO
    error: Optional[str] = None

    @property
    def is_demo(self) -> bool:
        return self.source == SOURCE_DEMO

    def __len__(self) -> int:
        return len(self.candidates)


def fetch_with_retry(client: BaseBackendClient, attempts: int = 2) -> List[Candidate]:
    """
    Call ``client.fetch_shortlisted`` up to *attempts* times, with no delay
    between tries.

    Raises:
        BackendServiceError: The error from the last attempt.
    """
    attempts = max(1, attempts)
    last_error: Optional[BackendServiceError] = None
    for attempt in range(1, attempts + 1):
        try:
            return client.fetch_shortlisted()
        except BackendServiceError as exc:
            last_error = exc
            logger.warning("Shortlist fetch attempt %d/%d failed: %s", attempt, attempts, exc)
    raise last_error


def resolve_candidates(
    explicit: Optional[Sequence[Candidate]] = None,
    client: Optional[BaseBackendClient] = None,
    notify: Notifier = null_notifier,
    attempts: int = 2,
) -> CandidateListing:
    """Pick the rows to show, following the precedence in the module docstring."""
    if explicit:
        return CandidateListing(list(explicit), SOURCE_PROPS)

    if client is None:
        return CandidateListing(demo_candidates(), SOURCE_DEMO)

    try:
        fetched = fetch_with_retry(client, attempts)
    except BackendServiceError as exc:
        notify(toast_candidates_failed())
        return CandidateListing(demo_candidates(), SOURCE_DEMO, error=str(exc))

    if not fetched:
        logger.info("Backend returned an empty shortlist; showing demo candidates.")
        return CandidateListing(demo_candidates(), SOURCE_DEMO)

    return CandidateListing(fetched, SOURCE_BACKEND)
