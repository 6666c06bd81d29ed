"""
HR Dashboard — Dashboard Controller
=====================================
The controller behind the dashboard page. One instance per signed-in
browser session, kept in ``st.session_state``.

Submission flow (``submit_sheet``):
    - The URL must contain ``docs.google.com/spreadsheets``; anything else is
      rejected with a toast before any network call.
    - IDLE/COMPLETE → PROCESSING, then ``POST /run``.
    - Success → stats decoded from the response.
    - Any failure → failure toast, then the demo stats are reported as the
      result. The outcome is marked ``source="demo"`` so callers can tell.
    - Either way PROCESSING → COMPLETE before any toast is shown, then
      ``on_complete`` fires once.
    - A run interrupted before it produced an outcome goes back to the state
      it started from; a submission during a run is ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from pydantic import ValidationError

from core import validators as val
from core.api_client import BaseBackendClient, BackendServiceError
from core.messages import (
    Notifier,
    null_notifier,
    toast_invalid_url,
    toast_processing_complete,
    toast_processing_failed,
)
from core.shortlist import CandidateListing, resolve_candidates
from core.state_manager import DashboardState, StateManager
from data.demo import demo_stats
from models.candidate import Candidate, ProcessingStats

logger = logging.getLogger(__name__)

SOURCE_BACKEND = "backend"
SOURCE_DEMO = "demo"


@dataclass(frozen=True)
class ProcessOutcome:
    """Result of one sheet submission."""

    stats: ProcessingStats
    source: str = SOURCE_BACKEND
    error: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.source == SOURCE_DEMO


class DashboardController:
    """
    Drives the dashboard for a single signed-in user.

    State machine flow:
        UNAUTHENTICATED → IDLE → PROCESSING → COMPLETE (→ PROCESSING ...)
        any → UNAUTHENTICATED on logout
    """

    def __init__(
        self,
        client: BaseBackendClient,
        notify: Notifier = null_notifier,
        shortlist_attempts: int = 2,
    ) -> None:
        self._client = client
        self._notify = notify
        self._shortlist_attempts = shortlist_attempts

        self._sm = StateManager()
        self._stats = ProcessingStats()
        self._outcome: Optional[ProcessOutcome] = None
        self._listing: Optional[CandidateListing] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def state(self) -> DashboardState:
        return self._sm.current_state

    @property
    def is_processing(self) -> bool:
        return self._sm.is_processing

    @property
    def results_enabled(self) -> bool:
        return self._sm.is_complete

    @property
    def stats(self) -> ProcessingStats:
        return self._stats

    @property
    def outcome(self) -> Optional[ProcessOutcome]:
        return self._outcome

    def set_notifier(self, notify: Notifier) -> None:
        self._notify = notify

    def activate(self) -> None:
        """Enter IDLE after sign-in. No-op if already signed in."""
        if not self._sm.is_authenticated:
            self._sm.transition(DashboardState.IDLE)

    def deactivate(self) -> None:
        """Drop all run state on logout."""
        if self._sm.is_authenticated:
            self._sm.transition(DashboardState.UNAUTHENTICATED)
        self._stats = ProcessingStats()
        self._outcome = None
        self._listing = None

    def submit_sheet(
        self,
        raw_url: str,
        on_start: Optional[Callable[[], None]] = None,
        on_complete: Optional[Callable[[ProcessOutcome], None]] = None,
    ) -> Optional[ProcessOutcome]:
        """
        Validate and submit a sheet URL.

        Returns:
            The ``ProcessOutcome``, or ``None`` if the URL was rejected.
        """
        result = val.validate_sheet_url(raw_url)
        if not result.is_valid:
            self._notify(toast_invalid_url(result.error))
            return None

        if self._sm.is_processing:
            logger.warning("Ignoring sheet submission while a run is in progress.")
            return None

        sheet_url: str = result.value
        previous = self._sm.current_state
        self._sm.transition(DashboardState.PROCESSING)

        outcome: Optional[ProcessOutcome] = None
        try:
            if on_start is not None:
                on_start()
            try:
                data = self._client.process_sheet(sheet_url)
                stats = ProcessingStats.from_run_response(data)
            except (BackendServiceError, ValidationError) as exc:
                logger.warning("Sheet processing failed (%s); reporting demo stats.", exc)
                outcome = ProcessOutcome(demo_stats(), SOURCE_DEMO, error=str(exc))
            else:
                outcome = ProcessOutcome(stats, SOURCE_BACKEND)
            self._complete(outcome)
        finally:
            if outcome is None and self._sm.is_processing:
                # Nothing was reported for this run; undo the submission.
                logger.warning("Sheet run aborted; returning to %s.", previous.name)
                self._sm.transition(previous)

        self._notify(toast_processing_failed() if outcome.is_fallback else toast_processing_complete())
        if on_complete is not None:
            on_complete(outcome)
        return outcome

    def shortlist(self, explicit: Optional[Sequence[Candidate]] = None) -> CandidateListing:
        """
        Rows for the Results tab. Fetched once per completed run and reused
        on later reruns.
        """
        if explicit:
            return resolve_candidates(explicit)
        if self._listing is None:
            self._listing = resolve_candidates(
                client=self._client,
                notify=self._notify,
                attempts=self._shortlist_attempts,
            )
        return self._listing

    # ------------------------------------------------------------------
    # Internal Helpers
    # ------------------------------------------------------------------

    def _complete(self, outcome: ProcessOutcome) -> None:
        self._stats = outcome.stats
        self._outcome = outcome
        self._listing = None
        self._sm.transition(DashboardState.COMPLETE)
        logger.info(
            "Run complete: source=%s processed=%d shortlisted=%d calls=%d",
            outcome.source,
            outcome.stats.candidates_processed,
            outcome.stats.candidates_shortlisted,
            outcome.stats.calls_scheduled,
        )

    def __repr__(self) -> str:
        return f"DashboardController(state={self._sm.current_state.name})"
