"""
Unit tests for the dashboard controller's submission flow.

Run: pytest tests/test_dashboard.py -v
"""

from unittest.mock import MagicMock

import pytest

from core.dashboard import DashboardController
from core.state_manager import DashboardState
from models.candidate import DEMO_STATS
from tests.helpers import FakeClient, make_candidate

SHEET = "https://docs.google.com/spreadsheets/d/abc"


def _controller(client, toasts):
    controller = DashboardController(client, notify=toasts.append)
    controller.activate()
    return controller


class TestSubmitSheet:

    @pytest.mark.parametrize(
        "raw",
        ["https://example.com/sheet", "docs.google.com/document/d/1", "", "spreadsheets"],
    )
    def test_invalid_url_rejected_before_network(self, raw, toasts):
        client = FakeClient()
        controller = _controller(client, toasts)
        on_start, on_complete = MagicMock(), MagicMock()

        outcome = controller.submit_sheet(raw, on_start=on_start, on_complete=on_complete)

        assert outcome is None
        assert client.run_calls == []
        on_start.assert_not_called()
        on_complete.assert_not_called()
        assert controller.state is DashboardState.IDLE
        assert [t.title for t in toasts] == ["Invalid URL"]
        assert toasts[0].is_error

    def test_success_uses_backend_counters(self, toasts):
        client = FakeClient(run_response={
            "candidates_processed": 30, "candidates_shortlisted": 9, "calls_scheduled": 7,
        })
        controller = _controller(client, toasts)

        outcome = controller.submit_sheet(SHEET)

        assert client.run_calls == [SHEET]
        assert not outcome.is_fallback
        assert controller.stats.candidates_processed == 30
        assert controller.results_enabled
        assert [t.title for t in toasts] == ["Processing complete"]

    def test_failure_completes_once_with_demo_stats(self, toasts):
        controller = _controller(FakeClient(fail_run=True), toasts)
        on_complete = MagicMock()

        outcome = controller.submit_sheet(SHEET, on_complete=on_complete)

        on_complete.assert_called_once_with(outcome)
        assert outcome.stats == DEMO_STATS
        assert (
            outcome.stats.candidates_processed,
            outcome.stats.candidates_shortlisted,
            outcome.stats.calls_scheduled,
        ) == (15, 8, 8)
        assert outcome.is_fallback
        assert "connection refused" in outcome.error
        assert controller.state is DashboardState.COMPLETE
        assert [t.title for t in toasts] == ["Processing failed"]

    def test_malformed_counters_fall_back(self, toasts):
        controller = _controller(FakeClient(run_response={"calls_scheduled": "many"}), toasts)
        outcome = controller.submit_sheet(SHEET)
        assert outcome.is_fallback
        assert outcome.stats == DEMO_STATS

    def test_on_start_sees_processing_state(self, toasts):
        controller = _controller(FakeClient(), toasts)
        seen = []
        controller.submit_sheet(SHEET, on_start=lambda: seen.append(controller.state))
        assert seen == [DashboardState.PROCESSING]

    def test_resubmit_after_complete(self, toasts):
        client = FakeClient()
        controller = _controller(client, toasts)
        controller.submit_sheet(SHEET)
        controller.submit_sheet(SHEET + "2")
        assert len(client.run_calls) == 2
        assert controller.results_enabled

    def test_results_disabled_until_complete(self, toasts):
        controller = _controller(FakeClient(), toasts)
        assert not controller.results_enabled


class TestShortlistCaching:

    def test_fetched_once_per_run(self, toasts):
        client = FakeClient(shortlist=[make_candidate()])
        controller = _controller(client, toasts)
        controller.submit_sheet(SHEET)

        first = controller.shortlist()
        second = controller.shortlist()

        assert first is second
        assert client.fetch_calls == 1

    def test_new_run_refetches(self, toasts):
        client = FakeClient(shortlist=[make_candidate()])
        controller = _controller(client, toasts)
        controller.submit_sheet(SHEET)
        controller.shortlist()
        controller.submit_sheet(SHEET)
        controller.shortlist()
        assert client.fetch_calls == 2

    def test_explicit_list_bypasses_fetch(self, toasts):
        client = FakeClient(fail_fetch=5)
        controller = _controller(client, toasts)
        listing = controller.shortlist([make_candidate("A"), make_candidate("B")])
        assert len(listing) == 2
        assert client.fetch_calls == 0


class TestDeactivate:

    def test_clears_run_state(self, toasts):
        controller = _controller(FakeClient(), toasts)
        controller.submit_sheet(SHEET)
        controller.deactivate()
        assert controller.state is DashboardState.UNAUTHENTICATED
        assert controller.outcome is None
        assert controller.stats.candidates_processed == 0


class TestInterruptedRun:

    def test_raising_notifier_leaves_run_complete(self, toasts):
        calls = []

        def notify(toast):
            calls.append(toast)
            if len(calls) == 1:
                raise RuntimeError("toast failed")

        client = FakeClient(fail_run=True)
        controller = DashboardController(client, notify=notify)
        controller.activate()

        with pytest.raises(RuntimeError):
            controller.submit_sheet(SHEET)

        assert controller.state is DashboardState.COMPLETE
        assert controller.outcome.is_fallback
        assert controller.submit_sheet(SHEET) is not None
        assert len(client.run_calls) == 2

    def test_on_start_error_returns_to_idle(self, toasts):
        client = FakeClient()
        controller = _controller(client, toasts)

        with pytest.raises(RuntimeError):
            controller.submit_sheet(SHEET, on_start=MagicMock(side_effect=RuntimeError("boom")))

        assert controller.state is DashboardState.IDLE
        assert client.run_calls == []
        assert toasts == []
        assert controller.submit_sheet(SHEET) is not None
        assert controller.results_enabled

    def test_unexpected_client_error_returns_to_idle(self, toasts):
        client = FakeClient()
        client.process_sheet = MagicMock(side_effect=RuntimeError("socket closed"))
        controller = _controller(client, toasts)
        on_complete = MagicMock()

        with pytest.raises(RuntimeError):
            controller.submit_sheet(SHEET, on_complete=on_complete)

        assert controller.state is DashboardState.IDLE
        on_complete.assert_not_called()
        assert not controller.results_enabled

    def test_interrupted_resubmit_keeps_previous_results(self, toasts):
        client = FakeClient(run_response={"candidates_processed": 30})
        controller = _controller(client, toasts)
        first = controller.submit_sheet(SHEET)

        with pytest.raises(RuntimeError):
            controller.submit_sheet(SHEET, on_start=MagicMock(side_effect=RuntimeError("boom")))

        assert controller.state is DashboardState.COMPLETE
        assert controller.outcome is first
        assert controller.stats.candidates_processed == 30

    def test_submit_during_run_is_ignored(self, toasts):
        client = FakeClient()
        controller = _controller(client, toasts)
        nested = []

        outcome = controller.submit_sheet(
            SHEET, on_start=lambda: nested.append(controller.submit_sheet(SHEET)),
        )

        assert nested == [None]
        assert outcome is not None
        assert client.run_calls == [SHEET]
        assert controller.state is DashboardState.COMPLETE
