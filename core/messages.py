"""
HR Dashboard — Messages
All user-facing strings and toast construction live here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

APP_NAME = "HR Automation SaaS"
TAGLINE = "Streamlining your recruitment process"

DEFAULT = "default"
DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Toast:
    """A transient notification shown to the user."""

    title: str
    description: str = ""
    variant: str = DEFAULT

    @property
    def is_error(self) -> bool:
        return self.variant == DESTRUCTIVE


#: Anything that can display a toast. The UI passes a Streamlit-backed one,
#: tests pass ``list.append``.
Notifier = Callable[[Toast], None]


def null_notifier(_toast: Toast) -> None:
    return None


# ---------------------------------------------------------------------------
# Toasts
# ---------------------------------------------------------------------------

def toast_invalid_url(reason: str) -> Toast:
    return Toast("Invalid URL", reason, DESTRUCTIVE)


def toast_processing_complete() -> Toast:
    return Toast("Processing complete", "The sheet has been processed successfully")


def toast_processing_failed() -> Toast:
    return Toast(
        "Processing failed",
        "There was an error processing the sheet. Please try again.",
        DESTRUCTIVE,
    )


def toast_candidates_failed() -> Toast:
    return Toast(
        "Could not load candidates",
        "The shortlist could not be fetched. Showing demo candidates instead.",
        DESTRUCTIVE,
    )


def toast_login_success(name: str) -> Toast:
    return Toast("Signed in", f"Welcome back, {name}!")


def toast_login_invalid(reason: str) -> Toast:
    return Toast("Sign-in failed", reason, DESTRUCTIVE)


def toast_logged_out() -> Toast:
    return Toast("Logged out", "You have been logged out successfully")


# ---------------------------------------------------------------------------
# Page copy
# ---------------------------------------------------------------------------

def status_idle() -> str:
    return "Enter a Google Sheets URL in the form and click Process Resumes to begin."


def status_processing() -> str:
    return (
        "We're analyzing candidate resumes, checking skill matches, and preparing "
        "for automated calls. This may take a few minutes."
    )


def status_complete() -> str:
    return "Click on the Results tab to view detailed information"


def shortlist_caption(count: int) -> str:
    noun = "candidate has" if count == 1 else "candidates have"
    return f"{count} {noun} been shortlisted based on your criteria."


def summary_heading(from_backend: bool) -> str:
    if from_backend:
        return "Processing completed successfully"
    return "Showing demo results"


def summary_body(from_backend: bool) -> str:
    if from_backend:
        return (
            "Your candidate data has been processed and shortlisted candidates have "
            "been added to your shortlist sheet."
        )
    return (
        "The screening service could not be reached, so the figures below are "
        "sample data. Submit the sheet again once the service is available."
    )


def next_steps() -> List[str]:
    return [
        "Automated calls have been scheduled for shortlisted candidates",
        "Check your shortlist sheet for candidate details and scores",
        "Review call recordings when they become available",
    ]
