"""
HR Dashboard — Input Validators
=================================
Pure functions for validating what the recruiter types into the login and
sheet-submission forms.

Design Principles:
    - Each function accepts a raw string and returns a ``ValidationResult``.
    - No side effects; functions are stateless and independently testable.
    - Regex-based checks are pre-compiled at module level.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


# ---------------------------------------------------------------------------
# Pre-compiled Patterns
# ---------------------------------------------------------------------------

_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}$"
)

#: Substring every accepted sheet URL must contain.
SHEETS_HOST = "docs.google.com/spreadsheets"


# ---------------------------------------------------------------------------
# Result Type
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ValidationResult:
    """
    Immutable result returned by every validator.

    Attributes:
        is_valid: True when the input passes all validation rules.
        value:    The cleaned / normalised value, or ``None`` on failure.
        error:    A human-readable error message when ``is_valid`` is False.
    """

    is_valid: bool
    value: Optional[object] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: object) -> "ValidationResult":
        """Factory shortcut for a successful result."""
        return cls(is_valid=True, value=value)

    @classmethod
    def fail(cls, error: str) -> "ValidationResult":
        """Factory shortcut for a failed result."""
        return cls(is_valid=False, error=error)


# ---------------------------------------------------------------------------
# Field Validators
# ---------------------------------------------------------------------------

def validate_sheet_url(raw: str) -> ValidationResult:
    """
    Validates a Google Sheets URL.

    The check is a plain substring match against ``SHEETS_HOST``; the URL is
    not fetched or parsed further.

    Examples::

        >>> validate_sheet_url("https://docs.google.com/spreadsheets/d/abc").is_valid
        True
        >>> validate_sheet_url("https://example.com/sheet").is_valid
        False
    """
    cleaned = (raw or "").strip()

    if not cleaned:
        return ValidationResult.fail("Please enter a Google Sheets URL.")

    if SHEETS_HOST not in cleaned:
        return ValidationResult.fail("Please enter a valid Google Sheets URL")

    return ValidationResult.ok(cleaned)


def validate_email(raw: str) -> ValidationResult:
    """
    Validates the login email.

    Returns:
        ValidationResult with the lowercased email on success.
    """
    cleaned = (raw or "").strip().lower()

    if not cleaned:
        return ValidationResult.fail("Email cannot be empty.")

    if not _EMAIL_RE.match(cleaned):
        return ValidationResult.fail(
            "That doesn't look like a valid email address. "
            "Please use the format **user@domain.com**."
        )

    return ValidationResult.ok(cleaned)


def validate_password(raw: str) -> ValidationResult:
    # Sign-in is mocked, so presence is the only rule.
    if not raw:
        return ValidationResult.fail("Password cannot be empty.")
    return ValidationResult.ok(raw)
