"""
HR Dashboard — Candidate Data Model
=====================================
Wire schema for the screening backend's ``/run`` and ``/shortlisted``
responses. Uses Pydantic for validation and serialization.

``match_score`` is the canonical field name. The older ``matchScore``
spelling is accepted only through ``decode_shortlist``, which is the single
place where backend payloads become ``Candidate`` objects.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Score Tiers
# ---------------------------------------------------------------------------

class ScoreTier(str, Enum):
    """Color bucket a match score falls into on the results table."""

    EXCELLENT = "excellent"   # >= 90, green
    STRONG    = "strong"      # >= 80, teal
    FAIR      = "fair"        # everything below, amber


#: Lower bound (inclusive) of each tier, checked top-down.
TIER_THRESHOLDS = (
    (90, ScoreTier.EXCELLENT),
    (80, ScoreTier.STRONG),
)


def score_tier(score: int) -> ScoreTier:
    """
    Classify a match score into its color tier.

        >>> score_tier(90)
        <ScoreTier.EXCELLENT: 'excellent'>
        >>> score_tier(89)
        <ScoreTier.STRONG: 'strong'>
    """
    for floor, tier in TIER_THRESHOLDS:
        if score >= floor:
            return tier
    return ScoreTier.FAIR


# ---------------------------------------------------------------------------
# Candidate
# ---------------------------------------------------------------------------

class Candidate(BaseModel):
    """
    A shortlisted candidate as reported by the screening backend.

    No uniqueness is enforced on ``id``; the backend and the demo rows may
    reuse the same identifiers.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, description="Backend identifier, if any.")
    name: str = Field(description="Candidate's full name.")
    email: str = Field(description="Contact email address.")
    phone: str = Field(description="Contact phone number.")
    experience: str = Field(default="", description="Free-text experience, e.g. '5 years'.")
    match_score: int = Field(
        ge=0,
        le=100,
        validation_alias=AliasChoices("match_score", "matchScore"),
        description="Backend-computed fit, 0–100.",
    )

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        """Backends send numeric ids as often as string ones."""
        if v is None:
            return v
        return str(v)

    @field_validator("experience", mode="before")
    @classmethod
    def default_experience(cls, v):
        return "" if v is None else str(v)

    @property
    def tier(self) -> ScoreTier:
        return score_tier(self.match_score)


class ShortlistResponse(BaseModel):
    """Body of ``GET /shortlisted``."""

    candidates: List[Candidate] = Field(default_factory=list)


def decode_shortlist(payload: Any) -> List[Candidate]:
    """
    Decode a ``/shortlisted`` body into candidates.

    Raises:
        pydantic.ValidationError: If the payload does not match the schema.
    """
    return ShortlistResponse.model_validate(payload).candidates


# ---------------------------------------------------------------------------
# Processing Stats
# ---------------------------------------------------------------------------

class ProcessingStats(BaseModel):
    """Summary counters shown on the Results tab."""

    candidates_processed: int = Field(default=0, ge=0)
    candidates_shortlisted: int = Field(default=0, ge=0)
    calls_scheduled: int = Field(default=0, ge=0)

    @classmethod
    def from_run_response(cls, payload: Any) -> "ProcessingStats":
        """
        Build stats from a ``POST /run`` body.

        Counters the backend leaves out take the demo value, so a bare
        ``{"message": "..."}`` response still yields a populated panel.
        """
        data = payload if isinstance(payload, dict) else {}
        demo = DEMO_STATS.model_dump()
        merged = {key: data.get(key, default) for key, default in demo.items()}
        return cls.model_validate(merged)


#: Shown whenever the backend cannot be reached.
DEMO_STATS = ProcessingStats(
    candidates_processed=15,
    candidates_shortlisted=8,
    calls_scheduled=8,
)
