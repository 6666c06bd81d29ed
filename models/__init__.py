"""
HR Dashboard — Models Package
Exports the data models used across the application.
"""
from .candidate import (
    DEMO_STATS,
    Candidate,
    ProcessingStats,
    ScoreTier,
    decode_shortlist,
    score_tier,
)
from .session import UserSession

__all__ = [
    "Candidate",
    "ProcessingStats",
    "ScoreTier",
    "UserSession",
    "DEMO_STATS",
    "decode_shortlist",
    "score_tier",
]
