"""
HR Dashboard — Demo Data
==========================
Fixed rows shown when the screening backend is unreachable or returns an
empty shortlist, and the canned responses served by the ``mock`` backend.
"""

from __future__ import annotations

from typing import List

from models.candidate import DEMO_STATS, Candidate, ProcessingStats

_DEMO_ROWS = [
    {
        "id": "1",
        "name": "Sarah Johnson",
        "email": "sarah.j@example.com",
        "phone": "+1 (555) 123-4567",
        "experience": "5 years",
        "match_score": 92,
    },
    {
        "id": "2",
        "name": "Michael Chen",
        "email": "m.chen@example.com",
        "phone": "+1 (555) 234-5678",
        "experience": "3 years",
        "match_score": 88,
    },
    {
        "id": "3",
        "name": "Emma Rodriguez",
        "email": "emma.r@example.com",
        "phone": "+1 (555) 345-6789",
        "experience": "4 years",
        "match_score": 76,
    },
]


def demo_candidates() -> List[Candidate]:
    """Return fresh copies of the three demo candidates."""
    return [Candidate.model_validate(row) for row in _DEMO_ROWS]


def demo_stats() -> ProcessingStats:
    return DEMO_STATS.model_copy()


def demo_run_response() -> dict:
    """Body the mock backend returns for ``POST /run``."""
    return {"message": "Processing complete", **DEMO_STATS.model_dump()}


def demo_shortlist_response() -> dict:
    """Body the mock backend returns for ``GET /shortlisted``."""
    return {"candidates": [dict(row) for row in _DEMO_ROWS]}
