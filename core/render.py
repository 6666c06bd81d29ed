"""
HR Dashboard — Candidate Table Markup
Builds the HTML table shown on the Results tab. One ``<tr>`` per candidate
in ``<tbody>``; the score badge carries a ``score-<tier>`` class for color.
"""

from __future__ import annotations

import html
from typing import Iterable

from models.candidate import Candidate

TABLE_HEADERS = ("Name", "Email", "Phone", "Experience", "Match Score", "Actions")


def _tel_target(phone: str) -> str:
    return "".join(ch for ch in phone if ch.isdigit() or ch == "+")


def candidate_row_html(candidate: Candidate) -> str:
    email = html.escape(candidate.email)
    phone = html.escape(candidate.phone)
    tel = html.escape(_tel_target(candidate.phone))
    return (
        "<tr>"
        f"<td><b>{html.escape(candidate.name)}</b></td>"
        f"<td>{email}</td>"
        f"<td>{phone}</td>"
        f"<td>{html.escape(candidate.experience) or '-'}</td>"
        f'<td><span class="score score-{candidate.tier.value}">{candidate.match_score}%</span></td>'
        f'<td><a href="tel:{tel}">Call</a> &middot; <a href="mailto:{email}">Email</a></td>'
        "</tr>"
    )


def candidate_table_html(candidates: Iterable[Candidate]) -> str:
    """Render the shortlist table. Every text cell is HTML-escaped."""
    header = "".join(f"<th>{h}</th>" for h in TABLE_HEADERS)
    body = "".join(candidate_row_html(c) for c in candidates)
    return (
        '<table class="shortlist">'
        f"<thead><tr>{header}</tr></thead>"
        f"<tbody>{body}</tbody>"
        "</table>"
    )
