"""
HR Dashboard — Summary Report
Builds the CSV offered by the "Download Summary Report" button.
"""

from __future__ import annotations

import csv
import io
from typing import Iterable

from models.candidate import Candidate, ProcessingStats

REPORT_FILENAME = "shortlist_summary.csv"

CANDIDATE_COLUMNS = ["Name", "Email", "Phone", "Experience", "Match Score", "Tier"]


def build_summary_report(stats: ProcessingStats, candidates: Iterable[Candidate]) -> str:
    """
    Render stats and candidate rows as CSV text.

    Layout: a two-column stats block, a blank line, then one row per
    candidate under ``CANDIDATE_COLUMNS``.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")

    writer.writerow(["Metric", "Value"])
    writer.writerow(["Candidates processed", stats.candidates_processed])
    writer.writerow(["Candidates shortlisted", stats.candidates_shortlisted])
    writer.writerow(["Calls scheduled", stats.calls_scheduled])
    writer.writerow([])

    writer.writerow(CANDIDATE_COLUMNS)
    for c in candidates:
        writer.writerow([c.name, c.email, c.phone, c.experience, c.match_score, c.tier.value])

    return buf.getvalue()
