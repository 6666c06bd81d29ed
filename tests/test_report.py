"""
Unit tests for the summary report CSV.

Run: pytest tests/test_report.py -v
"""

import csv
import io

from core.report import CANDIDATE_COLUMNS, build_summary_report
from data.demo import demo_candidates, demo_stats


def test_report_contains_stats_and_rows():
    text = build_summary_report(demo_stats(), demo_candidates())
    rows = list(csv.reader(io.StringIO(text)))

    assert rows[0] == ["Metric", "Value"]
    assert rows[1] == ["Candidates processed", "15"]
    assert rows[3] == ["Calls scheduled", "8"]
    assert rows[4] == []
    assert rows[5] == CANDIDATE_COLUMNS
    assert rows[6][0] == "Sarah Johnson"
    assert rows[6][-1] == "excellent"
    assert rows[7][-1] == "strong"
    assert rows[8][-1] == "fair"


def test_report_without_candidates():
    text = build_summary_report(demo_stats(), [])
    assert text.strip().splitlines()[-1] == ",".join(CANDIDATE_COLUMNS)
