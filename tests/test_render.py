"""
Unit tests for the Results tab table markup.

Run: pytest tests/test_render.py -v
"""

import re

from core.render import TABLE_HEADERS, candidate_table_html
from core.shortlist import resolve_candidates
from tests.helpers import FakeClient, make_candidate


def _body_rows(markup):
    body = re.search(r"<tbody>(.*)</tbody>", markup, re.S).group(1)
    return re.findall(r"<tr>.*?</tr>", body, re.S)


class TestCandidateTable:

    def test_explicit_single_candidate_renders_one_row(self):
        listing = resolve_candidates([make_candidate("Ada Lovelace", 95)])
        rows = _body_rows(candidate_table_html(listing.candidates))
        assert len(rows) == 1
        assert "Ada Lovelace" in rows[0]

    def test_failing_fetch_renders_three_demo_rows(self, toasts):
        listing = resolve_candidates(client=FakeClient(fail_fetch=5), notify=toasts.append)
        rows = _body_rows(candidate_table_html(listing.candidates))
        assert len(rows) == 3
        assert "Sarah Johnson" in rows[0]
        assert [t.title for t in toasts] == ["Could not load candidates"]

    def test_empty_list_renders_header_only(self):
        markup = candidate_table_html([])
        assert _body_rows(markup) == []
        for header in TABLE_HEADERS:
            assert f"<th>{header}</th>" in markup

    def test_tier_class_per_score(self):
        markup = candidate_table_html([
            make_candidate("A", 90), make_candidate("B", 89), make_candidate("C", 79),
        ])
        assert re.findall(r"score-(\w+)", markup) == ["excellent", "strong", "fair"]

    def test_text_is_escaped(self):
        markup = candidate_table_html([make_candidate("<script>x</script>", 80)])
        assert "<script>" not in markup
        assert "&lt;script&gt;x&lt;/script&gt;" in markup

    def test_call_link_strips_formatting(self):
        markup = candidate_table_html([make_candidate()])
        assert 'href="tel:+15550000000"' in markup
        assert 'href="mailto:ada@example.com"' in markup
