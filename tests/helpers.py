"""Test doubles shared across the dashboard tests."""

from typing import List
from unittest.mock import MagicMock

import requests

from core.api_client import BackendServiceError, BaseBackendClient
from models.candidate import Candidate


class FakeClient(BaseBackendClient):
    """In-memory backend that records calls and can be told to fail."""

    def __init__(self, run_response=None, shortlist=None, fail_run=False, fail_fetch=0):
        super().__init__(login_delay=0)
        self.run_response = run_response if run_response is not None else {}
        self.shortlist = shortlist if shortlist is not None else []
        self.fail_run = fail_run
        self.fail_fetch = fail_fetch
        self.run_calls: List[str] = []
        self.fetch_calls = 0

    def process_sheet(self, sheet_url):
        self.run_calls.append(sheet_url)
        if self.fail_run:
            raise BackendServiceError("Failed to process sheet: connection refused")
        return self.run_response

    def fetch_shortlisted(self):
        self.fetch_calls += 1
        if self.fetch_calls <= self.fail_fetch:
            raise BackendServiceError("Failed to fetch shortlist: connection refused")
        return list(self.shortlist)


def make_candidate(name="Ada Lovelace", score=95) -> Candidate:
    return Candidate(
        id=name.lower().replace(" ", "-"),
        name=name,
        email="ada@example.com",
        phone="+1 555 000 0000",
        experience="7 years",
        match_score=score,
    )


def make_response(status=200, payload=None, json_error=None):
    """Build a stand-in for ``requests.Response``."""
    response = MagicMock()
    response.status_code = status
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status} Server Error")
    else:
        response.raise_for_status.return_value = None
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload if payload is not None else {}
    return response
