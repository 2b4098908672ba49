"""
Integration tests: search and detail fetch against the live site.

These talk to www.timeanddate.com and are skipped unless
``TIMEANDDATE_LIVE=1`` is set in the environment. They guard against
markup changes that the recorded fixtures cannot catch.
"""

from __future__ import annotations

import os

import pytest

import timeanddate
from timeanddate.client import Client

_skip_offline = pytest.mark.skipif(
    os.environ.get("TIMEANDDATE_LIVE") != "1",
    reason="Set TIMEANDDATE_LIVE=1 to run tests against the live site",
)


@pytest.mark.integration
@_skip_offline
class TestLiveSite:
    """End-to-end search -> detail against the real endpoints."""

    def test_search_berlin(self):
        candidates = timeanddate.search("Berlin")
        assert candidates
        assert any(c.country == "Germany" for c in candidates)
        assert all(c.path.startswith("/") for c in candidates)

    def test_detail_of_first_candidate(self):
        with Client() as client:
            candidates = client.search("Würzburg")
            snap = client.get(candidates[0].path)

        assert snap.country == "Germany"
        assert snap.position is not None
        assert 49 < snap.position.latitude < 50
        assert 9 < snap.position.longitude < 10
        assert snap.currency is not None and snap.currency.code == "EUR"
        assert snap.timestamp().year >= 2023
