"""
Shared test fixtures and path constants for timeanddate tests.

All fixture file paths are defined here as module-level constants for
easy discovery and modification. If fixture pages move or new ones are
added, update this file.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import requests

# ---------------------------------------------------------------------------
# Fixture file paths -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"

WUERZBURG_HTML = FIXTURE_DIR / "worldclock_wuerzburg.html"
VANCOUVER_HTML = FIXTURE_DIR / "worldclock_vancouver.html"
SEARCH_BERLIN_TXT = FIXTURE_DIR / "search_berlin.txt"


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (talks to the live site)",
    )


# ---------------------------------------------------------------------------
# Fake HTTP session
# ---------------------------------------------------------------------------
class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.content = text.encode("utf-8")
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Records GET calls and answers from a url -> FakeResponse mapping."""

    def __init__(self, responses: dict[str, FakeResponse] | None = None) -> None:
        self.responses = responses or {}
        self.headers: dict[str, str] = {}
        self.max_redirects = 30
        self.calls: list[tuple[str, dict | None, float | None]] = []
        self.closed = False

    def respond(self, url: str, text: str, status_code: int = 200) -> None:
        self.responses[url] = FakeResponse(text, status_code)

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        return self.responses[url]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def wuerzburg_html() -> str:
    return WUERZBURG_HTML.read_text(encoding="utf-8")


@pytest.fixture
def vancouver_html() -> str:
    return VANCOUVER_HTML.read_text(encoding="utf-8")


@pytest.fixture
def search_body() -> str:
    return SEARCH_BERLIN_TXT.read_text(encoding="utf-8")


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()
