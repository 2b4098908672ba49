"""
Unit tests for the getdateandtime command (timeanddate.cli).

The CLI is driven through main() with a Client backed by FakeSession,
and its log output is checked through caplog.
"""

from __future__ import annotations

import logging

import pytest
import requests

from timeanddate.cli import main
from timeanddate.client import Client

SEARCH_URL = "https://www.timeanddate.com/scripts/completion.php"
DETAIL_URL = "https://www.timeanddate.com/worldclock/@2830841"


@pytest.fixture
def cli_client(fake_session, search_body, wuerzburg_html) -> Client:
    fake_session.respond(SEARCH_URL, search_body)
    fake_session.respond(DETAIL_URL, wuerzburg_html)
    return Client(session=fake_session)


def test_success_prints_snapshot(cli_client, caplog):
    with caplog.at_level(logging.INFO, logger="getdateandtime"):
        code = main(["Bezirk", "Spandau"], client=cli_client)
    assert code == 0
    assert "Getting time for Bezirk Spandau" in caplog.text
    assert "Germany" in caplog.text
    assert "Euro (EUR)" in caplog.text
    assert "Mon Oct 23 12:54:53 UTC 2023" in caplog.text


def test_query_words_are_joined(cli_client, fake_session):
    main(["new", "york"], client=cli_client)
    assert fake_session.calls[0][1]["query"] == "new york"


def test_list_prints_candidates(cli_client, caplog):
    with caplog.at_level(logging.INFO, logger="getdateandtime"):
        main(["--list", "2", "Berlin"], client=cli_client)
    assert "/worldclock/germany/berlin" in caplog.text
    assert "/worldclock/@2950157" not in caplog.text


def test_no_query(cli_client, caplog):
    assert main([], client=cli_client) == 1
    assert "Usage" in caplog.text


def test_no_results(fake_session, caplog):
    fake_session.respond(SEARCH_URL, "0\n")
    assert main(["Atlantis"], client=Client(session=fake_session)) == 1
    assert "No results for 'Atlantis'" in caplog.text


def test_search_failure(fake_session, caplog):
    fake_session.respond(SEARCH_URL, "a\tb\n")
    assert main(["Berlin"], client=Client(session=fake_session)) == 1
    assert "Failed to query 'Berlin'" in caplog.text


def test_detail_failure(fake_session, search_body, caplog):
    fake_session.respond(SEARCH_URL, search_body)
    fake_session.respond(DETAIL_URL, "<html></html>")
    assert main(["Berlin"], client=Client(session=fake_session)) == 1
    assert "deserialize time: not found" in caplog.text


def test_transport_failure(fake_session, caplog):
    def _boom(*args, **kwargs):
        raise requests.ConnectionError("network down")

    fake_session.get = _boom
    assert main(["Berlin"], client=Client(session=fake_session)) == 1
    assert "network down" in caplog.text


def test_config_file_is_loaded(tmp_path, monkeypatch):
    cfg_path = tmp_path / "client.yaml"
    cfg_path.write_text("base_url: http://localhost:9/\n", encoding="utf-8")
    seen = {}

    def _fake_search(self, query):
        seen["base_url"] = self.config.base_url
        return []

    monkeypatch.setattr(Client, "search", _fake_search)
    assert main(["--config", str(cfg_path), "Berlin"]) == 1
    assert seen["base_url"] == "http://localhost:9"
