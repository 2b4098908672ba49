"""
HTTP client for timeanddate.

``Client`` owns one ``requests.Session`` and performs the two network
operations of the library:

- ``search(query)``: GET the completion endpoint, decode the tab-separated
  rows (``search.decode_search_rows``).
- ``get(path)``: GET a detail page, extract the snapshot
  (``detail.parse_detail``).

Each call issues exactly one blocking request. There is no retry and no
caching; ``requests`` exceptions (connection errors, HTTP error status)
propagate unchanged.
"""

from __future__ import annotations

import logging

import requests

from timeanddate.config import ClientConfig
from timeanddate.detail import parse_detail
from timeanddate.models import PlaceSnapshot, SearchCandidate
from timeanddate.search import build_search_params, decode_search_rows

logger = logging.getLogger(__name__)


class Client:
    """Blocking client for the search and detail endpoints.

    Args:
        config: HTTP settings. Defaults to ``ClientConfig()``.
        session: Session to send requests with. A new one is created and
            configured from *config* when omitted. A supplied session is
            used as-is except for the headers and redirect limit.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.session = session if session is not None else requests.Session()

        self.session.headers.update({"Accept-Language": self.config.accept_language})
        if self.config.user_agent:
            self.session.headers.update({"User-Agent": self.config.user_agent})
        self.session.max_redirects = self.config.max_redirects

    def _get(self, url: str, params: dict[str, str] | None = None) -> requests.Response:
        logger.info("GET %s", url)
        response = self.session.get(url, params=params, timeout=self.config.timeout)
        response.raise_for_status()
        return response

    def search(self, query: str) -> list[SearchCandidate]:
        """Look up locations matching *query*, in the order the site ranks them.

        Raises:
            InvalidResponseError: If a response row is malformed.
            requests.RequestException: On transport failure.
        """
        response = self._get(self.config.search_url, params=build_search_params(query))
        candidates = decode_search_rows(response.text)
        logger.info("Search %r returned %d candidate(s)", query, len(candidates))
        return candidates

    def get(self, path: str) -> PlaceSnapshot:
        """Fetch and parse the detail page at *path* (e.g. ``/worldclock/@2830841``).

        Raises:
            DeserializeError: If a page field cannot be decoded.
            NotFoundError: If the current time or date is missing.
            requests.RequestException: On transport failure.
        """
        response = self._get(self.config.detail_url(path))
        return parse_detail(response.content)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


_DEFAULT_CLIENT: Client | None = None


def default_client() -> Client:
    """Module-wide client used by ``timeanddate.search`` / ``timeanddate.get``."""
    global _DEFAULT_CLIENT
    if _DEFAULT_CLIENT is None:
        _DEFAULT_CLIENT = Client()
    return _DEFAULT_CLIENT
