"""
timeanddate: Python client for timeanddate.com location search and world clock pages.

Public API surface:

- ``search(query)`` -- free-text location lookup. Returns a list of
  ``SearchCandidate`` in the order the site ranks them.

- ``get(path)`` -- fetch a candidate's detail page (``candidate.path``)
  and return a ``PlaceSnapshot`` with country, region, position,
  elevation, currency, languages, dial code and the current local
  time and date.

Both use a lazily created module-wide ``Client``; construct your own
``Client(ClientConfig(...))`` to change host, headers or redirects.

Example::

    import timeanddate

    candidates = timeanddate.search("Würzburg")
    snapshot = timeanddate.get(candidates[0].path)
    print(snapshot.position, snapshot.timestamp())
"""

from __future__ import annotations

from timeanddate.client import Client, default_client
from timeanddate.config import ClientConfig, load_config
from timeanddate.exceptions import (
    ConfigValidationError,
    DeserializeError,
    InvalidResponseError,
    NotFoundError,
    ParseError,
    TimeAndDateError,
)
from timeanddate.models import (
    CalendarDate,
    ClockTime,
    Month,
    NamedCode,
    PlaceSnapshot,
    Position,
    SearchCandidate,
    Weekday,
)

__all__ = [
    "search",
    "get",
    "Client",
    "ClientConfig",
    "load_config",
    "CalendarDate",
    "ClockTime",
    "Month",
    "NamedCode",
    "PlaceSnapshot",
    "Position",
    "SearchCandidate",
    "Weekday",
    "TimeAndDateError",
    "ParseError",
    "DeserializeError",
    "NotFoundError",
    "InvalidResponseError",
    "ConfigValidationError",
]


def search(query: str) -> list[SearchCandidate]:
    """Search for locations with the default client.

    Raises:
        InvalidResponseError: If the response contains a malformed row.
        requests.RequestException: On transport failure.
    """
    return default_client().search(query)


def get(path: str) -> PlaceSnapshot:
    """Fetch a location's detail page with the default client.

    Args:
        path: Relative page path from ``SearchCandidate.path``,
            e.g. ``"/worldclock/@2830841"``.

    Raises:
        DeserializeError: If a page field cannot be decoded.
        NotFoundError: If the current time or date is missing.
        requests.RequestException: On transport failure.
    """
    return default_client().get(path)
