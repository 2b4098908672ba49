"""
Detail page extractor for timeanddate.

Turns a location page (``/worldclock/@<id>``) into a ``PlaceSnapshot``.

Extraction algorithm:
1. Find the key/value table (``_TABLE_SELECTOR``) and pair each ``th``
   label with the ``td`` at the same position.
2. Normalize labels ("Country: " -> "Country") and dispatch each one to
   its handler in ``_LABEL_HANDLERS``. Unknown labels are logged and
   skipped; the site adds rows from time to time.
3. Read the current time and date from their own ``span`` elements.
   Both are required.
4. Build the snapshot only after every field decoded. Any ``ParseError``
   aborts the whole extraction as a ``DeserializeError``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from bs4 import BeautifulSoup

from timeanddate.exceptions import DeserializeError, NotFoundError, ParseError
from timeanddate.fields import (
    parse_calendar_date,
    parse_clock_time,
    parse_currency,
    parse_elevation,
    parse_languages,
    parse_position,
    parse_region,
)
from timeanddate.models import PlaceSnapshot

logger = logging.getLogger(__name__)

_TABLE_SELECTOR = "table.table.table--left.table--inner-borders-rows"
_TIME_SELECTOR = "span#ct"
_DATE_SELECTOR = "span#ctdat"


def _identity(value: str) -> str:
    return value


# label -> (snapshot attribute, error part name, parser)
_LABEL_HANDLERS: dict[str, tuple[str, str, Callable[[str], Any]]] = {
    "Country": ("country", "country", _identity),
    "State": ("state", "state", parse_region),
    "Province": ("province", "province", parse_region),
    "Lat/Long": ("position", "position", parse_position),
    "Elevation": ("elevation", "elevation", parse_elevation),
    "Currency": ("currency", "currency", parse_currency),
    "Languages": ("languages", "languages", parse_languages),
    "Country Code": ("access_code", "access code", _identity),
}


def normalize_label(label: str) -> str:
    """Strip whitespace and the trailing colon: ``"Lat/Long: "`` -> ``"Lat/Long"``."""
    return label.strip().rstrip(":").strip()


def extract_table(soup: BeautifulSoup) -> list[tuple[str, str]]:
    """Read the key/value table as ``(label, value)`` pairs in page order.

    Labels are normalized, values stripped. Extra ``th`` or ``td`` cells
    without a partner are dropped. Returns an empty list when the page
    has no such table.
    """
    table = soup.select_one(_TABLE_SELECTOR)
    if table is None:
        logger.warning("Key/value table not found (%s)", _TABLE_SELECTOR)
        return []

    labels = [normalize_label(th.get_text()) for th in table.find_all("th")]
    values = [td.get_text().strip() for td in table.find_all("td")]
    return list(zip(labels, values))


def _decode(part: str, value: str, parser: Callable[[str], Any]) -> Any:
    try:
        return parser(value)
    except ParseError as exc:
        raise DeserializeError(part, value, exc.reason) from exc


def _required_text(soup: BeautifulSoup, selector: str, part: str) -> str:
    element = soup.select_one(selector)
    if element is None:
        raise NotFoundError(part)
    return element.get_text().strip()


def parse_detail(html: str | bytes) -> PlaceSnapshot:
    """Extract a ``PlaceSnapshot`` from a detail page's markup.

    Raises:
        DeserializeError: A table value or the time/date text failed to
            parse. ``part`` names the field, ``data`` the raw text.
        NotFoundError: The current time or date element is missing.
    """
    soup = BeautifulSoup(html, "html.parser")

    fields: dict[str, Any] = {}
    for label, value in extract_table(soup):
        handler = _LABEL_HANDLERS.get(label)
        if handler is None:
            logger.debug("Unhandled table label %r", label)
            continue
        attr, part, parser = handler
        fields[attr] = _decode(part, value, parser)

    time_text = _required_text(soup, _TIME_SELECTOR, "time")
    clock = _decode("time", time_text, parse_clock_time)

    date_text = _required_text(soup, _DATE_SELECTOR, "date")
    date = _decode("date", date_text, parse_calendar_date)

    return PlaceSnapshot(time=clock, date=date, **fields)
