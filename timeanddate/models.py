"""
Value types for timeanddate.

Everything here is a plain frozen dataclass (or IntEnum): the parsers in
``fields.py`` and the decoders in ``detail.py`` / ``search.py`` build these,
and nothing mutates them afterwards.

Key types:
- Position: latitude/longitude in signed decimal degrees.
- NamedCode: display name + short code (currency, state, province).
- ClockTime / CalendarDate: the site's current local wall clock.
- PlaceSnapshot: everything scraped from one detail page.
- SearchCandidate: one row of a location search.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Sequence

from timeanddate.exceptions import InvalidResponseError


class Weekday(IntEnum):
    """Day of week, ISO numbered. ``UNDEFINED`` marks an unrecognized name."""

    UNDEFINED = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @classmethod
    def from_name(cls, name: str) -> Weekday:
        """Map an English weekday name (e.g. ``"Monday"``) to a member."""
        member = cls.__members__.get(name.strip().upper())
        if member is None or member is cls.UNDEFINED:
            return cls.UNDEFINED
        return member

    def __str__(self) -> str:
        return self.name.capitalize()


class Month(IntEnum):
    """Calendar month. ``UNDEFINED`` marks an unrecognized name."""

    UNDEFINED = 0
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_name(cls, name: str) -> Month:
        """Map an English month name (e.g. ``"October"``) to a member."""
        member = cls.__members__.get(name.strip().upper())
        if member is None or member is cls.UNDEFINED:
            return cls.UNDEFINED
        return member

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Position:
    """Geographic position in signed decimal degrees (south/west negative)."""
    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"Lat: {self.latitude:.2f}; Lon: {self.longitude:.2f}"


@dataclass(frozen=True)
class NamedCode:
    """A display name paired with a short code, e.g. ``Euro (EUR)``.

    ``code`` is an empty string when the source text carried no
    parenthesized code (common for provinces).
    """
    name: str
    code: str = ""

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"


@dataclass(frozen=True)
class ClockTime:
    hours: int
    minutes: int
    seconds: int

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes:02d}:{self.seconds:02d}"


@dataclass(frozen=True)
class CalendarDate:
    weekday: Weekday
    day: int
    month: Month
    year: int

    def __str__(self) -> str:
        return f"{self.weekday}, {self.day} {self.month} {self.year}"


@dataclass(frozen=True)
class PlaceSnapshot:
    """Parsed contents of one location detail page at fetch time.

    Attributes:
        country: e.g. ``"Germany"``.
        state: e.g. ``Bavaria (BY)``; ``None`` if the page has no State row.
        province: Same shape as ``state``, used by some countries instead.
        position: e.g. ``49°58'N / 9°09'E`` decoded to decimal degrees.
        elevation: Meters above sea level (0 if the page omits it).
        currency: e.g. ``Euro (EUR)``.
        languages: One or more language names (e.g. Vancouver lists two).
        access_code: International dial code, e.g. ``"+49"``.
        time: Current local wall-clock time.
        date: Current local calendar date.
    """
    time: ClockTime
    date: CalendarDate
    country: str = ""
    state: NamedCode | None = None
    province: NamedCode | None = None
    position: Position | None = None
    elevation: int = 0
    currency: NamedCode | None = None
    languages: tuple[str, ...] = field(default_factory=tuple)
    access_code: str = ""

    def timestamp(self) -> datetime:
        """Combine ``date`` and ``time`` into a UTC-labelled ``datetime``.

        The site's local wall-clock numbers are reused as-is; no offset is
        applied because the page's timezone is not looked up.

        Raises:
            ValueError: If the date carries an ``UNDEFINED`` month or an
                out-of-range day.
        """
        return datetime(
            self.date.year,
            int(self.date.month),
            self.date.day,
            self.time.hours,
            self.time.minutes,
            self.time.seconds,
            tzinfo=timezone.utc,
        )


# Number of tab-separated fields in a search completion row
SEARCH_ROW_ARITY = 12


@dataclass(frozen=True)
class SearchCandidate:
    """One location returned by the search completion service.

    Example row (split on tabs)::

        /worldclock/@2830841  5  de  b
        Bezirk Spandau (fifth-order administrative division)
        Berlin  Germany  //c.tadst.com/gfx/n/fl/16/de.png  ""  ""  p  ""

    The ``unused*`` fields are kept so the record mirrors the row exactly.
    """
    path: str
    unused1: str
    country_code: str
    unused2: str
    city: str
    state: str
    country: str
    country_flag: str
    unused3: str
    unused4: str
    unused5: str
    unused6: str

    @classmethod
    def from_row(cls, fields: Sequence[str]) -> SearchCandidate:
        """Build a candidate from exactly ``SEARCH_ROW_ARITY`` fields."""
        if len(fields) != SEARCH_ROW_ARITY:
            raise InvalidResponseError(
                f"Expected {SEARCH_ROW_ARITY} fields per search row, got {len(fields)}"
            )
        return cls(*fields)
