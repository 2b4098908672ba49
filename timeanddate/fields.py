"""
Field parsers for timeanddate.

Pure functions that turn one scraped text fragment into a typed value.
Every parser trims surrounding whitespace first and either returns a
fully populated value or raises ``ParseError`` naming the field and the
offending raw text.

Two parsers are deliberately permissive:
- ``parse_region`` accepts a name without a ``(CODE)`` suffix (the code
  is left empty). Province rows on the site often have no code.
- ``parse_calendar_date`` maps unknown weekday/month names to
  ``UNDEFINED`` instead of failing; day and year still populate.
"""

from __future__ import annotations

import re

from timeanddate.exceptions import ParseError
from timeanddate.models import (
    CalendarDate,
    ClockTime,
    Month,
    NamedCode,
    Position,
    Weekday,
)

_LATITUDE_HEMISPHERES = ("N", "S")
_LONGITUDE_HEMISPHERES = ("E", "W")

# Leading H:M:S; anything after it (e.g. "am"/"pm") is ignored
_CLOCK_TIME_RE = re.compile(r"(\d+):(\d+):(\d+)")

# "1234 m" -- integer elevation with a meter suffix
_ELEVATION_RE = re.compile(r"(-?\d+) m")

_NAMED_CODE_SEPARATOR = " ("


def _to_float(field: str, raw: str, token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise ParseError(field, raw, f"not a number: {token!r}") from None


def _to_int(field: str, raw: str, token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ParseError(field, raw, f"not an integer: {token!r}") from None


def parse_position(text: str) -> Position:
    """Parse a degree/minute coordinate pair.

    Example: ``"49°58'N / 9°09'E"`` -> ``Position(49.966.., 9.15)``.

    The degree and minute glyphs become separators, so the text must
    split into ``latDeg latMin latHemi / lonDeg lonMin lonHemi``.
    ``S`` negates the latitude, ``W`` negates the longitude.

    Raises:
        ParseError: Wrong token count, missing minutes, non-numeric
            parts, or a hemisphere letter outside N/S and E/W.
    """
    raw = text.strip()
    tokens = raw.replace("°", " ").replace("'", " ").split()

    if len(tokens) != 7 or tokens[3] != "/":
        raise ParseError(
            "position", raw, "expected 'D°M'H / D°M'H'"
        )

    lat_deg, lat_min, lat_hemi, _, lon_deg, lon_min, lon_hemi = tokens

    if lat_hemi not in _LATITUDE_HEMISPHERES:
        raise ParseError("position", raw, f"invalid latitude hemisphere {lat_hemi!r}")
    if lon_hemi not in _LONGITUDE_HEMISPHERES:
        raise ParseError("position", raw, f"invalid longitude hemisphere {lon_hemi!r}")

    latitude = _to_float("position", raw, lat_deg) + _to_float("position", raw, lat_min) / 60
    longitude = _to_float("position", raw, lon_deg) + _to_float("position", raw, lon_min) / 60

    if lat_hemi == "S":
        latitude = -latitude
    if lon_hemi == "W":
        longitude = -longitude

    return Position(latitude=latitude, longitude=longitude)


def parse_named_code(text: str, strict: bool = False, field: str = "named code") -> NamedCode:
    """Parse ``"<name> (<code>)"`` into a ``NamedCode``.

    The text is split on the first ``" ("``; the code is what follows,
    minus the closing parenthesis.

    Args:
        text: e.g. ``"Bavaria (BY)"``.
        strict: If True, input without a ``" ("`` separator is an error.
            Otherwise the whole input becomes the name and the code is
            empty.
        field: Field name reported in ``ParseError``.

    Raises:
        ParseError: Only when *strict* and the separator is missing.
    """
    raw = text.strip()
    name, sep, rest = raw.partition(_NAMED_CODE_SEPARATOR)

    if not sep:
        if strict:
            raise ParseError(field, raw, "missing '(CODE)' suffix")
        return NamedCode(name=raw)

    code = rest[:-1] if rest.endswith(")") else rest
    return NamedCode(name=name, code=code)


def parse_currency(text: str) -> NamedCode:
    """Parse a currency cell such as ``"Euro (EUR)"`` (code required)."""
    return parse_named_code(text, strict=True, field="currency")


def parse_region(text: str) -> NamedCode:
    """Parse a state/province cell such as ``"Bavaria (BY)"`` (code optional)."""
    return parse_named_code(text, strict=False, field="region")


def parse_clock_time(text: str) -> ClockTime:
    """Parse ``"12:54:53"`` into a ``ClockTime``."""
    raw = text.strip()
    match = _CLOCK_TIME_RE.match(raw)
    if not match:
        raise ParseError("time", raw, "expected 'H:MM:SS'")
    hours, minutes, seconds = (int(g) for g in match.groups())
    return ClockTime(hours=hours, minutes=minutes, seconds=seconds)


def parse_calendar_date(text: str) -> CalendarDate:
    """Parse ``"Monday, 23 October 2023"`` into a ``CalendarDate``.

    Commas are treated as whitespace, then the text must contain exactly
    four tokens: weekday, day, month, year.

    Raises:
        ParseError: Wrong token count or non-integer day/year. Unknown
            weekday or month names do *not* raise.
    """
    raw = text.strip()
    tokens = raw.replace(",", " ").split()
    if len(tokens) != 4:
        raise ParseError("date", raw, "expected '<Weekday>, <day> <Month> <year>'")

    weekday_name, day, month_name, year = tokens
    return CalendarDate(
        weekday=Weekday.from_name(weekday_name),
        day=_to_int("date", raw, day),
        month=Month.from_name(month_name),
        year=_to_int("date", raw, year),
    )


def parse_elevation(text: str) -> int:
    """Parse ``"143 m"`` into meters."""
    raw = text.strip()
    match = _ELEVATION_RE.fullmatch(raw)
    if not match:
        raise ParseError("elevation", raw, "expected '<meters> m'")
    return int(match.group(1))


def parse_languages(text: str) -> tuple[str, ...]:
    """Split a languages cell (``"English, French"``) into names."""
    return tuple(lang.strip() for lang in text.strip().split(", "))
