"""
Search row decoder for timeanddate.

The site's completion service answers with plain text: one candidate per
line, fields separated by a horizontal tab. The body ends with a
single-field terminator line, which is skipped.

Decoding is all-or-nothing: one row with any arity other than 1 or
``SEARCH_ROW_ARITY`` raises ``InvalidResponseError`` and nothing decoded
so far is returned.
"""

from __future__ import annotations

import logging

from timeanddate.exceptions import InvalidResponseError
from timeanddate.models import SEARCH_ROW_ARITY, SearchCandidate

logger = logging.getLogger(__name__)

FIELD_DELIMITER = "\t"

# Completion mode for city lookups
SEARCH_MODE = "ci"


def build_search_params(query: str) -> dict[str, str]:
    """Query parameters for the completion endpoint."""
    return {
        "query": query,
        "mode": SEARCH_MODE,
        "xd": "1",
    }


def decode_search_rows(body: str) -> list[SearchCandidate]:
    """Decode a completion response body into candidates, in response order.

    Args:
        body: Raw response text.

    Returns:
        One ``SearchCandidate`` per 12-field line. Single-field lines
        (the terminator, blank lines) are skipped.

    Raises:
        InvalidResponseError: If any line has a field count other than
            1 or 12.
    """
    candidates: list[SearchCandidate] = []

    for lineno, line in enumerate(body.split("\n"), start=1):
        line = line.rstrip("\r")
        row = line.split(FIELD_DELIMITER)

        if len(row) == 1:
            continue

        if len(row) != SEARCH_ROW_ARITY:
            raise InvalidResponseError(
                f"Search response line {lineno} has {len(row)} fields, "
                f"expected {SEARCH_ROW_ARITY}: {line!r}"
            )

        candidates.append(SearchCandidate.from_row(row))

    logger.debug("Decoded %d search candidate(s)", len(candidates))
    return candidates
