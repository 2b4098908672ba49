"""
Tabular views of search candidates and snapshots.

Used by the CLI to list several candidates at once and to print a
snapshot field by field. The ``unused*`` positional fields of a
``SearchCandidate`` are left out of the frame.
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from timeanddate.models import PlaceSnapshot, SearchCandidate

CANDIDATE_COLUMNS = ["path", "country_code", "city", "state", "country", "country_flag"]


def candidates_to_frame(candidates: Iterable[SearchCandidate]) -> pd.DataFrame:
    """One row per candidate, in input order, with ``CANDIDATE_COLUMNS``."""
    rows = [
        {col: getattr(candidate, col) for col in CANDIDATE_COLUMNS}
        for candidate in candidates
    ]
    return pd.DataFrame(rows, columns=CANDIDATE_COLUMNS)


def snapshot_to_record(snapshot: PlaceSnapshot) -> dict[str, object]:
    """Flatten a snapshot into display-ready values.

    Nested values are rendered with their ``str()`` form; absent optional
    values become ``None``.
    """
    def _text(value: object) -> str | None:
        return None if value is None else str(value)

    return {
        "country": snapshot.country,
        "state": _text(snapshot.state),
        "province": _text(snapshot.province),
        "position": _text(snapshot.position),
        "latitude": snapshot.position.latitude if snapshot.position else None,
        "longitude": snapshot.position.longitude if snapshot.position else None,
        "elevation_m": snapshot.elevation,
        "currency": _text(snapshot.currency),
        "languages": ", ".join(snapshot.languages),
        "access_code": snapshot.access_code,
        "time": str(snapshot.time),
        "date": str(snapshot.date),
    }
