"""
Command line entry point: look up the current date and time of a place.

Usage:
    getdateandtime Würzburg
    getdateandtime --list 5 new york
    getdateandtime --config mirror.yaml Vancouver

The query is every positional word joined by spaces. The first search
result is fetched and printed; ``--list N`` also prints the first N
candidates as a table.

Exit status is 1 when no query is given, the search fails or finds
nothing, or the detail page cannot be fetched or decoded.
"""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

import requests

from timeanddate.client import Client
from timeanddate.config import ClientConfig, load_config
from timeanddate.exceptions import TimeAndDateError
from timeanddate.frames import candidates_to_frame, snapshot_to_record

log = logging.getLogger("getdateandtime")

TIMESTAMP_FORMAT = "%a %b %d %H:%M:%S %Z %Y"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="getdateandtime",
        description="Print the current date, time and location details of a place.",
    )
    parser.add_argument("query", nargs="*", help="location query, e.g. 'Berlin'")
    parser.add_argument("--config", help="YAML client config file")
    parser.add_argument(
        "--list",
        type=int,
        default=0,
        metavar="N",
        help="also print the first N search candidates",
    )
    return parser


def main(argv: Sequence[str] | None = None, client: Client | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )

    args = _build_parser().parse_args(argv)
    query = " ".join(args.query).strip()
    if not query:
        log.error("Usage: getdateandtime [location query]")
        return 1

    if client is None:
        config = load_config(args.config) if args.config else ClientConfig()
        client = Client(config)

    try:
        candidates = client.search(query)
    except (TimeAndDateError, requests.RequestException) as exc:
        log.error("Failed to query '%s': %s", query, exc)
        return 1

    if not candidates:
        log.error("No results for '%s'", query)
        return 1

    if args.list > 0:
        frame = candidates_to_frame(candidates[: args.list])
        log.info("Candidates:\n%s", frame.to_string(index=False))

    result = candidates[0]
    log.info(
        "Getting time for %s which is in %s/%s (%s)",
        result.city, result.country, result.state, result.country_code,
    )

    try:
        snapshot = client.get(result.path)
    except (TimeAndDateError, requests.RequestException) as exc:
        log.error("Failed to get timeanddate: %s", exc)
        return 1

    for name, value in snapshot_to_record(snapshot).items():
        log.info("%-12s %s", name + ":", value)
    log.info("---")

    try:
        log.info("  =>>        %s", snapshot.timestamp().strftime(TIMESTAMP_FORMAT))
    except ValueError as exc:
        log.warning("Cannot build timestamp from %s %s: %s", snapshot.date, snapshot.time, exc)

    return 0


def run() -> None:
    """Console script wrapper."""
    raise SystemExit(main())
