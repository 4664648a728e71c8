"""
Command-line entry point.

* Reads the reference point from ``LAT`` / ``LNG`` before any network I/O.
* Fetches bikes and hubs concurrently, ranks each list, prints the report.
* Any ``BikeAlertError`` is printed to stderr and the process exits 1;
  nothing is written to stdout on failure.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from bikealert.config import Settings, load_origin, load_settings
from bikealert.console.report import render_report
from bikealert.domain.entities import Coordinate
from bikealert.domain.errors import BikeAlertError
from bikealert.domain.ranking import nearest
from bikealert.infrastructure.jump_client import JumpClient
from bikealert.workers.fetcher import fetch_listings

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        n = -1
    if n < 0:
        raise argparse.ArgumentTypeError(
            f"must be a non-negative integer, got {value!r}"
        )
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bikealert",
        description="List the JUMP bikes and hubs nearest to $LAT/$LNG.",
    )
    ap.add_argument("--limit", type=_non_negative_int, default=None,
                    help="how many bikes and hubs to list (default: 5)")
    ap.add_argument("--network", default=None,
                    help="JUMP network id (default: $BIKEALERT_NETWORK_ID or 3)")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="log requests and timings to stderr")
    return ap


async def run(origin: Coordinate, settings: Settings) -> str:
    """Fetch, rank and render.  Returns the report text."""
    async with JumpClient.from_settings(settings) as client:
        listings = await fetch_listings(client, settings.fetch_deadline_seconds)

    limit = settings.nearest_limit
    return render_report(
        nearest(origin, listings.bikes, limit),
        nearest(origin, listings.hubs, limit),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        origin = load_origin()
        settings = load_settings()
        overrides = {}
        if args.network is not None:
            overrides["network_id"] = args.network
        if args.limit is not None:
            overrides["nearest_limit"] = args.limit
        if overrides:
            settings = settings.model_copy(update=overrides)

        logging.basicConfig(
            level=logging.DEBUG if args.verbose else settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        logger.debug("Origin %s, network %s", origin, settings.network_id)

        report = asyncio.run(run(origin, settings))
    except BikeAlertError as exc:
        print(f"bikealert: {exc}", file=sys.stderr)
        return 1

    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
