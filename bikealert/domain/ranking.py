"""
Proximity Ranking
=================

1. **Distance**  -- haversine miles from the reference point to each
   record's coordinate.
2. **Sort**      -- ascending by distance.  Ties keep no particular order.
3. **Select**    -- the first ``min(limit, len(records))`` entries, so a
   network with fewer live vehicles than ``limit`` is not an error.

Records without a usable coordinate are dropped before sorting.

Complexity
----------
O(N log N) for N records: one haversine call per record plus the sort.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Protocol, TypeVar

from .distance import haversine_miles
from .entities import Coordinate, Ranked

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 5


class Locatable(Protocol):
    @property
    def coordinate(self) -> Optional[Coordinate]: ...


L = TypeVar("L", bound=Locatable)


def distance_to(origin: Coordinate, target: Coordinate) -> float:
    return haversine_miles(
        origin.latitude, origin.longitude, target.latitude, target.longitude
    )


def rank_by_distance(origin: Coordinate, records: Iterable[L]) -> list[Ranked[L]]:
    """Pair every locatable record with its distance, nearest first."""
    ranked: list[Ranked[L]] = []
    skipped = 0
    for record in records:
        coordinate = record.coordinate
        if coordinate is None:
            skipped += 1
            continue
        ranked.append(Ranked(record, distance_to(origin, coordinate)))

    if skipped:
        logger.debug("Skipped %d record(s) without a position", skipped)

    ranked.sort(key=lambda r: r.distance_miles)
    return ranked


def nearest(
    origin: Coordinate, records: Iterable[L], limit: int = DEFAULT_LIMIT
) -> list[Ranked[L]]:
    """Return at most *limit* records closest to *origin*."""
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    return rank_by_distance(origin, records)[:limit]
