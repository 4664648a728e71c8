"""
Domain value objects.

``Coordinate`` is always ``(latitude, longitude)``.  The vendor sends
GeoJSON-ordered ``[longitude, latitude]`` pairs; the swap happens once,
in :func:`Coordinate.from_lng_lat`, so nothing downstream has to care.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar

T = TypeVar("T")


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    @classmethod
    def from_lng_lat(cls, pair: Optional[Sequence[float]]) -> Optional[Coordinate]:
        """Build from a GeoJSON ``[lng, lat]`` pair; ``None`` if unusable."""
        if pair is None or len(pair) != 2:
            return None
        lng, lat = pair
        return cls(latitude=float(lat), longitude=float(lng))


@dataclass(frozen=True)
class Ranked(Generic[T]):
    """A record paired with its distance from the reference point."""

    item: T
    distance_miles: float
