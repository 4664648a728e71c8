"""
Distance calculation using the Haversine formula.

Assumption
----------
The Earth is treated as a sphere of radius 3958.756 miles.  Inputs are
decimal degrees and are not range-checked; out-of-range values simply
flow through the trigonometry.

Complexity: O(1) per call.
"""

import math

EARTH_RADIUS_MILES = 3_958.756


def _hav(theta: float) -> float:
    """Haversine of an angle in radians: sin²(θ/2)."""
    return math.sin(theta / 2) ** 2


def haversine_miles(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **miles** between two points."""
    phi1, lam1, phi2, lam2 = map(math.radians, (lat1, lng1, lat2, lng2))

    h = _hav(phi2 - phi1) + math.cos(phi1) * math.cos(phi2) * _hav(lam2 - lam1)
    # Rounding can push h marginally above 1 for antipodal points
    central_angle = 2 * math.asin(math.sqrt(min(1.0, h)))
    return EARTH_RADIUS_MILES * central_angle
