from __future__ import annotations
from dataclasses import dataclass
from math import acos, atan, copysign, cos, pi, radians, sin, sqrt
from typing import Callable, NamedTuple

"""
Distance calculators.

Three ways to get the distance in meters between two lat/lon points (degrees):
- `exact_distance_m`: spherical law of cosines, the reference value
- `pythagorean_distance_m`: flat-plane approximation on the raw degree deltas
- `trigonometric_distance_m`: flat-plane approximation via an implied bearing

The approximations are only meant for points a few hundred meters apart. Neither
corrects for longitude degrees shrinking toward the poles.
"""

EARTH_RADIUS_M = 6_378_100.0


def meters_per_degree(radius_m: float = EARTH_RADIUS_M) -> float:
    """Arc length of one degree on a great circle (pi * R / 180)."""
    return pi * radius_m / 180.0


DIST_PER_DEGREE_M = meters_per_degree(EARTH_RADIUS_M)


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float


class GeoPointPair(NamedTuple):
    """Two points as four plain floats; benchmark datasets hold millions of these."""

    lat1: float
    lon1: float
    lat2: float
    lon2: float

    @classmethod
    def from_points(cls, a: GeoPoint, b: GeoPoint) -> "GeoPointPair":
        return cls(a.lat, a.lon, b.lat, b.lon)


def exact_distance_m(
    lat1: float, lon1: float, lat2: float, lon2: float, *, radius_m: float = EARTH_RADIUS_M
) -> float:
    """Great-circle distance in meters using the spherical law of cosines.

    Loses precision for very short distances (acos near 1) but is the reference
    the approximations are measured against.
    """
    if lat1 == lat2 and lon1 == lon2:
        # acos just below 1 would otherwise leave ~0.1 m of rounding noise.
        return 0.0

    rlat1 = radians(lat1)
    rlat2 = radians(lat2)
    theta = radians(lon2) - radians(lon1)

    c = sin(rlat1) * sin(rlat2) + cos(rlat1) * cos(rlat2) * cos(theta)
    # Rounding can land a few ulps outside acos' domain for antipodal points.
    c = max(-1.0, min(1.0, c))
    return acos(c) * radius_m


def pythagorean_distance_m(
    lat1: float, lon1: float, lat2: float, lon2: float, *, radius_m: float = EARTH_RADIUS_M
) -> float:
    """Planar distance: degree deltas scaled by meters-per-degree, then the Euclidean norm."""
    dlat = lat1 - lat2
    dlon = lon1 - lon2
    return meters_per_degree(radius_m) * sqrt(dlat * dlat + dlon * dlon)


def _bearing(opposite: float, adjacent: float) -> float:
    if adjacent == 0.0:
        # atan(+-inf); a -0.0 delta flips the infinity like float division would.
        return copysign(pi / 2, opposite) * copysign(1.0, adjacent)
    return atan(opposite / adjacent)


def trigonometric_distance_m(
    lat1: float, lon1: float, lat2: float, lon2: float, *, radius_m: float = EARTH_RADIUS_M
) -> float:
    """Planar distance through the bearing implied by sin(dlat) over sin(dlon).

    Kept as the benchmark has always computed it:
    - the sines are taken in radians but scaled by a per-degree constant, so the
      value is roughly pi/180 times the Pythagorean one;
    - the sign follows sin(dlon), i.e. it is negative when lon1 < lon2;
    - dlon == 0 gives a bearing of +-pi/2, dlat == 0 (with dlon != 0) gives NaN.
    """
    opposite = sin(radians(lat1 - lat2))
    adjacent = sin(radians(lon1 - lon2))
    if opposite == 0.0 and adjacent == 0.0:
        return 0.0

    s = sin(_bearing(opposite, adjacent))
    if s == 0.0:
        return float("nan")
    return meters_per_degree(radius_m) * opposite / s


DistanceFn = Callable[..., float]

DISTANCE_METHODS: dict[str, DistanceFn] = {
    "exact": exact_distance_m,
    "pythagorean": pythagorean_distance_m,
    "trigonometric": trigonometric_distance_m,
}
