from __future__ import annotations

import math

from geopin.codec.constants import EARTH_MEAN_RADIUS_M
from geopin.codec.decoder import decode
from geopin.codec.types import DistanceResult


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = (
        math.sin(dphi / 2.0) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2.0) ** 2
    )
    # Rounding can push a a hair above 1 for antipodal points.
    a = min(a, 1.0)
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return EARTH_MEAN_RADIUS_M * c


def distance(token_a: str, token_b: str) -> float:
    """Great-circle distance in meters between two GeoPin tokens."""

    a = decode(token_a)
    b = decode(token_b)
    return haversine_m(a.latitude, a.longitude, b.latitude, b.longitude)


def measure(token_a: str, token_b: str) -> DistanceResult:
    return DistanceResult(meters=distance(token_a, token_b))
