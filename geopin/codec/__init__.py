"""GeoPin coordinate codec.

Pure functions only: no I/O, no logging, no shared mutable state.
"""

from __future__ import annotations

from geopin.codec.decoder import decode
from geopin.codec.distance import distance, haversine_m, measure
from geopin.codec.encoder import encode, encode_position
from geopin.codec.errors import GeoPinError, InvalidCoordinate, InvalidToken, UnknownCharacter
from geopin.codec.types import (
    BoundingBox,
    DecodedToken,
    DistanceResult,
    GeoPosition,
    PrecisionBounds,
)
from geopin.codec.validators import is_valid_coordinate, is_valid_timestamp, is_valid_token

__all__ = [
    "BoundingBox",
    "DecodedToken",
    "DistanceResult",
    "GeoPinError",
    "GeoPosition",
    "InvalidCoordinate",
    "InvalidToken",
    "PrecisionBounds",
    "UnknownCharacter",
    "decode",
    "distance",
    "encode",
    "encode_position",
    "haversine_m",
    "is_valid_coordinate",
    "is_valid_timestamp",
    "is_valid_token",
    "measure",
]
