from __future__ import annotations

from geopin.codec import (
    DecodedToken,
    DistanceResult,
    GeoPinError,
    GeoPosition,
    InvalidCoordinate,
    InvalidToken,
    PrecisionBounds,
    UnknownCharacter,
    decode,
    distance,
    encode,
    encode_position,
    is_valid_coordinate,
    is_valid_token,
)


__all__ = [
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
    "is_valid_coordinate",
    "is_valid_token",
]
