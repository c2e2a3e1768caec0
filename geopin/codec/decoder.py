from __future__ import annotations

import math

from geopin.codec.constants import (
    CHARSET_INDEX,
    CHARSET_SIZE,
    DECODE_BIT_PAIRS,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    TOKEN_LENGTH,
    WGS84_SEMI_MAJOR_AXIS_M,
)
from geopin.codec.encoder import format_token
from geopin.codec.errors import InvalidToken, UnknownCharacter
from geopin.codec.types import BoundingBox, DecodedToken, GeoPosition, PrecisionBounds
from geopin.codec.validators import normalize_token


def _parse_base32(clean: str, *, token: str) -> int:
    value = 0
    for position, char in enumerate(clean):
        try:
            digit = CHARSET_INDEX[char]
        except KeyError as e:
            raise UnknownCharacter(char, position, token=token) from e
        value = value * CHARSET_SIZE + digit
    return value


def _deinterleave(value: int, *, pairs: int) -> tuple[float, float]:
    """Return the (lat, lon) fractions carried by the interleaved bits."""

    lat_frac = 0.0
    lon_frac = 0.0
    for i in range(pairs):
        lon_bit = (value >> (2 * i)) & 1
        lat_bit = (value >> (2 * i + 1)) & 1
        weight = 2.0 ** -(i + 1)
        lon_frac += lon_bit * weight
        lat_frac += lat_bit * weight
    return lat_frac, lon_frac


def accuracy_radius_m(latitude_error: float, longitude_error: float, latitude: float) -> float:
    """Combine per-axis degree errors into a radius in meters at `latitude`."""

    lat_m = math.radians(latitude_error) * WGS84_SEMI_MAJOR_AXIS_M
    # Meridians converge towards the poles.
    lon_m = (
        math.radians(longitude_error)
        * WGS84_SEMI_MAJOR_AXIS_M
        * math.cos(math.radians(latitude))
    )
    return math.hypot(lat_m, lon_m)


def decode(token: str) -> DecodedToken:
    """Decode a GeoPin token to the centre of its quantization cell.

    Hyphens are optional and case is ignored. Bits XOR-folded from elevation or
    timestamp at encode time are not recovered.
    """

    if not isinstance(token, str):
        raise InvalidToken("Invalid GeoPin: expected a string", token=token)

    clean = normalize_token(token)
    if len(clean) != TOKEN_LENGTH:
        raise InvalidToken(
            f"Invalid GeoPin format: expected {TOKEN_LENGTH} characters, got {len(clean)}",
            token=token,
        )

    value = _parse_base32(clean, token=token)
    lat_frac, lon_frac = _deinterleave(value, pairs=DECODE_BIT_PAIRS)

    cells = 2.0**DECODE_BIT_PAIRS
    lat_error = LATITUDE_RANGE / cells
    lon_error = LONGITUDE_RANGE / cells

    latitude = lat_frac * LATITUDE_RANGE + MIN_LATITUDE + lat_error / 2.0
    longitude = lon_frac * LONGITUDE_RANGE + MIN_LONGITUDE + lon_error / 2.0

    bounds = BoundingBox(
        north=latitude + lat_error / 2.0,
        south=latitude - lat_error / 2.0,
        east=longitude + lon_error / 2.0,
        west=longitude - lon_error / 2.0,
    )
    precision = PrecisionBounds(
        latitude_error=lat_error,
        longitude_error=lon_error,
        accuracy_radius_m=accuracy_radius_m(lat_error, lon_error, latitude),
        bounds=bounds,
    )
    return DecodedToken(
        token=format_token(clean),
        position=GeoPosition(latitude=latitude, longitude=longitude),
        precision=precision,
    )
