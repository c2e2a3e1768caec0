from __future__ import annotations

from geopin.codec.constants import (
    CHARSET,
    CHARSET_SIZE,
    ELEVATION_RANGE_M,
    ELEVATION_SCALE,
    ENCODE_BIT_PAIRS,
    ENCODED_MASK,
    GROUP_SEPARATOR,
    GROUP_SIZE,
    LATITUDE_RANGE,
    LONGITUDE_RANGE,
    MIN_ELEVATION_M,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    TIMESTAMP_MODULUS,
    TOKEN_LENGTH,
)
from geopin.codec.errors import InvalidCoordinate
from geopin.codec.types import GeoPosition
from geopin.codec.validators import (
    is_finite_number,
    is_valid_coordinate,
    is_valid_timestamp,
)


def _quantize(normalized: float, bits: int) -> int:
    # Upper datum edge (lat 90 / lon 180) falls into the last cell instead of wrapping to 0.
    cells = 1 << bits
    return min(int(normalized * cells), cells - 1)


def _interleave(norm_lat: float, norm_lon: float, *, pairs: int) -> int:
    """Interleave fractional bits: lon bit i+1 at 2i, lat bit i+1 at 2i+1."""

    q_lat = _quantize(norm_lat, pairs)
    q_lon = _quantize(norm_lon, pairs)

    value = 0
    for i in range(pairs):
        shift = pairs - 1 - i
        lon_bit = (q_lon >> shift) & 1
        lat_bit = (q_lat >> shift) & 1
        value |= lon_bit << (2 * i)
        value |= lat_bit << (2 * i + 1)
    return value


def _elevation_bits(elevation: float) -> int:
    normalized = (elevation - MIN_ELEVATION_M) / ELEVATION_RANGE_M
    normalized = max(0.0, min(1.0, normalized))
    return int(normalized * ELEVATION_SCALE)


def _to_base32(value: int) -> str:
    digits: list[str] = []
    for _ in range(TOKEN_LENGTH):
        value, index = divmod(value, CHARSET_SIZE)
        digits.append(CHARSET[index])
    return "".join(reversed(digits))


def format_token(raw: str) -> str:
    """Group a bare 12-character token as XXXX-XXXX-XXXX."""

    return GROUP_SEPARATOR.join(
        raw[i : i + GROUP_SIZE] for i in range(0, len(raw), GROUP_SIZE)
    )


def encode(
    latitude: float,
    longitude: float,
    elevation: float | None = None,
    timestamp: int | None = None,
) -> str:
    """Encode a WGS84 position into a GeoPin token.

    Elevation and timestamp are XOR-folded into the low-order bits, which are
    also coordinate bits. A token built with either of them does not decode
    back to the original latitude/longitude.
    """

    if not is_valid_coordinate(latitude, longitude):
        field = "latitude" if not is_valid_coordinate(latitude, 0.0) else "longitude"
        raise InvalidCoordinate(
            f"Invalid coordinates: ({latitude!r}, {longitude!r}) are not valid WGS84 values",
            field=field,
            value=latitude if field == "latitude" else longitude,
        )
    if elevation is not None and not is_finite_number(elevation):
        raise InvalidCoordinate(
            f"Invalid elevation: {elevation!r} is not a finite number",
            field="elevation",
            value=elevation,
        )
    if not is_valid_timestamp(timestamp):
        raise InvalidCoordinate(
            f"Invalid timestamp: {timestamp!r} must be a non-negative integer",
            field="timestamp",
            value=timestamp,
        )

    norm_lat = (latitude - MIN_LATITUDE) / LATITUDE_RANGE
    norm_lon = (longitude - MIN_LONGITUDE) / LONGITUDE_RANGE
    value = _interleave(norm_lat, norm_lon, pairs=ENCODE_BIT_PAIRS)

    if elevation is not None:
        value ^= _elevation_bits(elevation)
    if timestamp is not None:
        value ^= int(timestamp) % TIMESTAMP_MODULUS

    return format_token(_to_base32(value & ENCODED_MASK))


def encode_position(position: GeoPosition) -> str:
    return encode(
        position.latitude,
        position.longitude,
        elevation=position.elevation,
        timestamp=position.timestamp,
    )
