"""Fixed codec configuration shared by the encoder and the decoder.

Changing any value here changes the meaning of every previously issued token.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final


# Excludes the look-alike glyphs 0, O, 1 and I.
CHARSET: Final = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
CHARSET_SIZE: Final = len(CHARSET)
CHARSET_INDEX: Final = MappingProxyType({c: i for i, c in enumerate(CHARSET)})

# WGS84 datum bounds.
MIN_LATITUDE: Final = -90.0
MAX_LATITUDE: Final = 90.0
MIN_LONGITUDE: Final = -180.0
MAX_LONGITUDE: Final = 180.0
MIN_ELEVATION_M: Final = -11_000.0  # Mariana Trench
MAX_ELEVATION_M: Final = 9_000.0  # Everest plus margin

LATITUDE_RANGE: Final = MAX_LATITUDE - MIN_LATITUDE
LONGITUDE_RANGE: Final = MAX_LONGITUDE - MIN_LONGITUDE
ELEVATION_RANGE_M: Final = MAX_ELEVATION_M - MIN_ELEVATION_M

TOKEN_LENGTH: Final = 12
GROUP_SIZE: Final = 4
GROUP_SEPARATOR: Final = "-"

# 12 base-32 digits carry exactly 60 bits, i.e. 30 bit-pairs.
BITS_PER_DIGIT: Final = 5
ENCODED_BITS: Final = TOKEN_LENGTH * BITS_PER_DIGIT
ENCODE_BIT_PAIRS: Final = ENCODED_BITS // 2
DECODE_BIT_PAIRS: Final = ENCODE_BIT_PAIRS
ENCODED_MASK: Final = (1 << ENCODED_BITS) - 1

ELEVATION_SCALE: Final = 0xFFFF
TIMESTAMP_MODULUS: Final = 1 << 32

# Earth radii in meters.
WGS84_SEMI_MAJOR_AXIS_M: Final = 6_378_137.0
EARTH_MEAN_RADIUS_M: Final = 6_371_008.8

METERS_PER_MILE: Final = 1609.344
METERS_PER_NAUTICAL_MILE: Final = 1852.0

# Informational only: characters of a token conventionally quoted per scale.
PRECISION_LEVELS: Final = MappingProxyType(
    {
        "COUNTRY": 2,
        "REGION": 4,
        "CITY": 6,
        "DISTRICT": 8,
        "BUILDING": 10,
        "ROOM": 12,
    }
)

TOKEN_FORMAT: Final = GROUP_SEPARATOR.join(["X" * GROUP_SIZE] * (TOKEN_LENGTH // GROUP_SIZE))
TOKEN_PATTERN: Final = (
    rf"^[{CHARSET}]{{{GROUP_SIZE}}}"
    rf"(?:{GROUP_SEPARATOR}[{CHARSET}]{{{GROUP_SIZE}}}){{{TOKEN_LENGTH // GROUP_SIZE - 1}}}$"
)
