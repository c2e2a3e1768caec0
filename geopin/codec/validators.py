from __future__ import annotations

import math
from numbers import Integral, Real

from geopin.codec.constants import (
    CHARSET_INDEX,
    GROUP_SEPARATOR,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
    TOKEN_LENGTH,
)


def is_finite_number(value: object) -> bool:
    # bool is an int subclass but never a coordinate.
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def is_valid_coordinate(latitude: object, longitude: object) -> bool:
    if not (is_finite_number(latitude) and is_finite_number(longitude)):
        return False
    return (
        MIN_LATITUDE <= latitude <= MAX_LATITUDE  # type: ignore[operator]
        and MIN_LONGITUDE <= longitude <= MAX_LONGITUDE  # type: ignore[operator]
    )


def is_valid_timestamp(timestamp: object) -> bool:
    if timestamp is None:
        return True
    if isinstance(timestamp, bool) or not isinstance(timestamp, Integral):
        return False
    return timestamp >= 0


def normalize_token(token: str) -> str:
    """Drop group separators and upper-case."""

    return token.replace(GROUP_SEPARATOR, "").upper()


def is_valid_token(token: object) -> bool:
    if not isinstance(token, str):
        return False
    clean = normalize_token(token)
    return len(clean) == TOKEN_LENGTH and all(c in CHARSET_INDEX for c in clean)
