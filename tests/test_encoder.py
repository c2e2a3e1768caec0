from __future__ import annotations

import math
import re

import pytest

from geopin.codec import GeoPosition, InvalidCoordinate, encode, encode_position
from geopin.codec.constants import TOKEN_PATTERN


def test_origin_sets_only_the_half_bits() -> None:
    # 0.5 on both axes => only the first fractional bit of each axis is set.
    assert encode(0.0, 0.0) == "AAAA-AAAA-AAAD"


def test_lower_datum_corner_is_all_zero_digits() -> None:
    assert encode(-90.0, -180.0) == "AAAA-AAAA-AAAA"


def test_upper_datum_corner_stays_in_last_cell() -> None:
    assert encode(90.0, 180.0) == "9999-9999-9999"


@pytest.mark.parametrize(
    ("lat", "lon"),
    [(0, 0), (40.7128, -74.0060), (-33.8688, 151.2093), (90, 0), (-90, 0), (0, 180), (0, -180)],
)
def test_token_matches_interchange_format(lat: float, lon: float) -> None:
    token = encode(lat, lon)
    assert re.fullmatch(TOKEN_PATTERN, token), token
    assert len(token.replace("-", "")) == 12


def test_format_holds_over_a_coarse_grid() -> None:
    for lat in range(-90, 91, 15):
        for lon in range(-180, 181, 30):
            assert re.fullmatch(TOKEN_PATTERN, encode(lat, lon))


def test_encode_is_deterministic() -> None:
    assert encode(35.6762, 139.6503) == encode(35.6762, 139.6503)
    assert encode(35.6762, 139.6503, 40.0, 1_700_000_000) == encode(
        35.6762, 139.6503, 40.0, 1_700_000_000
    )


@pytest.mark.parametrize(
    ("lat", "lon", "field"),
    [
        (91, 0, "latitude"),
        (-91, 0, "latitude"),
        (0, 181, "longitude"),
        (0, -181, "longitude"),
        (math.nan, 0, "latitude"),
        (0, math.inf, "longitude"),
    ],
)
def test_out_of_datum_coordinates_are_rejected(lat: float, lon: float, field: str) -> None:
    with pytest.raises(InvalidCoordinate) as info:
        encode(lat, lon)
    assert info.value.field == field


def test_non_numeric_coordinates_are_rejected() -> None:
    with pytest.raises(InvalidCoordinate):
        encode("40.0", 0.0)  # type: ignore[arg-type]
    with pytest.raises(InvalidCoordinate):
        encode(True, 0.0)  # type: ignore[arg-type]


def test_elevation_at_lower_bound_leaves_token_unchanged() -> None:
    assert encode(0.0, 0.0, elevation=-11_000.0) == encode(0.0, 0.0)


def test_elevation_is_xor_folded_into_low_bits() -> None:
    # 0xFFFF ^ 0b11 = 0xFFFC => digits B 9 9 6 in the last group.
    assert encode(0.0, 0.0, elevation=9_000.0) == "AAAA-AAAA-B996"


def test_out_of_range_elevation_is_clamped_not_rejected() -> None:
    assert encode(0.0, 0.0, elevation=20_000.0) == encode(0.0, 0.0, elevation=9_000.0)
    assert encode(0.0, 0.0, elevation=-50_000.0) == encode(0.0, 0.0)


def test_non_finite_elevation_is_rejected() -> None:
    with pytest.raises(InvalidCoordinate) as info:
        encode(0.0, 0.0, elevation=math.nan)
    assert info.value.field == "elevation"


def test_timestamp_is_reduced_modulo_2_pow_32() -> None:
    assert encode(0.0, 0.0, timestamp=1) == "AAAA-AAAA-AAAC"
    assert encode(0.0, 0.0, timestamp=2**32) == encode(0.0, 0.0)
    assert encode(0.0, 0.0, timestamp=2**32 + 1) == encode(0.0, 0.0, timestamp=1)


def test_negative_timestamp_is_rejected() -> None:
    with pytest.raises(InvalidCoordinate) as info:
        encode(0.0, 0.0, timestamp=-1)
    assert info.value.field == "timestamp"


def test_encode_position_matches_encode() -> None:
    position = GeoPosition(27.9881, 86.9250, elevation=8848.0, timestamp=1_700_000_000)
    assert encode_position(position) == encode(27.9881, 86.9250, 8848.0, 1_700_000_000)
    assert position.dimensions == "4D"
