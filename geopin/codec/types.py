from __future__ import annotations

from dataclasses import dataclass

from geopin.codec.constants import METERS_PER_MILE, METERS_PER_NAUTICAL_MILE


@dataclass(frozen=True, slots=True)
class GeoPosition:
    latitude: float
    longitude: float
    elevation: float | None = None
    timestamp: int | None = None

    @property
    def dimensions(self) -> str:
        if self.elevation is not None and self.timestamp is not None:
            return "4D"
        if self.elevation is not None:
            return "3D"
        if self.timestamp is not None:
            return "3D (temporal)"
        return "2D"


@dataclass(frozen=True, slots=True)
class BoundingBox:
    north: float
    south: float
    east: float
    west: float


@dataclass(frozen=True, slots=True)
class PrecisionBounds:
    """Quantization error of a decoded token.

    latitude_error/longitude_error are cell sizes in degrees; the bounding box
    spans half of each on either side of the decoded centre.
    """

    latitude_error: float
    longitude_error: float
    accuracy_radius_m: float
    bounds: BoundingBox


@dataclass(frozen=True, slots=True)
class DecodedToken:
    token: str
    position: GeoPosition
    precision: PrecisionBounds

    @property
    def latitude(self) -> float:
        return self.position.latitude

    @property
    def longitude(self) -> float:
        return self.position.longitude


@dataclass(frozen=True, slots=True)
class DistanceResult:
    meters: float

    @property
    def kilometers(self) -> float:
        return self.meters / 1000.0

    @property
    def miles(self) -> float:
        return self.meters / METERS_PER_MILE

    @property
    def nautical_miles(self) -> float:
        return self.meters / METERS_PER_NAUTICAL_MILE
