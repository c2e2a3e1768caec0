from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field, StrictFloat, StrictInt, ValidationError

from geopin.codec import (
    DecodedToken,
    GeoPinError,
    GeoPosition,
    decode,
    encode_position,
    is_valid_token,
    measure,
)
from geopin.codec.constants import TOKEN_FORMAT
from geopin.core.errors import APIError, codec_error_to_api_error
from geopin.core.settings import Settings, get_settings


router = APIRouter(prefix="/api", tags=["geopin"])


logger = logging.getLogger(__name__)


class EncodeRequest(BaseModel):
    # Range checks live in the codec so out-of-range values map to
    # INVALID_COORDINATE (400) rather than a 422. Strict types keep JSON
    # booleans from being coerced to 1.0 / 1; ints still pass as floats.
    latitude: StrictFloat
    longitude: StrictFloat
    elevation: StrictFloat | None = None
    timestamp: StrictInt | None = None


class DecodeRequest(BaseModel):
    geopin: str


class DistanceRequest(BaseModel):
    geopin1: str
    geopin2: str


class BatchRequest(BaseModel):
    operation: str
    # Keep items untyped so one bad item doesn't 422 the whole batch.
    data: list[Any] = Field(default_factory=list)


class Coordinates(BaseModel):
    latitude: float
    longitude: float
    elevation: float | None = None
    timestamp: int | None = None


class EncodeResponse(BaseModel):
    geopin: str
    coordinates: Coordinates
    format: str = TOKEN_FORMAT
    dimensions: str


class PrecisionOut(BaseModel):
    latitude_error: float
    longitude_error: float
    accuracy_radius: float


class BoundsOut(BaseModel):
    north: float
    south: float
    east: float
    west: float


class DecodeResponse(BaseModel):
    geopin: str
    coordinates: Coordinates
    precision: PrecisionOut
    bounds: BoundsOut
    dimensions: str = "2D"


class DistanceOut(BaseModel):
    meters: float
    kilometers: float
    miles: float
    nautical_miles: float


class DistanceResponse(BaseModel):
    geopin1: str
    geopin2: str
    distance: DistanceOut


class ValidateResponse(BaseModel):
    geopin: str
    valid: bool
    format: str = TOKEN_FORMAT


class BatchErrorItem(BaseModel):
    index: int
    code: str
    message: str
    input: Any = None


class BatchResponse(BaseModel):
    operation: str
    processed: int
    successful: int
    failed: int
    results: list[dict[str, Any]]
    errors: list[BatchErrorItem]


_BATCH_OPERATIONS = ("encode", "decode")


def _encode(payload: EncodeRequest) -> EncodeResponse:
    position = GeoPosition(
        latitude=payload.latitude,
        longitude=payload.longitude,
        elevation=payload.elevation,
        timestamp=payload.timestamp,
    )
    geopin = encode_position(position)
    return EncodeResponse(
        geopin=geopin,
        coordinates=Coordinates(
            latitude=position.latitude,
            longitude=position.longitude,
            elevation=position.elevation,
            timestamp=position.timestamp,
        ),
        dimensions=position.dimensions,
    )


def _decode_response(decoded: DecodedToken, *, decimals: int) -> DecodeResponse:
    precision = decoded.precision
    bounds = precision.bounds
    return DecodeResponse(
        geopin=decoded.token,
        coordinates=Coordinates(
            latitude=round(decoded.latitude, decimals),
            longitude=round(decoded.longitude, decimals),
        ),
        precision=PrecisionOut(
            latitude_error=round(precision.latitude_error, decimals),
            longitude_error=round(precision.longitude_error, decimals),
            accuracy_radius=round(precision.accuracy_radius_m, 2),
        ),
        bounds=BoundsOut(
            north=round(bounds.north, decimals),
            south=round(bounds.south, decimals),
            east=round(bounds.east, decimals),
            west=round(bounds.west, decimals),
        ),
    )


@router.post("/encode", response_model=EncodeResponse, response_model_exclude_none=True)
async def encode_post(payload: EncodeRequest) -> EncodeResponse:
    return _encode(payload)


@router.get("/encode", response_model=EncodeResponse, response_model_exclude_none=True)
async def encode_get(
    latitude: float = Query(),
    longitude: float = Query(),
    elevation: float | None = Query(default=None),
    timestamp: int | None = Query(default=None),
) -> EncodeResponse:
    payload = EncodeRequest(
        latitude=latitude,
        longitude=longitude,
        elevation=elevation,
        timestamp=timestamp,
    )
    return _encode(payload)


@router.post("/decode", response_model=DecodeResponse, response_model_exclude_none=True)
async def decode_post(
    payload: DecodeRequest,
    settings: Settings = Depends(get_settings),
) -> DecodeResponse:
    return _decode_response(decode(payload.geopin), decimals=settings.coordinate_decimals)


@router.get("/decode", response_model=DecodeResponse, response_model_exclude_none=True)
async def decode_get(
    geopin: str = Query(),
    settings: Settings = Depends(get_settings),
) -> DecodeResponse:
    return _decode_response(decode(geopin), decimals=settings.coordinate_decimals)


@router.post("/distance", response_model=DistanceResponse)
async def distance_post(payload: DistanceRequest) -> DistanceResponse:
    result = measure(payload.geopin1, payload.geopin2)
    return DistanceResponse(
        geopin1=payload.geopin1,
        geopin2=payload.geopin2,
        distance=DistanceOut(
            meters=round(result.meters, 2),
            kilometers=round(result.kilometers, 2),
            miles=round(result.miles, 2),
            nautical_miles=round(result.nautical_miles, 2),
        ),
    )


@router.get("/validate", response_model=ValidateResponse)
async def validate_get(geopin: str = Query()) -> ValidateResponse:
    return ValidateResponse(geopin=geopin, valid=is_valid_token(geopin))


@router.post("/batch", response_model=BatchResponse)
async def batch_process(
    payload: BatchRequest,
    settings: Settings = Depends(get_settings),
) -> BatchResponse:
    if payload.operation not in _BATCH_OPERATIONS:
        raise APIError(
            code="BATCH_OPERATION_INVALID",
            message=f"Unsupported batch operation: {payload.operation!r}",
            details={"allowed": list(_BATCH_OPERATIONS)},
        )
    if len(payload.data) > settings.batch_max_items:
        raise APIError(
            code="BATCH_TOO_LARGE",
            message=f"Batch exceeds {settings.batch_max_items} items",
            details={"max_items": settings.batch_max_items, "received": len(payload.data)},
        )

    results: list[dict[str, Any]] = []
    errors: list[BatchErrorItem] = []

    for index, raw in enumerate(payload.data):
        try:
            if payload.operation == "encode":
                item = _encode(EncodeRequest.model_validate(raw))
            else:
                req = DecodeRequest.model_validate(raw)
                item = _decode_response(decode(req.geopin), decimals=settings.coordinate_decimals)
        except ValidationError as exc:
            msg = "; ".join(err.get("msg", "invalid") for err in exc.errors())
            errors.append(
                BatchErrorItem(index=index, code="BATCH_ITEM_INVALID", message=msg, input=raw)
            )
            continue
        except GeoPinError as exc:
            api_error = codec_error_to_api_error(exc)
            errors.append(
                BatchErrorItem(
                    index=index, code=api_error.code, message=api_error.message, input=raw
                )
            )
            continue
        results.append({"index": index, **item.model_dump(exclude_none=True)})

    if errors:
        logger.info(
            "Batch %s finished with %d/%d failed items",
            payload.operation,
            len(errors),
            len(payload.data),
        )
    return BatchResponse(
        operation=payload.operation,
        processed=len(payload.data),
        successful=len(results),
        failed=len(errors),
        results=results,
        errors=errors,
    )
