from __future__ import annotations

import datetime as dt
import time

from fastapi import APIRouter, Depends

from geopin.codec.constants import PRECISION_LEVELS, TOKEN_FORMAT
from geopin.core.settings import Settings, get_settings


router = APIRouter(tags=["system"])

_STARTED_AT = time.monotonic()


@router.get("/")
async def service_info(settings: Settings = Depends(get_settings)) -> dict[str, object]:
    return {
        "name": settings.service_name,
        "version": settings.service_version,
        "description": "Coordinate encoding: WGS84 positions to short shareable tokens",
        "format": TOKEN_FORMAT,
        "dimensions": "2D/3D/4D",
        "precision_levels": dict(PRECISION_LEVELS),
        "endpoints": {
            "encode": "/api/encode",
            "decode": "/api/decode",
            "distance": "/api/distance",
            "batch": "/api/batch",
            "validate": "/api/validate",
            "health": "/health",
        },
    }


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)) -> dict[str, object]:
    # Liveness only; the codec has no dependencies to probe.
    now = dt.datetime.now(dt.timezone.utc)
    return {
        "status": "ok",
        "timestamp": now.isoformat().replace("+00:00", "Z"),
        "uptime_s": round(time.monotonic() - _STARTED_AT),
        "version": settings.service_version,
    }
