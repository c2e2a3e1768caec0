from __future__ import annotations

from fastapi import APIRouter

from geopin.api.codec import router as codec_router
from geopin.api.health import router as health_router


api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(codec_router)
