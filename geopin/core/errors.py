from __future__ import annotations

import dataclasses
from typing import Any

from geopin.codec.constants import TOKEN_FORMAT
from geopin.codec.errors import GeoPinError, InvalidCoordinate, UnknownCharacter


@dataclasses.dataclass(slots=True)
class APIError(Exception):
    """Business error that must map to the standard error envelope."""

    code: str
    message: str
    status_code: int = 400
    details: Any | None = None


def make_error_payload(
    *, code: str, message: str, trace_id: str | None, details: Any | None
) -> dict[str, Any]:
    return {
        "code": code,
        "message": message,
        "details": details,
        "trace_id": trace_id,
    }


def codec_error_to_api_error(exc: GeoPinError) -> APIError:
    """Classify a codec error into a 400 envelope with enough context to act on."""

    if isinstance(exc, UnknownCharacter):
        return APIError(
            code="UNKNOWN_CHARACTER",
            message=str(exc),
            details={"character": exc.character, "position": exc.position},
        )
    if isinstance(exc, InvalidCoordinate):
        return APIError(
            code="INVALID_COORDINATE",
            message=str(exc),
            details={"field": exc.field} if exc.field else None,
        )
    return APIError(
        code="INVALID_TOKEN",
        message=str(exc),
        details={"format": TOKEN_FORMAT},
    )
