from typing import Any

from fastapi.encoders import jsonable_encoder

from ..errors import PortfolioError


def format_success(data) -> dict[str, Any]:
    return {"success": True, "data": jsonable_encoder(data, by_alias=True)}


def format_error(exc: PortfolioError) -> dict[str, Any]:
    payload = {"error": True, "code": exc.code, "message": exc.message}
    details = getattr(exc, "reasons", None)
    if details:
        payload["details"] = details
    return payload
