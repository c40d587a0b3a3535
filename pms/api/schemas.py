from fastapi.encoders import jsonable_encoder

from ..utils import now_utc_iso


def ok(data) -> dict:
    """Success envelope; models are rendered with their camelCase aliases."""
    return {"success": True, "data": jsonable_encoder(data, by_alias=True), "timestamp": now_utc_iso()}


def failure(code: str, message: str, details: list[str] | None = None) -> dict:
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {"success": False, "error": error, "timestamp": now_utc_iso()}
