from typing import Annotated, Any

from fastapi import Body, Path, Request

from ..config import settings
from ..store import EntityStore

ID_PATTERN = r"^[A-Z]{3,4}-\d{3,}$"

EntityId = Annotated[str, Path(pattern=ID_PATTERN, examples=["PRT-001"])]
Payload = Annotated[dict[str, Any], Body(description="Entity fields in camelCase.")]


def get_store(request: Request) -> EntityStore:
    return request.app.state.store


def top_limit(limit: int | None) -> int:
    if limit is None or limit <= 0:
        return settings.default_top_limit
    return limit


def recent_limit(limit: int | None) -> int:
    if limit is None or limit <= 0:
        return settings.default_recent_limit
    return limit
