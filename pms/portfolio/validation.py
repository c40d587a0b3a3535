from typing import List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import InvalidInput

T = TypeVar("T", bound=BaseModel)


def _reasons(exc: ValidationError) -> List[str]:
    reasons = []
    for err in exc.errors():
        path = ".".join(str(part) for part in err.get("loc", ())) or "payload"
        if err.get("type") == "missing":
            reasons.append(f"missing {path}")
        else:
            reasons.append(f"{path}: {err.get('msg')}")
    return reasons


def parse_payload(schema: Type[T], payload) -> T:
    """Validate a create/update payload, surfacing failures as InvalidInput."""
    if isinstance(payload, BaseModel):
        payload = payload.model_dump(exclude_unset=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise InvalidInput(f"{schema.__name__} payload must be an object")
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        reasons = _reasons(exc)
        raise InvalidInput(f"invalid {schema.__name__}: " + "; ".join(reasons), reasons) from exc


def changes_from(schema: Type[T], payload) -> dict:
    """Fields explicitly set by a partial update payload."""
    return parse_payload(schema, payload).model_dump(exclude_unset=True)
