from fastapi import APIRouter, Depends

from ..portfolio import cascade, mutations, queries
from ..store import EntityStore
from .deps import EntityId, Payload, get_store
from .schemas import ok

router = APIRouter(prefix="/securities", tags=["Securities"])


@router.get("", summary="List securities", description="Returns every security.")
def list_securities(store: EntityStore = Depends(get_store)):
    return ok(queries.list_entities(store, "security"))


@router.get(
    "/symbol/{symbol}",
    summary="Get security by symbol",
    description="Case-insensitive symbol lookup.",
)
def security_by_symbol(symbol: str, store: EntityStore = Depends(get_store)):
    return ok(queries.security_by_symbol(store, symbol))


@router.get(
    "/type/{security_type}",
    summary="Securities by type",
    description="STOCK, BOND, MUTUAL_FUND or ETF. Unknown types match nothing.",
)
def securities_by_type(security_type: str, store: EntityStore = Depends(get_store)):
    return ok(queries.securities_by_type(store, security_type))


@router.get("/{security_id}", summary="Get security", description="Returns a single security by id.")
def get_security(security_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(queries.get_entity(store, "security", security_id))


@router.post(
    "",
    status_code=201,
    summary="Create security",
    description="Adds a security; the symbol must be unique. previousClose defaults to currentPrice.",
)
def create_security(payload: Payload, store: EntityStore = Depends(get_store)):
    return ok(mutations.create_security(store, payload))


@router.put(
    "/{security_id}",
    summary="Update security",
    description=(
        "Partially updates a security. A new currentPrice revalues every holding of "
        "the security and rebases the weights of the affected portfolios."
    ),
)
def update_security(security_id: EntityId, payload: Payload, store: EntityStore = Depends(get_store)):
    return ok(mutations.update_security(store, security_id, payload))


@router.delete(
    "/{security_id}",
    summary="Delete security",
    description="Deletes a security that no holding or transaction references.",
)
def delete_security(security_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(cascade.delete_security(store, security_id))
