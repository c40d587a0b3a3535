from fastapi import APIRouter, Depends

from ..portfolio import cascade, mutations, queries
from ..store import EntityStore
from .deps import EntityId, Payload, get_store
from .schemas import ok

router = APIRouter(prefix="/holdings", tags=["Holdings"])


@router.get("", summary="List holdings", description="Returns every holding across all portfolios.")
def list_holdings(store: EntityStore = Depends(get_store)):
    return ok(queries.list_entities(store, "holding"))


@router.get(
    "/portfolio/{portfolio_id}",
    summary="Holdings for a portfolio",
    description="Returns the holdings of one portfolio.",
)
def holdings_for_portfolio(portfolio_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(queries.holdings_for_portfolio(store, portfolio_id))


@router.get("/{holding_id}", summary="Get holding", description="Returns a single holding by id.")
def get_holding(holding_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(queries.get_entity(store, "holding", holding_id))


@router.post(
    "",
    status_code=201,
    summary="Create holding",
    description=(
        "Adds a position to a portfolio at the security's current price. "
        "Derived values are computed and the portfolio weights rebased."
    ),
)
def create_holding(payload: Payload, store: EntityStore = Depends(get_store)):
    return ok(mutations.create_holding(store, payload))


@router.put(
    "/{holding_id}",
    summary="Update holding",
    description="Updates quantity, averageCostBasis or acquiredDate and recomputes the position.",
)
def update_holding(holding_id: EntityId, payload: Payload, store: EntityStore = Depends(get_store)):
    return ok(mutations.update_holding(store, holding_id, payload))


@router.delete(
    "/{holding_id}",
    summary="Delete holding",
    description="Deletes the holding and its transactions, then rebases the portfolio weights.",
)
def delete_holding(holding_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(cascade.delete_holding(store, holding_id))
