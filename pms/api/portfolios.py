from fastapi import APIRouter, Depends

from ..portfolio import cascade, mutations, performance, queries
from ..store import EntityStore
from .deps import EntityId, Payload, get_store
from .schemas import ok

router = APIRouter(prefix="/portfolios", tags=["Portfolios"])


@router.get("", summary="List portfolios", description="Returns every portfolio.")
def list_portfolios(store: EntityStore = Depends(get_store)):
    return ok(queries.list_entities(store, "portfolio"))


@router.get(
    "/account/{account_id}",
    summary="Portfolios for an account",
    description="Returns the portfolios held in an account.",
)
def portfolios_for_account(account_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(queries.portfolios_for_account(store, account_id))


@router.get("/{portfolio_id}", summary="Get portfolio", description="Returns a single portfolio by id.")
def get_portfolio(portfolio_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(queries.get_entity(store, "portfolio", portfolio_id))


@router.get(
    "/{portfolio_id}/performance",
    summary="Portfolio performance",
    description=(
        "Totals, day change, asset and sector allocation, top 5 holdings by weight "
        "and the holdings enriched with security names."
    ),
)
def portfolio_performance(portfolio_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(performance.portfolio_performance(store, portfolio_id))


@router.post(
    "",
    status_code=201,
    summary="Create portfolio",
    description="Creates a portfolio in an existing account; clientId is taken from the account.",
)
def create_portfolio(payload: Payload, store: EntityStore = Depends(get_store)):
    return ok(mutations.create_portfolio(store, payload))


@router.put("/{portfolio_id}", summary="Update portfolio", description="Partially updates a portfolio.")
def update_portfolio(portfolio_id: EntityId, payload: Payload, store: EntityStore = Depends(get_store)):
    return ok(mutations.update_portfolio(store, portfolio_id, payload))


@router.delete(
    "/{portfolio_id}",
    summary="Delete portfolio",
    description="Deletes the portfolio with its holdings and transactions.",
)
def delete_portfolio(portfolio_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(cascade.delete_portfolio(store, portfolio_id))
