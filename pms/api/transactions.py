from fastapi import APIRouter, Depends, Query

from ..portfolio import cascade, mutations, queries
from ..store import EntityStore
from .deps import EntityId, Payload, get_store
from .schemas import ok

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get(
    "",
    summary="List transactions",
    description=(
        "Returns transactions newest first. Optional filters: startDate and endDate "
        "(inclusive, ISO 8601), type and symbol."
    ),
)
def list_transactions(
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    transaction_type: str | None = Query(default=None, alias="type"),
    symbol: str | None = None,
    store: EntityStore = Depends(get_store),
):
    return ok(
        queries.search_transactions(
            store,
            start_date=start_date,
            end_date=end_date,
            transaction_type=transaction_type,
            symbol=symbol,
        )
    )


@router.get(
    "/portfolio/{portfolio_id}",
    summary="Transactions for a portfolio",
    description="Returns the transactions of one portfolio, newest first.",
)
def transactions_for_portfolio(portfolio_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(queries.transactions_for_portfolio(store, portfolio_id))


@router.get("/{transaction_id}", summary="Get transaction", description="Returns a single transaction by id.")
def get_transaction(transaction_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(queries.get_entity(store, "transaction", transaction_id))


@router.post(
    "",
    status_code=201,
    summary="Create transaction",
    description=(
        "Records a transaction. totalAmount defaults to quantity x pricePerUnit, "
        "netAmount to totalAmount and settlementDate to transactionDate + 3 days."
    ),
)
def create_transaction(payload: Payload, store: EntityStore = Depends(get_store)):
    return ok(mutations.create_transaction(store, payload))


@router.put("/{transaction_id}", summary="Update transaction", description="Partially updates a transaction.")
def update_transaction(transaction_id: EntityId, payload: Payload, store: EntityStore = Depends(get_store)):
    return ok(mutations.update_transaction(store, transaction_id, payload))


@router.delete("/{transaction_id}", summary="Delete transaction", description="Deletes a transaction.")
def delete_transaction(transaction_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(cascade.delete_transaction(store, transaction_id))
