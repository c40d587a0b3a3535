from fastapi import APIRouter, Depends

from ..portfolio import cascade, mutations, queries
from ..store import EntityStore
from .deps import EntityId, Payload, get_store
from .schemas import ok

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.get("", summary="List accounts", description="Returns every account.")
def list_accounts(store: EntityStore = Depends(get_store)):
    return ok(queries.list_entities(store, "account"))


@router.get(
    "/client/{client_id}",
    summary="Accounts for a client",
    description="Returns the accounts owned by a client (empty when it has none).",
)
def accounts_for_client(client_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(queries.accounts_for_client(store, client_id))


@router.get("/{account_id}", summary="Get account", description="Returns a single account by id.")
def get_account(account_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(queries.get_entity(store, "account", account_id))


@router.post(
    "",
    status_code=201,
    summary="Create account",
    description="Creates an account for an existing client. Defaults: ACTIVE, cashBalance 0.",
)
def create_account(payload: Payload, store: EntityStore = Depends(get_store)):
    return ok(mutations.create_account(store, payload))


@router.put("/{account_id}", summary="Update account", description="Partially updates an account.")
def update_account(account_id: EntityId, payload: Payload, store: EntityStore = Depends(get_store)):
    return ok(mutations.update_account(store, account_id, payload))


@router.delete(
    "/{account_id}",
    summary="Delete account",
    description="Deletes the account with its portfolios, holdings and transactions.",
)
def delete_account(account_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(cascade.delete_account(store, account_id))
