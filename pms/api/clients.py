from fastapi import APIRouter, Depends

from ..portfolio import cascade, mutations, performance, queries
from ..store import EntityStore
from .deps import EntityId, Payload, get_store
from .schemas import ok

router = APIRouter(prefix="/clients", tags=["Clients"])


@router.get(
    "",
    summary="List clients",
    description="Returns every client in insertion order.",
)
def list_clients(store: EntityStore = Depends(get_store)):
    return ok(queries.list_entities(store, "client"))


@router.get(
    "/{client_id}",
    summary="Get client",
    description="Returns a single client by id.",
)
def get_client(client_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(queries.get_entity(store, "client", client_id))


@router.get(
    "/{client_id}/summary",
    summary="Client summary",
    description="Totals and asset allocation across all of the client's accounts and portfolios.",
)
def client_summary(client_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(performance.client_summary(store, client_id))


@router.post(
    "",
    status_code=201,
    summary="Create client",
    description="Creates a client. riskTolerance and investmentObjective are required.",
)
def create_client(payload: Payload, store: EntityStore = Depends(get_store)):
    return ok(mutations.create_client(store, payload))


@router.put(
    "/{client_id}",
    summary="Update client",
    description="Partially updates a client; the id never changes.",
)
def update_client(client_id: EntityId, payload: Payload, store: EntityStore = Depends(get_store)):
    return ok(mutations.update_client(store, client_id, payload))


@router.delete(
    "/{client_id}",
    summary="Delete client",
    description="Deletes the client with its accounts, portfolios, holdings and transactions.",
)
def delete_client(client_id: EntityId, store: EntityStore = Depends(get_store)):
    return ok(cascade.delete_client(store, client_id))
