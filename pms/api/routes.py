from fastapi import APIRouter, Depends

from ..config import settings
from ..store import EntityStore
from ..utils import now_utc_iso
from . import accounts, clients, dashboard, holdings, portfolios, securities, transactions
from .deps import get_store

router = APIRouter()
api_router = APIRouter()

for module in (clients, accounts, portfolios, holdings, transactions, securities, dashboard):
    api_router.include_router(module.router)


@router.get(
    "/health",
    summary="Health check",
    description="Returns service status, environment and the number of records per entity type.",
    tags=["Health"],
)
def health(store: EntityStore = Depends(get_store)):
    with store.lock:
        counts = store.counts()
    return {
        "status": "ok",
        "environment": settings.app_env,
        "counts": counts,
        "timestamp": now_utc_iso(),
    }
