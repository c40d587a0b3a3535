from fastapi import APIRouter, Depends

from ..portfolio import performance, rankings
from ..store import EntityStore
from .deps import get_store, recent_limit, top_limit
from .schemas import ok

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "/overview",
    summary="Book overview",
    description="Client, account, portfolio and holding counts, AUM, gains and allocation across the book.",
)
def overview(store: EntityStore = Depends(get_store)):
    return ok(performance.dashboard_overview(store))


@router.get(
    "/top-performers",
    summary="Top performing holdings",
    description="Holdings with the highest unrealized gain percent. Missing or non-positive limit uses the default.",
)
def top_performers(limit: int | None = None, store: EntityStore = Depends(get_store)):
    return ok(rankings.top_performers(store, top_limit(limit)))


@router.get(
    "/top-losers",
    summary="Worst performing holdings",
    description="Holdings with the lowest unrealized gain percent. Missing or non-positive limit uses the default.",
)
def top_losers(limit: int | None = None, store: EntityStore = Depends(get_store)):
    return ok(rankings.top_losers(store, top_limit(limit)))


@router.get(
    "/recent-transactions",
    summary="Recent transactions",
    description="Latest transactions with security and client names.",
)
def recent_transactions(limit: int | None = None, store: EntityStore = Depends(get_store)):
    return ok(rankings.recent_transactions(store, recent_limit(limit)))


@router.get(
    "/allocation",
    summary="Asset allocation",
    description="Book-wide percent of market value by security type.",
)
def allocation(store: EntityStore = Depends(get_store)):
    return ok(performance.dashboard_allocation(store))
