"""Portfolio, client and book-wide rollups.

Nothing here is cached: every call walks the store and recomputes from the
current holdings and securities.
"""

from collections import defaultdict
from decimal import Decimal

from ..models import (
    AllocationView,
    ClientSummary,
    ClientSummaryResult,
    DashboardOverview,
    EnrichedHolding,
    Holding,
    PortfolioPerformance,
    PortfolioPerformanceResult,
    RiskTolerance,
    TopHolding,
)
from ..store import EntityStore, synchronized
from ..utils import ZERO, HUNDRED, pct_of, round_money, round_pct
from .valuation import position_day_change

TOP_HOLDINGS_LIMIT = 5
UNKNOWN = "Unknown"


def _totals(holdings: list[Holding]) -> dict:
    market_value = sum((h.market_value for h in holdings), ZERO)
    cost_basis = sum((h.total_cost_basis for h in holdings), ZERO)
    gain = market_value - cost_basis
    return {
        "total_market_value": round_money(market_value),
        "total_cost_basis": round_money(cost_basis),
        "total_unrealized_gain": round_money(gain),
        "total_unrealized_gain_percent": pct_of(gain, cost_basis),
    }


def _allocation(store: EntityStore, holdings: list[Holding], attr: str) -> dict[str, Decimal]:
    """Percent of total market value per security attribute value.

    Holdings whose security is unknown, or whose attribute is empty, are left
    out of the buckets but still count towards the total.
    """
    total = sum((h.market_value for h in holdings), ZERO)
    if total <= 0:
        return {}
    buckets: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for holding in holdings:
        security = store.get("security", holding.security_id)
        if security is None:
            continue
        key = getattr(security, attr)
        if not key:
            continue
        key = getattr(key, "value", key)
        buckets[key] += holding.market_value
    return {key: pct_of(value, total) for key, value in buckets.items()}


def asset_allocation(store: EntityStore, holdings: list[Holding]) -> dict[str, Decimal]:
    return _allocation(store, holdings, "security_type")


def sector_allocation(store: EntityStore, holdings: list[Holding]) -> dict[str, Decimal]:
    return _allocation(store, holdings, "sector")


def security_name(store: EntityStore, security_id: str) -> str:
    security = store.get("security", security_id)
    return security.security_name if security else UNKNOWN


def client_name_for_portfolio(store: EntityStore, portfolio_id: str) -> str:
    portfolio = store.get("portfolio", portfolio_id)
    client = store.get("client", portfolio.client_id) if portfolio else None
    return client.display_name if client else UNKNOWN


def enrich_holding(store: EntityStore, holding: Holding) -> EnrichedHolding:
    return EnrichedHolding(**holding.model_dump(), security_name=security_name(store, holding.security_id))


def _day_change(store: EntityStore, holdings: list[Holding], total_market_value: Decimal) -> tuple[Decimal, Decimal]:
    change = sum(
        (position_day_change(h, store.get("security", h.security_id)) for h in holdings),
        ZERO,
    )
    # Percent is measured against the previous close value, not today's.
    base = total_market_value - change
    if total_market_value <= 0 or base == 0:
        return round_money(change), ZERO
    return round_money(change), round_pct(change / base * HUNDRED)


def top_holdings(holdings: list[Holding], limit: int = TOP_HOLDINGS_LIMIT) -> list[TopHolding]:
    ranked = sorted(holdings, key=lambda h: h.weight, reverse=True)
    return [
        TopHolding(symbol=h.symbol, weight=h.weight, market_value=h.market_value)
        for h in ranked[:limit]
    ]


@synchronized
def portfolio_performance(store: EntityStore, portfolio_id: str) -> PortfolioPerformanceResult:
    portfolio = store.require("portfolio", portfolio_id)
    holdings = store.where("holding", portfolio_id=portfolio_id)
    totals = _totals(holdings)
    day_change, day_change_percent = _day_change(
        store, holdings, sum((h.market_value for h in holdings), ZERO)
    )
    performance = PortfolioPerformance(
        **totals,
        day_change=day_change,
        day_change_percent=day_change_percent,
        holdings=[enrich_holding(store, h) for h in holdings],
        asset_allocation=asset_allocation(store, holdings),
        sector_allocation=sector_allocation(store, holdings),
        top_holdings=top_holdings(holdings),
    )
    return PortfolioPerformanceResult(portfolio=portfolio, performance=performance)


@synchronized
def client_summary(store: EntityStore, client_id: str) -> ClientSummaryResult:
    client = store.require("client", client_id)
    accounts = store.where("account", client_id=client_id)
    portfolios = store.where_in("portfolio", "account_id", [a.account_id for a in accounts])
    holdings = store.where_in("holding", "portfolio_id", [p.portfolio_id for p in portfolios])
    summary = ClientSummary(
        total_accounts=len(accounts),
        total_portfolios=len(portfolios),
        **_totals(holdings),
        asset_allocation=asset_allocation(store, holdings),
    )
    return ClientSummaryResult(client=client, summary=summary)


@synchronized
def dashboard_overview(store: EntityStore) -> DashboardOverview:
    holdings = store.holdings
    totals = _totals(holdings)
    total_portfolios = store.count("portfolio")
    aum = totals["total_market_value"]
    average_size = round_money(aum / total_portfolios) if total_portfolios > 0 else ZERO

    by_risk = {risk.value: 0 for risk in RiskTolerance}
    for client in store.clients:
        by_risk[client.risk_tolerance.value] += 1

    return DashboardOverview(
        total_clients=store.count("client"),
        total_accounts=store.count("account"),
        total_portfolios=total_portfolios,
        total_holdings=len(holdings),
        total_aum=aum,
        total_cost_basis=totals["total_cost_basis"],
        total_unrealized_gain=totals["total_unrealized_gain"],
        total_unrealized_gain_percent=totals["total_unrealized_gain_percent"],
        average_portfolio_size=average_size,
        clients_by_risk_tolerance=by_risk,
        asset_allocation=asset_allocation(store, holdings),
    )


@synchronized
def dashboard_allocation(store: EntityStore) -> AllocationView:
    return AllocationView(asset_allocation=asset_allocation(store, store.holdings))
