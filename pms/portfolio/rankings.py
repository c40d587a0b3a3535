from ..errors import InvalidInput
from ..models import EnrichedTransaction, RankedHolding
from ..store import EntityStore, synchronized
from ..utils import ZERO
from .performance import UNKNOWN, client_name_for_portfolio, security_name

DEFAULT_HOLDING_LIMIT = 10
DEFAULT_TRANSACTION_LIMIT = 20


def _check_limit(limit: int) -> int:
    if limit is None or limit < 0:
        raise InvalidInput(f"limit must be a non-negative integer, got {limit!r}")
    return int(limit)


def _ranked_holdings(store: EntityStore) -> list[RankedHolding]:
    ranked = []
    for holding in store.holdings:
        security = store.get("security", holding.security_id)
        ranked.append(
            RankedHolding(
                **holding.model_dump(),
                security_name=security.security_name if security else UNKNOWN,
                client_name=client_name_for_portfolio(store, holding.portfolio_id),
                day_change_percent=security.day_change_percent if security else ZERO,
            )
        )
    return ranked


@synchronized
def top_performers(store: EntityStore, limit: int = DEFAULT_HOLDING_LIMIT) -> list[RankedHolding]:
    limit = _check_limit(limit)
    ranked = sorted(_ranked_holdings(store), key=lambda h: h.unrealized_gain_percent, reverse=True)
    return ranked[:limit]


@synchronized
def top_losers(store: EntityStore, limit: int = DEFAULT_HOLDING_LIMIT) -> list[RankedHolding]:
    limit = _check_limit(limit)
    ranked = sorted(_ranked_holdings(store), key=lambda h: h.unrealized_gain_percent)
    return ranked[:limit]


def enrich_transaction(store: EntityStore, transaction) -> EnrichedTransaction:
    return EnrichedTransaction(
        **transaction.model_dump(),
        security_name=security_name(store, transaction.security_id),
        client_name=client_name_for_portfolio(store, transaction.portfolio_id),
    )


@synchronized
def recent_transactions(store: EntityStore, limit: int = DEFAULT_TRANSACTION_LIMIT) -> list[EnrichedTransaction]:
    limit = _check_limit(limit)
    ordered = sorted(store.transactions, key=lambda t: t.transaction_date, reverse=True)
    return [enrich_transaction(store, t) for t in ordered[:limit]]
