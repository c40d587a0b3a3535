from datetime import datetime

from ..errors import InvalidInput, NotFound
from ..store import EntityStore, synchronized
from ..utils import parse_datetime


@synchronized
def list_entities(store: EntityStore, kind: str) -> list:
    return store.all(kind)


@synchronized
def get_entity(store: EntityStore, kind: str, key: str):
    return store.require(kind, key)


@synchronized
def accounts_for_client(store: EntityStore, client_id: str) -> list:
    return store.where("account", client_id=client_id)


@synchronized
def portfolios_for_account(store: EntityStore, account_id: str) -> list:
    return store.where("portfolio", account_id=account_id)


@synchronized
def holdings_for_portfolio(store: EntityStore, portfolio_id: str) -> list:
    return store.where("holding", portfolio_id=portfolio_id)


def _newest_first(transactions: list) -> list:
    return sorted(transactions, key=lambda t: t.transaction_date, reverse=True)


@synchronized
def transactions_for_portfolio(store: EntityStore, portfolio_id: str) -> list:
    return _newest_first(store.where("transaction", portfolio_id=portfolio_id))


def _bound(value, name: str) -> datetime | None:
    try:
        return parse_datetime(value)
    except (ValueError, OverflowError) as exc:
        raise InvalidInput(f"{name} is not a valid date: {value!r}") from exc


@synchronized
def search_transactions(
    store: EntityStore,
    start_date=None,
    end_date=None,
    transaction_type: str | None = None,
    symbol: str | None = None,
) -> list:
    """Transactions matching every given filter, newest first.

    Date bounds are inclusive; a bare date as ``end_date`` means its midnight.
    """
    start = _bound(start_date, "startDate")
    end = _bound(end_date, "endDate")
    transaction_type = transaction_type.upper() if transaction_type else None
    symbol = symbol.upper() if symbol else None

    matches = []
    for transaction in store.transactions:
        if start is not None and transaction.transaction_date < start:
            continue
        if end is not None and transaction.transaction_date > end:
            continue
        if transaction_type is not None and transaction.transaction_type.value != transaction_type:
            continue
        if symbol is not None and transaction.symbol != symbol:
            continue
        matches.append(transaction)
    return _newest_first(matches)


@synchronized
def security_by_symbol(store: EntityStore, symbol: str):
    wanted = symbol.strip().upper()
    for security in store.securities:
        if security.symbol == wanted:
            return security
    raise NotFound("security", wanted)


@synchronized
def securities_by_type(store: EntityStore, security_type: str) -> list:
    wanted = security_type.strip().upper()
    return [s for s in store.securities if s.security_type.value == wanted]
