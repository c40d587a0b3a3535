"""Delete operations.

Each entity type has exactly one delete path here, and child records are
removed in the same locked call as their parent:

    client -> accounts -> portfolios -> holdings, transactions
    holding -> transactions referencing it (then portfolio weights rebased)
"""

import structlog

from ..errors import InvalidInput
from ..models import Account, Client, Holding, Portfolio, Security, Transaction
from ..store import EntityStore, synchronized
from .weights import normalize_weights

log = structlog.get_logger()


def _drop_portfolio_children(store: EntityStore, portfolio_id: str) -> dict:
    transactions = store.remove_where("transaction", lambda t: t.portfolio_id == portfolio_id)
    holdings = store.remove_where("holding", lambda h: h.portfolio_id == portfolio_id)
    return {"holdings": len(holdings), "transactions": len(transactions)}


def _drop_account_children(store: EntityStore, account_id: str) -> dict:
    counts = {"portfolios": 0, "holdings": 0, "transactions": 0}
    for portfolio in store.remove_where("portfolio", lambda p: p.account_id == account_id):
        counts["portfolios"] += 1
        for key, val in _drop_portfolio_children(store, portfolio.portfolio_id).items():
            counts[key] += val
    return counts


@synchronized
def delete_client(store: EntityStore, client_id: str) -> Client:
    client = store.remove("client", client_id)
    counts = {"accounts": 0, "portfolios": 0, "holdings": 0, "transactions": 0}
    for account in store.remove_where("account", lambda a: a.client_id == client_id):
        counts["accounts"] += 1
        for key, val in _drop_account_children(store, account.account_id).items():
            counts[key] += val
    log.info("client_deleted", client_id=client_id, **counts)
    return client


@synchronized
def delete_account(store: EntityStore, account_id: str) -> Account:
    account = store.remove("account", account_id)
    counts = _drop_account_children(store, account_id)
    log.info("account_deleted", account_id=account_id, **counts)
    return account


@synchronized
def delete_portfolio(store: EntityStore, portfolio_id: str) -> Portfolio:
    portfolio = store.remove("portfolio", portfolio_id)
    counts = _drop_portfolio_children(store, portfolio_id)
    log.info("portfolio_deleted", portfolio_id=portfolio_id, **counts)
    return portfolio


@synchronized
def delete_holding(store: EntityStore, holding_id: str) -> Holding:
    holding = store.remove("holding", holding_id)
    transactions = store.remove_where("transaction", lambda t: t.holding_id == holding_id)
    normalize_weights(store, holding.portfolio_id)
    log.info(
        "holding_deleted",
        holding_id=holding_id,
        portfolio_id=holding.portfolio_id,
        transactions=len(transactions),
    )
    return holding


@synchronized
def delete_transaction(store: EntityStore, transaction_id: str) -> Transaction:
    transaction = store.remove("transaction", transaction_id)
    log.info("transaction_deleted", transaction_id=transaction_id)
    return transaction


@synchronized
def delete_security(store: EntityStore, security_id: str) -> Security:
    store.require("security", security_id)
    holdings = store.where("holding", security_id=security_id)
    transactions = store.where("transaction", security_id=security_id)
    if holdings or transactions:
        raise InvalidInput(
            f"security {security_id} is still referenced",
            [f"holdings: {len(holdings)}", f"transactions: {len(transactions)}"],
        )
    security = store.remove("security", security_id)
    log.info("security_deleted", security_id=security_id, symbol=security.symbol)
    return security
