"""Create and update operations for every entity type.

Holding and security changes keep the derived position fields and the
portfolio weights consistent before returning. Deletes live in ``cascade``.
"""

from datetime import timedelta

import structlog

from ..errors import InvalidInput
from ..models import (
    Account,
    AccountCreate,
    AccountUpdate,
    Client,
    ClientCreate,
    ClientUpdate,
    Holding,
    HoldingCreate,
    HoldingUpdate,
    Portfolio,
    PortfolioCreate,
    PortfolioUpdate,
    Security,
    SecurityCreate,
    SecurityUpdate,
    Transaction,
    TransactionCreate,
    TransactionUpdate,
)
from ..store import EntityStore, synchronized
from ..utils import now_utc, round_money, today_utc
from .validation import changes_from, parse_payload
from .valuation import apply_price_change, revalue_holding
from .weights import normalize_many, normalize_weights

log = structlog.get_logger()

SETTLEMENT_LAG = timedelta(days=3)


def _merge(record, changes: dict):
    """Partial update: a new record with ``changes`` applied and the key kept."""
    if not changes:
        return record
    return parse_payload(type(record), {**record.model_dump(), **changes})


# ---------------------------------------------------------------------------
# Clients

@synchronized
def create_client(store: EntityStore, payload) -> Client:
    data = parse_payload(ClientCreate, payload)
    now = now_utc()
    client = Client(
        client_id=store.create_id("client"),
        **data.model_dump(),
        created_at=now,
        updated_at=now,
    )
    store.add("client", client)
    log.info("client_created", client_id=client.client_id)
    return client


@synchronized
def update_client(store: EntityStore, client_id: str, payload) -> Client:
    client = store.require("client", client_id)
    changes = changes_from(ClientUpdate, payload)
    changes["updated_at"] = now_utc()
    updated = store.replace("client", _merge(client, changes))
    log.info("client_updated", client_id=client_id, fields=sorted(changes))
    return updated


# ---------------------------------------------------------------------------
# Accounts

@synchronized
def create_account(store: EntityStore, payload) -> Account:
    data = parse_payload(AccountCreate, payload)
    store.require("client", data.client_id)
    now = now_utc()
    account = Account(
        account_id=store.create_id("account"),
        **data.model_dump(),
        created_at=now,
        updated_at=now,
    )
    store.add("account", account)
    log.info("account_created", account_id=account.account_id, client_id=account.client_id)
    return account


@synchronized
def update_account(store: EntityStore, account_id: str, payload) -> Account:
    account = store.require("account", account_id)
    changes = changes_from(AccountUpdate, payload)
    changes["updated_at"] = now_utc()
    updated = store.replace("account", _merge(account, changes))
    log.info("account_updated", account_id=account_id, fields=sorted(changes))
    return updated


# ---------------------------------------------------------------------------
# Portfolios

@synchronized
def create_portfolio(store: EntityStore, payload) -> Portfolio:
    data = parse_payload(PortfolioCreate, payload)
    account = store.require("account", data.account_id)
    if data.client_id is not None and data.client_id != account.client_id:
        raise InvalidInput(
            f"clientId {data.client_id} does not own account {account.account_id}",
            [f"clientId: expected {account.client_id}"],
        )
    now = now_utc()
    fields = data.model_dump()
    fields["client_id"] = account.client_id
    fields["inception_date"] = data.inception_date or account.open_date
    portfolio = Portfolio(
        portfolio_id=store.create_id("portfolio"),
        **fields,
        created_at=now,
        updated_at=now,
    )
    store.add("portfolio", portfolio)
    log.info("portfolio_created", portfolio_id=portfolio.portfolio_id, account_id=portfolio.account_id)
    return portfolio


@synchronized
def update_portfolio(store: EntityStore, portfolio_id: str, payload) -> Portfolio:
    portfolio = store.require("portfolio", portfolio_id)
    changes = changes_from(PortfolioUpdate, payload)
    changes["updated_at"] = now_utc()
    updated = store.replace("portfolio", _merge(portfolio, changes))
    log.info("portfolio_updated", portfolio_id=portfolio_id, fields=sorted(changes))
    return updated


# ---------------------------------------------------------------------------
# Holdings

@synchronized
def create_holding(store: EntityStore, payload) -> Holding:
    data = parse_payload(HoldingCreate, payload)
    store.require("portfolio", data.portfolio_id)
    security = store.require("security", data.security_id)
    now = now_utc()
    holding = Holding(
        holding_id=store.create_id("holding"),
        portfolio_id=data.portfolio_id,
        security_id=security.security_id,
        symbol=security.symbol,
        quantity=data.quantity,
        average_cost_basis=data.average_cost_basis,
        current_price=security.current_price,
        acquired_date=data.acquired_date or today_utc(),
        created_at=now,
        updated_at=now,
    )
    holding = store.add("holding", revalue_holding(holding))
    normalize_weights(store, holding.portfolio_id)
    log.info(
        "holding_created",
        holding_id=holding.holding_id,
        portfolio_id=holding.portfolio_id,
        symbol=holding.symbol,
    )
    return store.get("holding", holding.holding_id)


@synchronized
def update_holding(store: EntityStore, holding_id: str, payload) -> Holding:
    holding = store.require("holding", holding_id)
    changes = changes_from(HoldingUpdate, payload)
    updated = _merge(holding, changes)
    security = store.get("security", holding.security_id)
    updated = revalue_holding(updated, price=security.current_price if security else holding.current_price)
    store.replace("holding", updated)
    normalize_weights(store, updated.portfolio_id)
    log.info("holding_updated", holding_id=holding_id, fields=sorted(changes))
    return store.get("holding", holding_id)


# ---------------------------------------------------------------------------
# Transactions

@synchronized
def create_transaction(store: EntityStore, payload) -> Transaction:
    data = parse_payload(TransactionCreate, payload)
    store.require("portfolio", data.portfolio_id)
    security = store.require("security", data.security_id)
    if data.holding_id is not None:
        holding = store.require("holding", data.holding_id)
        if holding.portfolio_id != data.portfolio_id:
            raise InvalidInput(
                f"holding {holding.holding_id} does not belong to portfolio {data.portfolio_id}",
                [f"holdingId: belongs to {holding.portfolio_id}"],
            )
    now = now_utc()
    total_amount = data.total_amount
    if total_amount is None:
        total_amount = round_money(data.quantity * data.price_per_unit)
    transaction_date = data.transaction_date or now
    transaction = Transaction(
        transaction_id=store.create_id("transaction"),
        portfolio_id=data.portfolio_id,
        holding_id=data.holding_id,
        security_id=security.security_id,
        symbol=security.symbol,
        transaction_type=data.transaction_type,
        quantity=data.quantity,
        price_per_unit=data.price_per_unit,
        total_amount=total_amount,
        fees=data.fees,
        net_amount=data.net_amount if data.net_amount is not None else total_amount,
        transaction_date=transaction_date,
        settlement_date=data.settlement_date or transaction_date + SETTLEMENT_LAG,
        status=data.status,
        notes=data.notes,
        created_at=now,
    )
    store.add("transaction", transaction)
    log.info(
        "transaction_created",
        transaction_id=transaction.transaction_id,
        portfolio_id=transaction.portfolio_id,
        transaction_type=transaction.transaction_type.value,
    )
    return transaction


@synchronized
def update_transaction(store: EntityStore, transaction_id: str, payload) -> Transaction:
    transaction = store.require("transaction", transaction_id)
    changes = changes_from(TransactionUpdate, payload)
    updated = store.replace("transaction", _merge(transaction, changes))
    log.info("transaction_updated", transaction_id=transaction_id, fields=sorted(changes))
    return updated


# ---------------------------------------------------------------------------
# Securities

def _check_symbol_free(store: EntityStore, symbol: str, security_id: str | None = None):
    for other in store.securities:
        if other.symbol == symbol and other.security_id != security_id:
            raise InvalidInput(
                f"symbol {symbol} already used by {other.security_id}",
                [f"symbol: duplicate of {other.security_id}"],
            )


@synchronized
def create_security(store: EntityStore, payload) -> Security:
    data = parse_payload(SecurityCreate, payload)
    _check_symbol_free(store, data.symbol)
    fields = data.model_dump()
    if fields["previous_close"] is None:
        fields["previous_close"] = data.current_price
    security = Security(
        security_id=store.create_id("security"),
        **fields,
        last_updated=now_utc(),
    )
    apply_price_change(security)
    store.add("security", security)
    log.info("security_created", security_id=security.security_id, symbol=security.symbol)
    return security


@synchronized
def update_security(store: EntityStore, security_id: str, payload) -> Security:
    """Merge security fields and push price/symbol changes into holdings.

    A new current price rolls the old one into ``previous_close`` unless the
    payload sets ``previous_close`` itself. Every holding of the security is
    revalued and the weights of each touched portfolio are renormalized.
    """
    security = store.require("security", security_id)
    changes = changes_from(SecurityUpdate, payload)
    if "symbol" in changes:
        _check_symbol_free(store, changes["symbol"], security_id)
    price_moved = changes.get("current_price") is not None
    if price_moved and "previous_close" not in changes:
        changes["previous_close"] = security.current_price
    changes["last_updated"] = now_utc()
    updated = _merge(security, changes)
    apply_price_change(updated)
    store.replace("security", updated)

    touched = []
    if price_moved or updated.symbol != security.symbol:
        for holding in store.where("holding", security_id=security_id):
            moved = holding.model_copy(update={"symbol": updated.symbol})
            if price_moved:
                moved = revalue_holding(moved, price=updated.current_price)
                touched.append(holding.portfolio_id)
            store.replace("holding", moved)
        normalize_many(store, touched)
    log.info(
        "security_updated",
        security_id=security_id,
        fields=sorted(changes),
        price_moved=price_moved,
        holdings_revalued=len(touched),
        portfolios_rebalanced=len(set(touched)),
    )
    return updated
