"""Demo dataset generator.

Builds the whole book through the same create operations the API uses, so the
derived holding fields and weights come out exactly as they would for live
edits. Pass a seeded ``random.Random`` to get the same dataset every time.
"""

import random
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal

import structlog

from .models import SecurityType
from .portfolio.mutations import (
    create_account,
    create_client,
    create_holding,
    create_portfolio,
    create_security,
    create_transaction,
)
from .reference_data import (
    CITIES,
    DEFAULT_ADVISOR_ID,
    FIRST_NAMES,
    LAST_NAMES,
    MODEL_PORTFOLIOS,
    PORTFOLIO_NAMES,
    SECURITIES,
    STREETS,
)
from .store import EntityStore, synchronized
from .utils import round_money, today_utc

log = structlog.get_logger()

RISK_MIX = {"CONSERVATIVE": 30, "MODERATE": 50, "AGGRESSIVE": 20}
OBJECTIVE_MIX = {"INCOME": 20, "GROWTH": 40, "BALANCED": 30, "PRESERVATION": 10}

# (account type, number prefix, name suffix, cash floor, cash spread)
BROKERAGE = ("BROKERAGE", "BRK", "Brokerage", 5000, 50000)
RETIREMENT_BANDS = [
    # clients below this share of the list get the account
    (50, ("IRA", "IRA", "IRA", 2000, 30000)),
    (80, ("ROTH_IRA", "ROTH", "Roth IRA", 1000, 25000)),
    (100, ("401K", "401K", "401(k)", 1000, 20000)),
]

MODERATE_STOCK_PICKS = 8
CONSERVATIVE_MIN_YIELD = Decimal("2")
HISTORY_DAYS = 730


def _spread(rng: random.Random, mix: dict[str, int], count: int) -> list[str]:
    """``count`` labels in the given percentage mix, shuffled."""
    labels = []
    for label, pct in mix.items():
        labels.extend([label] * (count * pct // 100))
    # integer division can leave a few slots over; fill them from the largest bucket
    fallback = max(mix, key=mix.get)
    labels.extend([fallback] * (count - len(labels)))
    rng.shuffle(labels)
    return labels


def _days_ago(rng: random.Random, days: int) -> date:
    return today_utc() - timedelta(days=rng.randrange(days))


def _client_payload(rng: random.Random, idx: int, risk: str, objective: str) -> dict:
    first = rng.choice(FIRST_NAMES)
    last = rng.choice(LAST_NAMES)
    city, state, zip_code = rng.choice(CITIES)
    return {
        "customer_id": f"CUST-{idx + 1:04d}",
        "first_name": first,
        "last_name": last,
        "email": f"{first.lower()}.{last.lower()}{idx + 1}@example.com",
        "phone": f"555-{rng.randrange(100, 1000):03d}-{rng.randrange(10000):04d}",
        "date_of_birth": date(rng.randrange(1950, 1996), rng.randrange(1, 13), rng.randrange(1, 29)),
        "address": {
            "street": f"{rng.randrange(100, 9999)} {rng.choice(STREETS)}",
            "city": city,
            "state": state,
            "zipCode": zip_code,
        },
        "risk_tolerance": risk,
        "investment_objective": objective,
        "advisor_id": DEFAULT_ADVISOR_ID,
    }


def _account_payload(rng: random.Random, client, idx: int, plan: tuple) -> dict:
    account_type, prefix, suffix, floor, spread = plan
    return {
        "client_id": client.client_id,
        "account_type": account_type,
        "account_number": f"{prefix}-{idx:07d}",
        "account_name": f"{client.display_name} {suffix}",
        "open_date": _days_ago(rng, HISTORY_DAYS),
        "cash_balance": floor + rng.randrange(spread),
    }


def _retirement_account(idx: int, count: int):
    for upper_pct, plan in RETIREMENT_BANDS:
        if idx < count * upper_pct // 100:
            return plan
    return None


def _candidates(securities: list, risk: str) -> list:
    stocks = [s for s in securities if s.security_type == SecurityType.STOCK]
    bonds = [s for s in securities if s.security_type == SecurityType.BOND]
    funds = [s for s in securities if s.security_type == SecurityType.MUTUAL_FUND]
    if risk == "AGGRESSIVE":
        etfs = [s for s in securities if s.security_type == SecurityType.ETF and s.symbol != "BND"]
        return stocks + etfs
    if risk == "MODERATE":
        return stocks[:MODERATE_STOCK_PICKS] + bonds + funds
    income_stocks = [s for s in stocks if (s.dividend_yield or 0) > CONSERVATIVE_MIN_YIELD]
    return bonds + funds + income_stocks


def _seed_transactions(store: EntityStore, rng: random.Random, holding, security):
    bought_at = datetime.combine(holding.acquired_date, time(10, 30), tzinfo=timezone.utc)
    create_transaction(store, {
        "portfolio_id": holding.portfolio_id,
        "holding_id": holding.holding_id,
        "security_id": holding.security_id,
        "transaction_type": "BUY",
        "quantity": holding.quantity,
        "price_per_unit": holding.average_cost_basis,
        "total_amount": holding.total_cost_basis,
        "transaction_date": bought_at,
        "notes": "Initial position",
    })
    if not security.dividend_yield or security.dividend_yield <= 0:
        return
    quarterly = round_money(holding.quantity * security.current_price * security.dividend_yield / 100 / 4)
    for _ in range(rng.randint(1, 4)):
        paid_at = datetime.combine(_days_ago(rng, 365), time(9, 0), tzinfo=timezone.utc)
        create_transaction(store, {
            "portfolio_id": holding.portfolio_id,
            "holding_id": holding.holding_id,
            "security_id": holding.security_id,
            "transaction_type": "DIVIDEND",
            "total_amount": quarterly,
            "transaction_date": paid_at,
            "notes": "Quarterly dividend",
        })


@synchronized
def seed_store(store: EntityStore, rng: random.Random | None = None, client_count: int = 50) -> dict[str, int]:
    """Reset ``store`` and fill it with a demo book of ``client_count`` clients."""
    rng = rng or random.Random()
    store.reset()

    securities = [create_security(store, dict(row)) for row in SECURITIES]

    risks = _spread(rng, RISK_MIX, client_count)
    objectives = _spread(rng, OBJECTIVE_MIX, client_count)
    clients = [
        create_client(store, _client_payload(rng, idx, risks[idx], objectives[idx]))
        for idx in range(client_count)
    ]

    for idx, client in enumerate(clients):
        plans = [BROKERAGE]
        retirement = _retirement_account(idx, client_count)
        if retirement is not None:
            plans.append(retirement)
        for plan in plans:
            account = create_account(store, _account_payload(rng, client, idx, plan))
            names = PORTFOLIO_NAMES[account.account_type.value]
            portfolio_count = 2 if rng.random() > 0.3 else 1
            for n in range(portfolio_count):
                portfolio = create_portfolio(store, {
                    "account_id": account.account_id,
                    "portfolio_name": names[n],
                    "portfolio_type": "MANAGED" if rng.random() > 0.2 else "SELF_DIRECTED",
                    "model_portfolio": MODEL_PORTFOLIOS[client.risk_tolerance.value],
                })
                _seed_portfolio(store, rng, portfolio, client.risk_tolerance.value, securities)

    counts = store.counts()
    log.info("seed_complete", client_count=client_count, **counts)
    return counts


def _seed_portfolio(store: EntityStore, rng: random.Random, portfolio, risk: str, securities: list):
    pool = _candidates(securities, risk)
    rng.shuffle(pool)
    picks = pool[: rng.randint(5, 15)]
    for security in picks:
        multiplier = Decimal(str(0.7 + rng.random() * 0.5))
        holding = create_holding(store, {
            "portfolio_id": portfolio.portfolio_id,
            "security_id": security.security_id,
            "quantity": rng.randint(10, 109),
            "average_cost_basis": round_money(security.current_price * multiplier),
            "acquired_date": _days_ago(rng, HISTORY_DAYS),
        })
        _seed_transactions(store, rng, holding, security)
