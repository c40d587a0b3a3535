"""Derived position and price fields.

Every derived value is rounded to cents when it is written, and
unrealized gain is taken from the rounded operands so that
``unrealized_gain == market_value - total_cost_basis`` holds exactly.
"""

from decimal import Decimal

from ..models import Holding, Security
from ..utils import ZERO, HUNDRED, now_utc, pct_of, round_money, round_pct, to_decimal


def position_values(quantity, average_cost_basis, price) -> dict:
    quantity = to_decimal(quantity)
    total_cost_basis = round_money(quantity * to_decimal(average_cost_basis))
    market_value = round_money(quantity * to_decimal(price))
    unrealized_gain = market_value - total_cost_basis
    return {
        "total_cost_basis": total_cost_basis,
        "market_value": market_value,
        "unrealized_gain": unrealized_gain,
        "unrealized_gain_percent": pct_of(unrealized_gain, total_cost_basis),
    }


def revalue_holding(holding: Holding, price=None) -> Holding:
    """A copy of ``holding`` with its derived fields recomputed.

    ``price`` defaults to the holding's denormalized current price. The
    stored average cost is used as given, so the cost basis only moves when
    quantity or average cost do.
    """
    price = holding.current_price if price is None else to_decimal(price)
    values = position_values(holding.quantity, holding.average_cost_basis, price)
    return holding.model_copy(update={**values, "current_price": price, "updated_at": now_utc()})


def price_change(current_price, previous_close) -> tuple[Decimal, Decimal]:
    """Day change and day change percent of a price against the previous close."""
    current_price = to_decimal(current_price)
    previous_close = to_decimal(previous_close)
    change = round_money(current_price - previous_close)
    if previous_close <= 0:
        return change, ZERO
    return change, round_pct(change / previous_close * HUNDRED)


def apply_price_change(security: Security) -> Security:
    security.day_change, security.day_change_percent = price_change(
        security.current_price, security.previous_close
    )
    return security


def position_day_change(holding: Holding, security: Security | None) -> Decimal:
    if security is None:
        return ZERO
    return to_decimal(holding.quantity) * (security.current_price - security.previous_close)
