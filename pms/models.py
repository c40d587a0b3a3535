"""Entity, payload and aggregate models.

Records are pydantic models with snake_case attributes and camelCase JSON
aliases. Money and quantity fields are ``Decimal`` and render as JSON numbers.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

from .utils import ZERO, parse_datetime

Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RiskTolerance(str, Enum):
    CONSERVATIVE = "CONSERVATIVE"
    MODERATE = "MODERATE"
    AGGRESSIVE = "AGGRESSIVE"


class InvestmentObjective(str, Enum):
    INCOME = "INCOME"
    GROWTH = "GROWTH"
    BALANCED = "BALANCED"
    PRESERVATION = "PRESERVATION"


class AccountType(str, Enum):
    BROKERAGE = "BROKERAGE"
    IRA = "IRA"
    ROTH_IRA = "ROTH_IRA"
    K401 = "401K"


class AccountStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    CLOSED = "CLOSED"


class PortfolioType(str, Enum):
    MANAGED = "MANAGED"
    SELF_DIRECTED = "SELF_DIRECTED"


class SecurityType(str, Enum):
    STOCK = "STOCK"
    BOND = "BOND"
    MUTUAL_FUND = "MUTUAL_FUND"
    ETF = "ETF"


class TransactionType(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    DIVIDEND = "DIVIDEND"
    TRANSFER_IN = "TRANSFER_IN"
    TRANSFER_OUT = "TRANSFER_OUT"
    FEE = "FEE"


class TransactionStatus(str, Enum):
    PENDING = "PENDING"
    SETTLED = "SETTLED"
    CANCELLED = "CANCELLED"


def _upper_symbol(value):
    return value.strip().upper() if isinstance(value, str) else value


# ---------------------------------------------------------------------------
# Entities

class Client(CamelModel):
    client_id: str
    customer_id: Optional[str] = None
    first_name: str
    last_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[dict[str, Any] | str] = None
    risk_tolerance: RiskTolerance
    investment_objective: InvestmentObjective
    advisor_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Account(CamelModel):
    account_id: str
    client_id: str
    account_type: AccountType
    account_number: Optional[str] = None
    account_name: Optional[str] = None
    account_status: AccountStatus = AccountStatus.ACTIVE
    open_date: Optional[date] = None
    cash_balance: Money = ZERO
    created_at: datetime
    updated_at: datetime


class Portfolio(CamelModel):
    portfolio_id: str
    account_id: str
    client_id: str
    portfolio_name: str = "Investment Portfolio"
    portfolio_type: PortfolioType = PortfolioType.MANAGED
    model_portfolio: Optional[str] = None
    inception_date: Optional[date] = None
    benchmark_index: str = "SPY"
    created_at: datetime
    updated_at: datetime


class Holding(CamelModel):
    holding_id: str
    portfolio_id: str
    security_id: str
    symbol: str
    quantity: Money
    average_cost_basis: Money
    total_cost_basis: Money = ZERO
    current_price: Money
    market_value: Money = ZERO
    unrealized_gain: Money = ZERO
    unrealized_gain_percent: Money = ZERO
    weight: Money = ZERO
    acquired_date: date
    created_at: datetime
    updated_at: datetime


class Transaction(CamelModel):
    transaction_id: str
    portfolio_id: str
    holding_id: Optional[str] = None
    security_id: str
    symbol: Optional[str] = None
    transaction_type: TransactionType
    quantity: Money = ZERO
    price_per_unit: Money = ZERO
    total_amount: Money = ZERO
    fees: Money = ZERO
    net_amount: Money = ZERO
    transaction_date: datetime
    settlement_date: Optional[datetime] = None
    status: TransactionStatus = TransactionStatus.SETTLED
    notes: str = ""
    created_at: datetime

    normalize_dates = field_validator("transaction_date", "settlement_date", mode="before")(parse_datetime)


class Security(CamelModel):
    security_id: str
    symbol: str
    security_name: str
    security_type: SecurityType
    sector: Optional[str] = None
    current_price: Money
    previous_close: Money
    day_change: Money = ZERO
    day_change_percent: Money = ZERO
    fifty_two_week_high: Optional[Money] = None
    fifty_two_week_low: Optional[Money] = None
    dividend_yield: Optional[Money] = None
    pe_ratio: Optional[Money] = None
    market_cap: Optional[Money] = None
    bond_rating: Optional[str] = None
    maturity_date: Optional[date] = None
    coupon_rate: Optional[Money] = None
    expense_ratio: Optional[Money] = None
    last_updated: datetime

    normalize_symbol = field_validator("symbol", mode="before")(_upper_symbol)


# ---------------------------------------------------------------------------
# Create / update payloads

class ClientCreate(CamelModel):
    customer_id: Optional[str] = None
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[dict[str, Any] | str] = None
    risk_tolerance: RiskTolerance
    investment_objective: InvestmentObjective
    advisor_id: Optional[str] = None


class ClientUpdate(CamelModel):
    customer_id: Optional[str] = None
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None
    date_of_birth: Optional[date] = None
    address: Optional[dict[str, Any] | str] = None
    risk_tolerance: Optional[RiskTolerance] = None
    investment_objective: Optional[InvestmentObjective] = None
    advisor_id: Optional[str] = None


class AccountCreate(CamelModel):
    client_id: str
    account_type: AccountType
    account_number: Optional[str] = None
    account_name: Optional[str] = None
    account_status: AccountStatus = AccountStatus.ACTIVE
    open_date: Optional[date] = None
    cash_balance: Money = Field(default=ZERO, ge=0)


class AccountUpdate(CamelModel):
    account_type: Optional[AccountType] = None
    account_number: Optional[str] = None
    account_name: Optional[str] = None
    account_status: Optional[AccountStatus] = None
    open_date: Optional[date] = None
    cash_balance: Optional[Money] = Field(default=None, ge=0)


class PortfolioCreate(CamelModel):
    account_id: str
    client_id: Optional[str] = None
    portfolio_name: str = "Investment Portfolio"
    portfolio_type: PortfolioType = PortfolioType.MANAGED
    model_portfolio: Optional[str] = None
    inception_date: Optional[date] = None
    benchmark_index: str = "SPY"


class PortfolioUpdate(CamelModel):
    portfolio_name: Optional[str] = None
    portfolio_type: Optional[PortfolioType] = None
    model_portfolio: Optional[str] = None
    inception_date: Optional[date] = None
    benchmark_index: Optional[str] = None


class HoldingCreate(CamelModel):
    portfolio_id: str
    security_id: str
    quantity: Money = Field(gt=0)
    average_cost_basis: Money = Field(ge=0)
    acquired_date: Optional[date] = None


class HoldingUpdate(CamelModel):
    quantity: Optional[Money] = Field(default=None, gt=0)
    average_cost_basis: Optional[Money] = Field(default=None, ge=0)
    acquired_date: Optional[date] = None


class TransactionCreate(CamelModel):
    portfolio_id: str
    security_id: str
    holding_id: Optional[str] = None
    transaction_type: TransactionType
    quantity: Money = Field(default=ZERO, ge=0)
    price_per_unit: Money = Field(default=ZERO, ge=0)
    total_amount: Optional[Money] = None
    fees: Money = Field(default=ZERO, ge=0)
    net_amount: Optional[Money] = None
    transaction_date: Optional[datetime] = None
    settlement_date: Optional[datetime] = None
    status: TransactionStatus = TransactionStatus.SETTLED
    notes: str = ""

    normalize_dates = field_validator("transaction_date", "settlement_date", mode="before")(parse_datetime)


class TransactionUpdate(CamelModel):
    transaction_type: Optional[TransactionType] = None
    quantity: Optional[Money] = Field(default=None, ge=0)
    price_per_unit: Optional[Money] = Field(default=None, ge=0)
    total_amount: Optional[Money] = None
    fees: Optional[Money] = Field(default=None, ge=0)
    net_amount: Optional[Money] = None
    transaction_date: Optional[datetime] = None
    settlement_date: Optional[datetime] = None
    status: Optional[TransactionStatus] = None
    notes: Optional[str] = None

    normalize_dates = field_validator("transaction_date", "settlement_date", mode="before")(parse_datetime)


class SecurityCreate(CamelModel):
    symbol: str = Field(min_length=1)
    security_name: str = Field(min_length=1)
    security_type: SecurityType
    sector: Optional[str] = None
    current_price: Money = Field(ge=0)
    previous_close: Optional[Money] = Field(default=None, ge=0)
    fifty_two_week_high: Optional[Money] = None
    fifty_two_week_low: Optional[Money] = None
    dividend_yield: Optional[Money] = None
    pe_ratio: Optional[Money] = None
    market_cap: Optional[Money] = None
    bond_rating: Optional[str] = None
    maturity_date: Optional[date] = None
    coupon_rate: Optional[Money] = None
    expense_ratio: Optional[Money] = None

    normalize_symbol = field_validator("symbol", mode="before")(_upper_symbol)


class SecurityUpdate(CamelModel):
    symbol: Optional[str] = Field(default=None, min_length=1)
    security_name: Optional[str] = None
    security_type: Optional[SecurityType] = None
    sector: Optional[str] = None
    current_price: Optional[Money] = Field(default=None, ge=0)
    previous_close: Optional[Money] = Field(default=None, ge=0)
    fifty_two_week_high: Optional[Money] = None
    fifty_two_week_low: Optional[Money] = None
    dividend_yield: Optional[Money] = None
    pe_ratio: Optional[Money] = None
    market_cap: Optional[Money] = None
    bond_rating: Optional[str] = None
    maturity_date: Optional[date] = None
    coupon_rate: Optional[Money] = None
    expense_ratio: Optional[Money] = None

    normalize_symbol = field_validator("symbol", mode="before")(_upper_symbol)


# ---------------------------------------------------------------------------
# Aggregates

class EnrichedHolding(Holding):
    security_name: str


class RankedHolding(EnrichedHolding):
    client_name: str
    day_change_percent: Money = ZERO


class EnrichedTransaction(Transaction):
    security_name: str
    client_name: str


class TopHolding(CamelModel):
    symbol: str
    weight: Money
    market_value: Money


class PortfolioPerformance(CamelModel):
    total_market_value: Money
    total_cost_basis: Money
    total_unrealized_gain: Money
    total_unrealized_gain_percent: Money
    day_change: Money
    day_change_percent: Money
    holdings: list[EnrichedHolding]
    asset_allocation: dict[str, Money]
    sector_allocation: dict[str, Money]
    top_holdings: list[TopHolding]


class PortfolioPerformanceResult(CamelModel):
    portfolio: Portfolio
    performance: PortfolioPerformance


class ClientSummary(CamelModel):
    total_accounts: int
    total_portfolios: int
    total_market_value: Money
    total_cost_basis: Money
    total_unrealized_gain: Money
    total_unrealized_gain_percent: Money
    asset_allocation: dict[str, Money]


class ClientSummaryResult(CamelModel):
    client: Client
    summary: ClientSummary


class DashboardOverview(CamelModel):
    total_clients: int
    total_accounts: int
    total_portfolios: int
    total_holdings: int
    total_aum: Money = Field(alias="totalAUM")
    total_cost_basis: Money
    total_unrealized_gain: Money
    total_unrealized_gain_percent: Money
    average_portfolio_size: Money
    clients_by_risk_tolerance: dict[str, int]
    asset_allocation: dict[str, Money]


class AllocationView(CamelModel):
    asset_allocation: dict[str, Money]
