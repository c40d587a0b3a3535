"""Portfolio tools exposed to MCP clients.

Every tool works directly on the shared store and answers with
``{"success": true, "data": ...}`` or ``{"error": true, "code", "message"}``.
Create and update tools take a ``data`` object with camelCase field names,
the same bodies the REST API accepts.
"""

from typing import Any, Optional

import structlog

from ..config import settings
from ..errors import PortfolioError
from ..portfolio import cascade, mutations, performance, queries, rankings
from ..store import EntityStore
from .formatting import format_error, format_success

log = structlog.get_logger()


class PortfolioTools:
    def __init__(self, store: EntityStore):
        self.store = store

    def _call(self, fn, *args, **kwargs) -> dict[str, Any]:
        try:
            return format_success(fn(self.store, *args, **kwargs))
        except PortfolioError as exc:
            log.info("mcp_tool_error", operation=fn.__name__, code=exc.code, message=exc.message)
            return format_error(exc)

    # Clients

    def get_clients(self) -> dict[str, Any]:
        """List all clients with their risk tolerance and investment objective."""
        return self._call(queries.list_entities, "client")

    def get_client(self, client_id: str) -> dict[str, Any]:
        """Get one client by id (e.g. CLI-001)."""
        return self._call(queries.get_entity, "client", client_id)

    def get_client_summary(self, client_id: str) -> dict[str, Any]:
        """Totals, gains and asset allocation across every account and portfolio of a client."""
        return self._call(performance.client_summary, client_id)

    def create_client(self, data: dict[str, Any]) -> dict[str, Any]:
        """Create a client.

        Required: firstName, lastName, riskTolerance (CONSERVATIVE, MODERATE,
        AGGRESSIVE), investmentObjective (INCOME, GROWTH, BALANCED,
        PRESERVATION). Optional: email, phone, dateOfBirth, address, advisorId.
        """
        return self._call(mutations.create_client, data)

    def update_client(self, client_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Update any client fields; omitted fields are left as they are."""
        return self._call(mutations.update_client, client_id, data)

    def delete_client(self, client_id: str) -> dict[str, Any]:
        """Delete a client along with all of its accounts, portfolios, holdings and transactions."""
        return self._call(cascade.delete_client, client_id)

    # Accounts

    def get_accounts(self) -> dict[str, Any]:
        """List all accounts."""
        return self._call(queries.list_entities, "account")

    def get_account(self, account_id: str) -> dict[str, Any]:
        """Get one account by id (e.g. ACC-001)."""
        return self._call(queries.get_entity, "account", account_id)

    def get_accounts_by_client(self, client_id: str) -> dict[str, Any]:
        """List the accounts owned by a client."""
        return self._call(queries.accounts_for_client, client_id)

    def create_account(self, data: dict[str, Any]) -> dict[str, Any]:
        """Open an account.

        Required: clientId, accountType (BROKERAGE, IRA, ROTH_IRA, 401K).
        Optional: accountNumber, accountName, accountStatus, openDate, cashBalance.
        """
        return self._call(mutations.create_account, data)

    def update_account(self, account_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Update account fields such as accountName, accountStatus or cashBalance."""
        return self._call(mutations.update_account, account_id, data)

    def delete_account(self, account_id: str) -> dict[str, Any]:
        """Delete an account with its portfolios, holdings and transactions."""
        return self._call(cascade.delete_account, account_id)

    # Portfolios

    def get_portfolios(self) -> dict[str, Any]:
        """List all portfolios."""
        return self._call(queries.list_entities, "portfolio")

    def get_portfolio(self, portfolio_id: str) -> dict[str, Any]:
        """Get one portfolio by id (e.g. PRT-001)."""
        return self._call(queries.get_entity, "portfolio", portfolio_id)

    def get_portfolio_performance(self, portfolio_id: str) -> dict[str, Any]:
        """Market value, cost basis, gains, day change, allocations and top holdings of a portfolio."""
        return self._call(performance.portfolio_performance, portfolio_id)

    def get_portfolios_by_account(self, account_id: str) -> dict[str, Any]:
        """List the portfolios held in an account."""
        return self._call(queries.portfolios_for_account, account_id)

    def create_portfolio(self, data: dict[str, Any]) -> dict[str, Any]:
        """Create a portfolio.

        Required: accountId. Optional: portfolioName, portfolioType (MANAGED,
        SELF_DIRECTED), modelPortfolio, inceptionDate, benchmarkIndex.
        """
        return self._call(mutations.create_portfolio, data)

    def update_portfolio(self, portfolio_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Update portfolio name, type, model, inception date or benchmark."""
        return self._call(mutations.update_portfolio, portfolio_id, data)

    def delete_portfolio(self, portfolio_id: str) -> dict[str, Any]:
        """Delete a portfolio with its holdings and transactions."""
        return self._call(cascade.delete_portfolio, portfolio_id)

    # Holdings

    def get_holdings(self) -> dict[str, Any]:
        """List all holdings across every portfolio."""
        return self._call(queries.list_entities, "holding")

    def get_holding(self, holding_id: str) -> dict[str, Any]:
        """Get one holding by id (e.g. HLD-001)."""
        return self._call(queries.get_entity, "holding", holding_id)

    def get_holdings_by_portfolio(self, portfolio_id: str) -> dict[str, Any]:
        """List the holdings of a portfolio."""
        return self._call(queries.holdings_for_portfolio, portfolio_id)

    def create_holding(self, data: dict[str, Any]) -> dict[str, Any]:
        """Add a position.

        Required: portfolioId, securityId, quantity, averageCostBasis.
        Optional: acquiredDate. Market value, gains and weights are computed.
        """
        return self._call(mutations.create_holding, data)

    def update_holding(self, holding_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Change quantity, averageCostBasis or acquiredDate of a holding."""
        return self._call(mutations.update_holding, holding_id, data)

    def delete_holding(self, holding_id: str) -> dict[str, Any]:
        """Delete a holding and its transactions; remaining weights are rebased."""
        return self._call(cascade.delete_holding, holding_id)

    # Transactions

    def get_transactions(
        self,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        type: Optional[str] = None,
        symbol: Optional[str] = None,
    ) -> dict[str, Any]:
        """List transactions newest first, optionally filtered by date range (YYYY-MM-DD), type and symbol."""
        return self._call(
            queries.search_transactions,
            start_date=start_date,
            end_date=end_date,
            transaction_type=type,
            symbol=symbol,
        )

    def get_transaction(self, transaction_id: str) -> dict[str, Any]:
        """Get one transaction by id (e.g. TXN-001)."""
        return self._call(queries.get_entity, "transaction", transaction_id)

    def get_transactions_by_portfolio(self, portfolio_id: str) -> dict[str, Any]:
        """List the transactions of a portfolio, newest first."""
        return self._call(queries.transactions_for_portfolio, portfolio_id)

    def create_transaction(self, data: dict[str, Any]) -> dict[str, Any]:
        """Record a transaction.

        Required: portfolioId, securityId, transactionType (BUY, SELL, DIVIDEND,
        TRANSFER_IN, TRANSFER_OUT, FEE). Optional: holdingId, quantity,
        pricePerUnit, totalAmount, fees, netAmount, transactionDate,
        settlementDate, status, notes.
        """
        return self._call(mutations.create_transaction, data)

    def update_transaction(self, transaction_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Update transaction fields such as status, fees or notes."""
        return self._call(mutations.update_transaction, transaction_id, data)

    def delete_transaction(self, transaction_id: str) -> dict[str, Any]:
        """Delete a transaction."""
        return self._call(cascade.delete_transaction, transaction_id)

    # Securities

    def get_securities(self) -> dict[str, Any]:
        """List all securities with current prices and day change."""
        return self._call(queries.list_entities, "security")

    def get_security(self, security_id: str) -> dict[str, Any]:
        """Get one security by id (e.g. SEC-001)."""
        return self._call(queries.get_entity, "security", security_id)

    def get_security_by_symbol(self, symbol: str) -> dict[str, Any]:
        """Look up a security by ticker symbol (case-insensitive)."""
        return self._call(queries.security_by_symbol, symbol)

    def get_securities_by_type(self, security_type: str) -> dict[str, Any]:
        """List securities of one type: STOCK, BOND, MUTUAL_FUND or ETF."""
        return self._call(queries.securities_by_type, security_type)

    def create_security(self, data: dict[str, Any]) -> dict[str, Any]:
        """Add a security.

        Required: symbol, securityName, securityType, currentPrice.
        Optional: sector, previousClose and the descriptive fields.
        """
        return self._call(mutations.create_security, data)

    def update_security(self, security_id: str, data: dict[str, Any]) -> dict[str, Any]:
        """Update a security. A new currentPrice revalues every holding of it and rebases their portfolios."""
        return self._call(mutations.update_security, security_id, data)

    def delete_security(self, security_id: str) -> dict[str, Any]:
        """Delete a security that is not held or traded in any portfolio."""
        return self._call(cascade.delete_security, security_id)

    # Dashboard

    def get_dashboard_overview(self) -> dict[str, Any]:
        """Book-wide counts, assets under management, gains and allocation."""
        return self._call(performance.dashboard_overview)

    def get_top_performers(self, limit: Optional[int] = None) -> dict[str, Any]:
        """Holdings with the highest unrealized gain percent."""
        return self._call(rankings.top_performers, _limit(limit, settings.default_top_limit))

    def get_top_losers(self, limit: Optional[int] = None) -> dict[str, Any]:
        """Holdings with the lowest unrealized gain percent."""
        return self._call(rankings.top_losers, _limit(limit, settings.default_top_limit))

    def get_recent_transactions(self, limit: Optional[int] = None) -> dict[str, Any]:
        """The latest transactions with security and client names."""
        return self._call(rankings.recent_transactions, _limit(limit, settings.default_recent_limit))

    def get_allocation(self) -> dict[str, Any]:
        """Book-wide percent of market value by security type."""
        return self._call(performance.dashboard_allocation)


def _limit(limit: Optional[int], default: int) -> int:
    if limit is None or limit <= 0:
        return default
    return limit


TOOL_NAMES = [
    "get_clients",
    "get_client",
    "get_client_summary",
    "create_client",
    "update_client",
    "delete_client",
    "get_accounts",
    "get_account",
    "get_accounts_by_client",
    "create_account",
    "update_account",
    "delete_account",
    "get_portfolios",
    "get_portfolio",
    "get_portfolio_performance",
    "get_portfolios_by_account",
    "create_portfolio",
    "update_portfolio",
    "delete_portfolio",
    "get_holdings",
    "get_holding",
    "get_holdings_by_portfolio",
    "create_holding",
    "update_holding",
    "delete_holding",
    "get_transactions",
    "get_transaction",
    "get_transactions_by_portfolio",
    "create_transaction",
    "update_transaction",
    "delete_transaction",
    "get_securities",
    "get_security",
    "get_security_by_symbol",
    "get_securities_by_type",
    "create_security",
    "update_security",
    "delete_security",
    "get_dashboard_overview",
    "get_top_performers",
    "get_top_losers",
    "get_recent_transactions",
    "get_allocation",
]
