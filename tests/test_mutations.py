import threading
import unittest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from pms.api.schemas import ok
from pms.errors import InvalidInput, NotFound
from pms.portfolio import cascade, mutations, queries

from factories import make_account, make_book, make_client, make_holding, make_portfolio, make_security


class CreateUpdateTests(unittest.TestCase):
    def setUp(self):
        self.store, self.book = make_book()

    def test_client_requires_risk_and_objective(self):
        with self.assertRaises(InvalidInput) as ctx:
            mutations.create_client(self.store, {"firstName": "No", "lastName": "Risk"})
        self.assertIn("missing riskTolerance", ctx.exception.reasons)

    def test_client_update_is_partial(self):
        client = self.book["client"]
        updated = mutations.update_client(self.store, client.client_id, {"email": "ada@example.com"})
        self.assertEqual(updated.client_id, client.client_id)
        self.assertEqual(updated.first_name, "Ada")
        self.assertEqual(updated.email, "ada@example.com")
        self.assertIs(self.store.get("client", client.client_id), updated)

    def test_update_missing_entity(self):
        with self.assertRaises(NotFound):
            mutations.update_account(self.store, "ACC-404", {"accountName": "x"})

    def test_account_defaults(self):
        account = self.book["account"]
        self.assertEqual(account.account_id, "ACC-001")
        self.assertEqual(account.account_status.value, "ACTIVE")
        self.assertEqual(account.cash_balance, Decimal("0"))

    def test_account_for_unknown_client(self):
        with self.assertRaises(NotFound):
            mutations.create_account(self.store, {"clientId": "CLI-404", "accountType": "IRA"})

    def test_portfolio_takes_client_from_account(self):
        portfolio = self.book["portfolio"]
        self.assertEqual(portfolio.client_id, self.book["client"].client_id)
        self.assertEqual(portfolio.portfolio_type.value, "MANAGED")
        self.assertEqual(portfolio.benchmark_index, "SPY")

    def test_portfolio_with_conflicting_client(self):
        stranger = make_client(self.store, first="Grace", last="Hopper")
        with self.assertRaises(InvalidInput):
            mutations.create_portfolio(self.store, {
                "accountId": self.book["account"].account_id,
                "clientId": stranger.client_id,
            })

    def test_holding_rejects_non_positive_quantity(self):
        with self.assertRaises(InvalidInput):
            mutations.create_holding(self.store, {
                "portfolioId": self.book["portfolio"].portfolio_id,
                "securityId": self.book["aapl"].security_id,
                "quantity": 0,
                "averageCostBasis": "1",
            })

    def test_holding_for_unknown_security(self):
        with self.assertRaises(NotFound):
            mutations.create_holding(self.store, {
                "portfolioId": self.book["portfolio"].portfolio_id,
                "securityId": "SEC-404",
                "quantity": 1,
                "averageCostBasis": "1",
            })

    def test_transaction_defaults(self):
        when = datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc)
        txn = mutations.create_transaction(self.store, {
            "portfolioId": self.book["portfolio"].portfolio_id,
            "securityId": self.book["aapl"].security_id,
            "transactionType": "BUY",
            "quantity": 10,
            "pricePerUnit": "12.345",
            "transactionDate": when.isoformat(),
        })
        self.assertEqual(txn.transaction_id, "TXN-001")
        self.assertEqual(txn.symbol, "AAPL")
        self.assertEqual(txn.total_amount, Decimal("123.45"))
        self.assertEqual(txn.net_amount, Decimal("123.45"))
        self.assertEqual(txn.settlement_date, when + timedelta(days=3))
        self.assertEqual(txn.status.value, "SETTLED")

    def test_transaction_holding_must_belong_to_portfolio(self):
        other = make_portfolio(self.store, self.book["account"], name="Balanced Portfolio")
        holding = make_holding(self.store, other, self.book["aapl"])
        with self.assertRaises(InvalidInput):
            mutations.create_transaction(self.store, {
                "portfolioId": self.book["portfolio"].portfolio_id,
                "securityId": self.book["aapl"].security_id,
                "holdingId": holding.holding_id,
                "transactionType": "SELL",
            })

    def test_duplicate_symbol(self):
        with self.assertRaises(InvalidInput):
            make_security(self.store, "aapl", "1")

    def test_security_day_change_on_create(self):
        aapl = self.book["aapl"]
        self.assertEqual(aapl.day_change, Decimal("2.30"))
        self.assertEqual(aapl.day_change_percent, Decimal("1.31"))


class SecurityPriceCascadeTests(unittest.TestCase):
    def setUp(self):
        self.store, self.book = make_book()
        self.other = make_portfolio(self.store, self.book["account"], name="Balanced Portfolio")
        self.untouched = make_portfolio(self.store, make_account(self.store, self.book["client"], "IRA"))
        self.aapl_holding = make_holding(self.store, self.book["portfolio"], self.book["aapl"], quantity=100, cost="145.00")
        make_holding(self.store, self.book["portfolio"], self.book["bond"], quantity=100, cost="90")
        make_holding(self.store, self.other, self.book["aapl"], quantity=10, cost="100")
        self.bond_only = make_holding(self.store, self.untouched, self.book["bond"], quantity=10, cost="90")

    def test_price_moves_every_holding_and_rolls_previous_close(self):
        updated = mutations.update_security(self.store, self.book["aapl"].security_id, {"currentPrice": "200"})
        self.assertEqual(updated.previous_close, Decimal("178.50"))
        self.assertEqual(updated.day_change, Decimal("21.50"))
        self.assertEqual(updated.day_change_percent, Decimal("12.04"))
        for holding in self.store.where("holding", security_id=updated.security_id):
            self.assertEqual(holding.current_price, Decimal("200"))
            self.assertEqual(holding.market_value, holding.quantity * Decimal("200"))
        holding = self.store.get("holding", self.aapl_holding.holding_id)
        self.assertEqual(holding.unrealized_gain, Decimal("5500.00"))
        # 20000 / (20000 + 9642)
        self.assertEqual(holding.weight, Decimal("67.47"))

    def test_explicit_previous_close_wins(self):
        updated = mutations.update_security(
            self.store, self.book["aapl"].security_id, {"currentPrice": "200", "previousClose": "190"}
        )
        self.assertEqual(updated.previous_close, Decimal("190"))
        self.assertEqual(updated.day_change, Decimal("10.00"))

    def test_unrelated_portfolio_keeps_its_weights(self):
        before = self.store.get("holding", self.bond_only.holding_id).updated_at
        mutations.update_security(self.store, self.book["aapl"].security_id, {"currentPrice": "200"})
        after = self.store.get("holding", self.bond_only.holding_id)
        self.assertEqual(after.updated_at, before)
        self.assertEqual(after.weight, Decimal("100.00"))

    def test_symbol_change_propagates_to_holdings(self):
        mutations.update_security(self.store, self.book["aapl"].security_id, {"symbol": "aapl2"})
        symbols = {h.symbol for h in self.store.where("holding", security_id=self.book["aapl"].security_id)}
        self.assertEqual(symbols, {"AAPL2"})

    def test_symbol_change_to_taken_symbol(self):
        with self.assertRaises(InvalidInput):
            mutations.update_security(self.store, self.book["aapl"].security_id, {"symbol": "UST10Y"})


class CascadeDeleteTests(unittest.TestCase):
    def setUp(self):
        self.store, self.book = make_book()
        self.second = make_portfolio(self.store, self.book["account"], name="Balanced Portfolio")
        self.h1 = make_holding(self.store, self.book["portfolio"], self.book["aapl"])
        self.h2 = make_holding(self.store, self.book["portfolio"], self.book["bond"])
        self.h3 = make_holding(self.store, self.second, self.book["aapl"])
        for holding in (self.h1, self.h2, self.h3):
            mutations.create_transaction(self.store, {
                "portfolioId": holding.portfolio_id,
                "securityId": holding.security_id,
                "holdingId": holding.holding_id,
                "transactionType": "BUY",
                "quantity": holding.quantity,
                "pricePerUnit": holding.average_cost_basis,
            })

    def test_delete_portfolio_only_removes_its_children(self):
        deleted = cascade.delete_portfolio(self.store, self.book["portfolio"].portfolio_id)
        self.assertEqual(deleted.portfolio_id, self.book["portfolio"].portfolio_id)
        self.assertEqual([h.holding_id for h in self.store.holdings], [self.h3.holding_id])
        self.assertEqual([t.holding_id for t in self.store.transactions], [self.h3.holding_id])
        self.assertIsNotNone(self.store.get("portfolio", self.second.portfolio_id))

    def test_delete_client_removes_everything_below(self):
        cascade.delete_client(self.store, self.book["client"].client_id)
        counts = self.store.counts()
        self.assertEqual(counts["client"], 0)
        self.assertEqual(counts["account"], 0)
        self.assertEqual(counts["portfolio"], 0)
        self.assertEqual(counts["holding"], 0)
        self.assertEqual(counts["transaction"], 0)
        self.assertEqual(counts["security"], 2)

    def test_delete_account(self):
        cascade.delete_account(self.store, self.book["account"].account_id)
        self.assertEqual(self.store.count("portfolio"), 0)
        self.assertEqual(self.store.count("holding"), 0)
        self.assertEqual(self.store.count("client"), 1)

    def test_delete_holding_removes_its_transactions_and_rebases(self):
        cascade.delete_holding(self.store, self.h1.holding_id)
        remaining = self.store.where("holding", portfolio_id=self.book["portfolio"].portfolio_id)
        self.assertEqual([h.weight for h in remaining], [Decimal("100.00")])
        self.assertNotIn(self.h1.holding_id, {t.holding_id for t in self.store.transactions})
        self.assertEqual(self.store.count("transaction"), 2)

    def test_delete_missing(self):
        with self.assertRaises(NotFound):
            cascade.delete_transaction(self.store, "TXN-404")

    def test_referenced_security_cannot_be_deleted(self):
        with self.assertRaises(InvalidInput):
            cascade.delete_security(self.store, self.book["bond"].security_id)

    def test_unreferenced_security_can_be_deleted(self):
        spare = make_security(self.store, "SPARE", "1")
        cascade.delete_security(self.store, spare.security_id)
        self.assertIsNone(self.store.get("security", spare.security_id))


class ConcurrentReadTests(unittest.TestCase):
    def setUp(self):
        self.store, self.book = make_book()
        self.portfolio = self.book["portfolio"]
        self.mover = make_security(self.store, "MOVE", "100")
        make_holding(self.store, self.portfolio, self.mover, quantity=10, cost="100")
        for idx in range(39):
            security = make_security(self.store, f"S{idx:02d}", "100")
            make_holding(self.store, self.portfolio, security, quantity=10, cost="100")

    def _holdings(self):
        return queries.holdings_for_portfolio(self.store, self.portfolio.portfolio_id)

    def test_read_list_is_not_changed_by_later_price_update(self):
        before = self._holdings()
        weights = [h.weight for h in before]
        mutations.update_security(self.store, self.mover.security_id, {"currentPrice": "5000"})
        self.assertEqual([h.weight for h in before], weights)
        self.assertNotEqual([h.weight for h in self._holdings()], weights)

    def test_reader_never_sees_half_rebased_weights(self):
        done = threading.Event()

        def writer():
            prices = ["5000", "100"]
            for n in range(300):
                mutations.update_security(self.store, self.mover.security_id, {"currentPrice": prices[n % 2]})
            done.set()

        thread = threading.Thread(target=writer)
        thread.start()
        torn = 0
        reads = 0
        while not done.is_set() or reads < 50:
            body = ok(self._holdings())
            total = sum(Decimal(str(h["weight"])) for h in body["data"])
            if abs(total - Decimal("100")) > Decimal("0.5"):
                torn += 1
            reads += 1
        thread.join()
        self.assertEqual(torn, 0)


if __name__ == "__main__":
    unittest.main()
