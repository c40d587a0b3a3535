import unittest
from datetime import datetime, timezone

from pms.errors import InvalidInput, NotFound
from pms.portfolio import queries
from pms.portfolio.mutations import create_transaction

from factories import make_book


class QueryTests(unittest.TestCase):
    def setUp(self):
        self.store, self.book = make_book()
        portfolio_id = self.book["portfolio"].portfolio_id
        rows = [
            (self.book["aapl"], "BUY", datetime(2024, 1, 10, tzinfo=timezone.utc)),
            (self.book["bond"], "BUY", datetime(2024, 2, 10, tzinfo=timezone.utc)),
            (self.book["aapl"], "DIVIDEND", datetime(2024, 3, 10, tzinfo=timezone.utc)),
        ]
        for security, kind, when in rows:
            create_transaction(self.store, {
                "portfolioId": portfolio_id,
                "securityId": security.security_id,
                "transactionType": kind,
                "transactionDate": when,
            })

    def test_transactions_for_portfolio_newest_first(self):
        found = queries.transactions_for_portfolio(self.store, self.book["portfolio"].portfolio_id)
        self.assertEqual([t.transaction_id for t in found], ["TXN-003", "TXN-002", "TXN-001"])

    def test_filter_by_date_range(self):
        found = queries.search_transactions(self.store, start_date="2024-02-01", end_date="2024-03-01")
        self.assertEqual([t.transaction_id for t in found], ["TXN-002"])

    def test_filter_by_type_and_symbol(self):
        found = queries.search_transactions(self.store, transaction_type="buy", symbol="aapl")
        self.assertEqual([t.transaction_id for t in found], ["TXN-001"])

    def test_unknown_type_matches_nothing(self):
        self.assertEqual(queries.search_transactions(self.store, transaction_type="GIFT"), [])

    def test_bad_date(self):
        with self.assertRaises(InvalidInput):
            queries.search_transactions(self.store, start_date="not a date")

    def test_security_by_symbol_is_case_insensitive(self):
        self.assertEqual(queries.security_by_symbol(self.store, " aapl ").security_id, "SEC-001")
        with self.assertRaises(NotFound):
            queries.security_by_symbol(self.store, "NOPE")

    def test_securities_by_type(self):
        self.assertEqual([s.symbol for s in queries.securities_by_type(self.store, "bond")], ["UST10Y"])
        self.assertEqual(queries.securities_by_type(self.store, "CRYPTO"), [])

    def test_children_lookups(self):
        client_id = self.book["client"].client_id
        self.assertEqual(len(queries.accounts_for_client(self.store, client_id)), 1)
        self.assertEqual(queries.accounts_for_client(self.store, "CLI-404"), [])
        self.assertEqual(len(queries.portfolios_for_account(self.store, self.book["account"].account_id)), 1)
        self.assertEqual(queries.holdings_for_portfolio(self.store, self.book["portfolio"].portfolio_id), [])


if __name__ == "__main__":
    unittest.main()
