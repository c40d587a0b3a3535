import asyncio
import unittest

from pms.mcp.server import TOOL_PREFIX, build_mcp_server
from pms.mcp.tools import TOOL_NAMES, PortfolioTools

from factories import make_book, make_holding


class PortfolioToolsTests(unittest.TestCase):
    def setUp(self):
        self.store, self.book = make_book()
        self.holding = make_holding(self.store, self.book["portfolio"], self.book["aapl"], quantity=100, cost="145.00")
        self.tools = PortfolioTools(self.store)

    def test_every_tool_name_is_a_method(self):
        self.assertEqual(len(TOOL_NAMES), 43)
        self.assertEqual(len(set(TOOL_NAMES)), 43)
        for name in TOOL_NAMES:
            self.assertTrue(callable(getattr(self.tools, name)), name)

    def test_success_shape(self):
        result = self.tools.get_holding(self.holding.holding_id)
        self.assertTrue(result["success"])
        self.assertEqual(result["data"]["marketValue"], 17850.0)

    def test_error_shape(self):
        result = self.tools.get_client("CLI-999")
        self.assertEqual(result, {"error": True, "code": "NOT_FOUND", "message": "Client CLI-999 not found"})

    def test_invalid_input_carries_details(self):
        result = self.tools.create_holding({"portfolioId": self.book["portfolio"].portfolio_id})
        self.assertTrue(result["error"])
        self.assertEqual(result["code"], "INVALID_INPUT")
        self.assertIn("missing securityId", result["details"])

    def test_writes_are_visible_to_the_store(self):
        created = self.tools.create_client({
            "firstName": "Grace",
            "lastName": "Hopper",
            "riskTolerance": "CONSERVATIVE",
            "investmentObjective": "INCOME",
        })
        client_id = created["data"]["clientId"]
        self.assertIsNotNone(self.store.get("client", client_id))
        self.tools.delete_client(client_id)
        self.assertIsNone(self.store.get("client", client_id))

    def test_transaction_filters(self):
        self.tools.create_transaction({
            "portfolioId": self.book["portfolio"].portfolio_id,
            "securityId": self.book["aapl"].security_id,
            "transactionType": "SELL",
            "quantity": 1,
            "pricePerUnit": 180,
        })
        self.assertEqual(len(self.tools.get_transactions(type="SELL", symbol="AAPL")["data"]), 1)
        self.assertEqual(self.tools.get_transactions(type="BUY")["data"], [])

    def test_dashboard_limits_fall_back_to_defaults(self):
        self.assertEqual(len(self.tools.get_top_losers(limit=-3)["data"]), 1)
        self.assertEqual(self.tools.get_dashboard_overview()["data"]["totalHoldings"], 1)

    def test_security_delete_refused_while_held(self):
        result = self.tools.delete_security(self.book["aapl"].security_id)
        self.assertEqual(result["code"], "INVALID_INPUT")


class BuildServerTests(unittest.TestCase):
    def test_server_builds(self):
        store, _ = make_book()
        server = build_mcp_server(store, "test-book")
        self.assertEqual(server.name, "test-book")
        names = {tool.name for tool in asyncio.run(server.list_tools())}
        self.assertEqual(names, {TOOL_PREFIX + name for name in TOOL_NAMES})
        self.assertIn("portfolio_get_dashboard_overview", names)


if __name__ == "__main__":
    unittest.main()
