import unittest

from fastapi.testclient import TestClient

from pms.main import create_app

from factories import make_book, make_holding

API = "/api/v1"


class ApiTests(unittest.TestCase):
    def setUp(self):
        self.store, self.book = make_book()
        self.holding = make_holding(self.store, self.book["portfolio"], self.book["aapl"], quantity=100, cost="145.00")
        self.client = TestClient(create_app(self.store, seed_on_startup=False))

    def test_health(self):
        res = self.client.get("/health")
        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["counts"]["holding"], 1)
        self.assertIn("x-request-id", res.headers)

    def test_list_uses_envelope_and_camel_case(self):
        res = self.client.get(f"{API}/holdings")
        self.assertEqual(res.status_code, 200)
        body = res.json()
        self.assertTrue(body["success"])
        self.assertIn("timestamp", body)
        holding = body["data"][0]
        self.assertEqual(holding["holdingId"], self.holding.holding_id)
        self.assertEqual(holding["marketValue"], 17850.0)
        self.assertEqual(holding["unrealizedGainPercent"], 23.1)

    def test_not_found(self):
        res = self.client.get(f"{API}/clients/CLI-999")
        self.assertEqual(res.status_code, 404)
        body = res.json()
        self.assertFalse(body["success"])
        self.assertEqual(body["error"]["code"], "NOT_FOUND")

    def test_malformed_id(self):
        res = self.client.get(f"{API}/portfolios/not-an-id")
        self.assertEqual(res.status_code, 422)
        self.assertEqual(res.json()["error"]["code"], "VALIDATION_ERROR")

    def test_unknown_api_route(self):
        res = self.client.get(f"{API}/nothing-here")
        self.assertEqual(res.status_code, 404)
        self.assertEqual(res.json()["error"]["message"], "API endpoint not found")

    def test_create_client(self):
        res = self.client.post(f"{API}/clients", json={
            "firstName": "Grace",
            "lastName": "Hopper",
            "riskTolerance": "AGGRESSIVE",
            "investmentObjective": "GROWTH",
        })
        self.assertEqual(res.status_code, 201)
        self.assertEqual(res.json()["data"]["clientId"], "CLI-002")

    def test_invalid_payload(self):
        res = self.client.post(f"{API}/clients", json={"firstName": "Grace"})
        self.assertEqual(res.status_code, 400)
        error = res.json()["error"]
        self.assertEqual(error["code"], "INVALID_INPUT")
        self.assertIn("missing lastName", error["details"])

    def test_portfolio_performance(self):
        res = self.client.get(f"{API}/portfolios/{self.book['portfolio'].portfolio_id}/performance")
        self.assertEqual(res.status_code, 200)
        data = res.json()["data"]
        self.assertEqual(data["portfolio"]["portfolioId"], self.book["portfolio"].portfolio_id)
        perf = data["performance"]
        self.assertEqual(perf["totalMarketValue"], 17850.0)
        self.assertEqual(perf["topHoldings"][0]["symbol"], "AAPL")
        self.assertEqual(perf["assetAllocation"], {"STOCK": 100.0})

    def test_security_price_update_cascades(self):
        res = self.client.put(f"{API}/securities/{self.book['aapl'].security_id}", json={"currentPrice": 200})
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["data"]["previousClose"], 178.5)
        holding = self.client.get(f"{API}/holdings/{self.holding.holding_id}").json()["data"]
        self.assertEqual(holding["marketValue"], 20000.0)

    def test_security_lookups(self):
        res = self.client.get(f"{API}/securities/symbol/ust10y")
        self.assertEqual(res.json()["data"]["securityType"], "BOND")
        res = self.client.get(f"{API}/securities/type/STOCK")
        self.assertEqual([s["symbol"] for s in res.json()["data"]], ["AAPL"])

    def test_transactions_filter(self):
        self.client.post(f"{API}/transactions", json={
            "portfolioId": self.book["portfolio"].portfolio_id,
            "securityId": self.book["aapl"].security_id,
            "transactionType": "DIVIDEND",
            "totalAmount": 12.5,
            "transactionDate": "2024-06-01T09:00:00Z",
        })
        res = self.client.get(f"{API}/transactions", params={"type": "DIVIDEND", "startDate": "2024-01-01"})
        data = res.json()["data"]
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["totalAmount"], 12.5)
        self.assertEqual(data[0]["settlementDate"][:10], "2024-06-04")

    def test_delete_portfolio_cascades(self):
        portfolio_id = self.book["portfolio"].portfolio_id
        res = self.client.delete(f"{API}/portfolios/{portfolio_id}")
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json()["data"]["portfolioId"], portfolio_id)
        self.assertEqual(self.client.get(f"{API}/holdings/portfolio/{portfolio_id}").json()["data"], [])

    def test_dashboard(self):
        overview = self.client.get(f"{API}/dashboard/overview").json()["data"]
        self.assertEqual(overview["totalAUM"], 17850.0)
        self.assertEqual(overview["clientsByRiskTolerance"]["MODERATE"], 1)
        top = self.client.get(f"{API}/dashboard/top-performers", params={"limit": 0}).json()["data"]
        self.assertEqual(len(top), 1)
        self.assertEqual(top[0]["clientName"], "Ada Lovelace")
        allocation = self.client.get(f"{API}/dashboard/allocation").json()["data"]
        self.assertEqual(allocation, {"assetAllocation": {"STOCK": 100.0}})
        recent = self.client.get(f"{API}/dashboard/recent-transactions").json()["data"]
        self.assertEqual(recent, [])

    def test_referenced_security_delete_refused(self):
        res = self.client.delete(f"{API}/securities/{self.book['aapl'].security_id}")
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["error"]["code"], "INVALID_INPUT")


if __name__ == "__main__":
    unittest.main()
