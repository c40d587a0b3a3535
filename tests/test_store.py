import threading
import unittest

from pms.errors import NotFound
from pms.store import EntityStore, synchronized

from factories import make_client, make_security


class EntityStoreTests(unittest.TestCase):
    def setUp(self):
        self.store = EntityStore()

    def test_ids_are_prefixed_and_zero_padded(self):
        self.assertEqual(self.store.create_id("client"), "CLI-001")
        self.assertEqual(self.store.create_id("client"), "CLI-002")
        self.assertEqual(self.store.create_id("transaction"), "TXN-001")
        self.assertEqual(self.store.create_id("security"), "SEC-001")

    def test_counter_grows_past_three_digits(self):
        for _ in range(999):
            self.store.create_id("holding")
        self.assertEqual(self.store.create_id("holding"), "HLD-1000")

    def test_reset_clears_collections_and_counters(self):
        make_client(self.store)
        make_security(self.store)
        self.store.reset()
        self.assertEqual(self.store.counts(), dict.fromkeys(self.store.counts(), 0))
        self.assertEqual(self.store.create_id("client"), "CLI-001")

    def test_require_raises_not_found(self):
        with self.assertRaises(NotFound) as ctx:
            self.store.require("portfolio", "PRT-404")
        self.assertEqual(ctx.exception.code, "NOT_FOUND")
        self.assertIn("PRT-404", ctx.exception.message)

    def test_get_missing_returns_none(self):
        self.assertIsNone(self.store.get("client", "CLI-001"))
        self.assertIsNone(self.store.get("client", None))

    def test_unknown_kind_is_rejected(self):
        with self.assertRaises(ValueError):
            self.store.all("widget")

    def test_replace_keeps_insertion_order(self):
        first = make_client(self.store, first="A")
        make_client(self.store, first="B")
        self.store.replace("client", first.model_copy(update={"first_name": "Z"}))
        self.assertEqual([c.first_name for c in self.store.clients], ["Z", "B"])

    def test_where_and_where_in(self):
        make_client(self.store, risk="AGGRESSIVE")
        make_client(self.store, risk="CONSERVATIVE")
        make_client(self.store, risk="AGGRESSIVE")
        aggressive = self.store.where("client", risk_tolerance="AGGRESSIVE")
        self.assertEqual([c.client_id for c in aggressive], ["CLI-001", "CLI-003"])
        picked = self.store.where_in("client", "client_id", ["CLI-002", "CLI-009"])
        self.assertEqual([c.client_id for c in picked], ["CLI-002"])

    def test_remove_where_returns_removed_records(self):
        make_client(self.store)
        make_client(self.store)
        removed = self.store.remove_where("client", lambda c: c.client_id == "CLI-002")
        self.assertEqual([c.client_id for c in removed], ["CLI-002"])
        self.assertEqual(self.store.count("client"), 1)

    def test_synchronized_holds_the_store_lock(self):
        seen = []

        @synchronized
        def locked_op(store):
            acquired = []
            worker = threading.Thread(target=lambda: acquired.append(store.lock.acquire(timeout=0.05)))
            worker.start()
            worker.join()
            seen.append(acquired[0])

        locked_op(self.store)
        self.assertEqual(seen, [False])


if __name__ == "__main__":
    unittest.main()
