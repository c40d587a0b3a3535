"""In-process entity store.

Six insertion-ordered collections keyed by entity id, plus the per-type id
counters. Nothing is persisted: a fresh store (or ``reset()``) starts empty
with every counter at 1.

Stored records are never mutated. Writers swap in a new version with
``replace()``, so a list read under the lock stays consistent after it is
released.
"""

import functools
import threading
from typing import Callable, Iterable

from .errors import NotFound

KINDS = ("client", "account", "portfolio", "holding", "transaction", "security")

ID_PREFIXES = {
    "client": "CLI",
    "account": "ACC",
    "portfolio": "PRT",
    "holding": "HLD",
    "transaction": "TXN",
    "security": "SEC",
}

KEY_FIELDS = {kind: f"{kind}_id" for kind in KINDS}


class EntityStore:
    def __init__(self):
        # Re-entrant so a locked operation can call other locked operations.
        self.lock = threading.RLock()
        self._collections: dict[str, dict] = {}
        self._counters: dict[str, int] = {}
        self.reset()

    def reset(self):
        with self.lock:
            self._collections = {kind: {} for kind in KINDS}
            self._counters = {kind: 1 for kind in KINDS}

    def create_id(self, kind: str) -> str:
        with self.lock:
            seq = self._counters[kind]
            self._counters[kind] = seq + 1
            return f"{ID_PREFIXES[kind]}-{seq:03d}"

    def _collection(self, kind: str) -> dict:
        try:
            return self._collections[kind]
        except KeyError:
            raise ValueError(f"unknown entity kind: {kind}") from None

    def add(self, kind: str, record):
        key = getattr(record, KEY_FIELDS[kind])
        coll = self._collection(kind)
        if key in coll:
            raise ValueError(f"duplicate {kind} id {key}")
        coll[key] = record
        return record

    def replace(self, kind: str, record):
        """Swap in a new version of an existing record, keeping its position."""
        key = getattr(record, KEY_FIELDS[kind])
        coll = self._collection(kind)
        if key not in coll:
            raise NotFound(kind, key)
        coll[key] = record
        return record

    def get(self, kind: str, key: str | None):
        if key is None:
            return None
        return self._collection(kind).get(key)

    def require(self, kind: str, key: str):
        record = self.get(kind, key)
        if record is None:
            raise NotFound(kind, key)
        return record

    def remove(self, kind: str, key: str):
        record = self._collection(kind).pop(key, None)
        if record is None:
            raise NotFound(kind, key)
        return record

    def remove_where(self, kind: str, predicate: Callable) -> list:
        coll = self._collection(kind)
        doomed = [key for key, record in coll.items() if predicate(record)]
        return [coll.pop(key) for key in doomed]

    def all(self, kind: str) -> list:
        return list(self._collection(kind).values())

    def where(self, kind: str, **criteria) -> list:
        return [
            record
            for record in self._collection(kind).values()
            if all(getattr(record, field) == value for field, value in criteria.items())
        ]

    def where_in(self, kind: str, field: str, values: Iterable) -> list:
        wanted = set(values)
        return [record for record in self._collection(kind).values() if getattr(record, field) in wanted]

    def count(self, kind: str) -> int:
        return len(self._collection(kind))

    def counts(self) -> dict[str, int]:
        return {kind: len(self._collections[kind]) for kind in KINDS}

    @property
    def clients(self) -> list:
        return self.all("client")

    @property
    def accounts(self) -> list:
        return self.all("account")

    @property
    def portfolios(self) -> list:
        return self.all("portfolio")

    @property
    def holdings(self) -> list:
        return self.all("holding")

    @property
    def transactions(self) -> list:
        return self.all("transaction")

    @property
    def securities(self) -> list:
        return self.all("security")


def synchronized(fn):
    """Run a core operation under the store lock; the store is the first argument."""

    @functools.wraps(fn)
    def wrapper(store: EntityStore, *args, **kwargs):
        with store.lock:
            return fn(store, *args, **kwargs)

    return wrapper
