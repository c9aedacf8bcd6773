import os
from datetime import date

import pytest

# Widgets are created without a display in CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from database.db_manager import DatabaseManager
from database.schema import SchemaReconciler
from models.errors import StoreError

TODAY = date(2024, 1, 16)  # a Tuesday; the week started on Sunday 2024-01-14


class FlakyStore:
    """Wraps a real store and fails any statement containing one of `fail_on`."""

    def __init__(self, inner, fail_on=()):
        self.inner = inner
        self.fail_on = list(fail_on)

    def _check(self, statement):
        for token in self.fail_on:
            if token in statement:
                raise StoreError(f"simulated failure on {token}")

    def query_all(self, statement, params=()):
        self._check(statement)
        return self.inner.query_all(statement, params)

    def execute(self, statement, params=()):
        self._check(statement)
        return self.inner.execute(statement, params)


class BrokenStore:
    """A store where every call fails."""

    def query_all(self, statement, params=()):
        raise StoreError("store unavailable")

    def execute(self, statement, params=()):
        raise StoreError("store unavailable")


@pytest.fixture
def today():
    return lambda: TODAY


@pytest.fixture
def store(tmp_path):
    return DatabaseManager(tmp_path / "expenses.db")


@pytest.fixture
def ready_store(store, today):
    SchemaReconciler(store, today=today).reconcile()
    return store


@pytest.fixture
def notices():
    return []
