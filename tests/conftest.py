from types import SimpleNamespace

import pandas as pd
import pytest

from expense_recap.db import records_from_rows


class FakeQuery:
    """Chainable stand-in for the Supabase query builder."""

    def __init__(self, rows, calls, error=None):
        self.rows = rows
        self.calls = calls
        self.error = error

    def select(self, *columns):
        self.calls.append(('select',) + columns)
        return self

    def eq(self, column, value):
        self.calls.append(('eq', column, value))
        return self

    def gte(self, column, value):
        self.calls.append(('gte', column, value))
        return self

    def lte(self, column, value):
        self.calls.append(('lte', column, value))
        return self

    def execute(self):
        if self.error is not None:
            raise self.error
        return SimpleNamespace(data=self.rows)


class FakeClient:
    def __init__(self, rows=None, error=None):
        self.rows = rows or []
        self.error = error
        self.calls = []

    def table(self, name):
        self.calls.append(('table', name))
        return FakeQuery(self.rows, self.calls, self.error)


@pytest.fixture
def store_rows():
    return [
        {'tanggal': '2025-03-05', 'catatan': 'Nasi goreng', 'kategori': 'Food', 'jumlah': 15000, 'user_id': 'u1'},
        {'tanggal': '2025-03-10', 'catatan': 'Es teh', 'kategori': 'Food', 'jumlah': 5000, 'user_id': 'u1'},
        {'tanggal': '2025-03-12', 'catatan': 'Ojek', 'kategori': 'Transport', 'jumlah': 20000, 'user_id': 'u1'},
    ]


@pytest.fixture
def records(store_rows) -> pd.DataFrame:
    return records_from_rows(store_rows)


@pytest.fixture
def fake_client_factory():
    return FakeClient
