import types
from datetime import date

from expense_recap import recap_page
from expense_recap.db import ExpenseStore
from expense_recap.loader import RecapLoader


def test_initial_route_reads_query_params():
    assert recap_page.initial_route({'id': 'abc', 'bulan': '2025-03'}) == ('abc', '2025-03')


def test_initial_route_without_owner_stays_empty():
    assert recap_page.initial_route({}, today=date(2025, 7, 4)) == ('', '2025-07')
    assert recap_page.initial_route({'bulan': '2024-01'}) == ('', '2024-01')


def test_get_loader_is_kept_in_session_state(monkeypatch, fake_client_factory):
    state = {}
    monkeypatch.setattr(recap_page, 'st', types.SimpleNamespace(session_state=state))
    store = ExpenseStore(fake_client_factory())
    loader = recap_page.get_loader(store)
    assert isinstance(loader, RecapLoader)
    assert state[recap_page.LOADER_KEY] is loader
    assert recap_page.get_loader(store) is loader


def test_get_loader_replaced_for_new_store(monkeypatch, fake_client_factory):
    state = {}
    monkeypatch.setattr(recap_page, 'st', types.SimpleNamespace(session_state=state))
    first = recap_page.get_loader(ExpenseStore(fake_client_factory()))
    second = recap_page.get_loader(ExpenseStore(fake_client_factory()))
    assert first is not second


def test_shift_selected_month(monkeypatch):
    state = {recap_page.MONTH_KEY: '2025-01'}
    monkeypatch.setattr(recap_page, 'st', types.SimpleNamespace(session_state=state))
    recap_page._shift_selected_month(-1)
    assert state[recap_page.MONTH_KEY] == '2024-12'


def test_shift_selected_month_leaves_invalid_value(monkeypatch):
    state = {recap_page.MONTH_KEY: 'oops'}
    monkeypatch.setattr(recap_page, 'st', types.SimpleNamespace(session_state=state))
    recap_page._shift_selected_month(1)
    assert state[recap_page.MONTH_KEY] == 'oops'
