import pytest
from streamlit.testing.v1 import AppTest

from expense_recap import recap_page
from expense_recap.config import ConfigurationError
from expense_recap.db import ExpenseStore


def _recap_app():
    from expense_recap import recap_page

    recap_page.main()


def _use_store(monkeypatch, client):
    store = ExpenseStore(client)
    monkeypatch.setattr(recap_page, 'get_store', lambda: store)
    monkeypatch.setattr(recap_page, 'setup_logging', lambda level: None)
    return store


def _open(owner_id=None, month='2025-03'):
    at = AppTest.from_function(_recap_app, default_timeout=30)
    if owner_id is not None:
        at.query_params['id'] = owner_id
    at.query_params['bulan'] = month
    return at.run()


def _markdown(at):
    return [element.value for element in at.markdown]


def test_page_renders_month_table_and_totals(monkeypatch, fake_client_factory, store_rows):
    _use_store(monkeypatch, fake_client_factory(rows=store_rows))
    at = _open('u1')

    assert not at.exception
    assert len(at.dataframe[0].value) == 3
    assert '**Total Keseluruhan: Rp40.000**' in _markdown(at)
    assert 'Food: Rp20.000' in _markdown(at)
    assert 'Transport: Rp20.000' in _markdown(at)


def test_category_filter_narrows_table_only(monkeypatch, fake_client_factory, store_rows):
    _use_store(monkeypatch, fake_client_factory(rows=store_rows))
    at = _open('u1')

    at.selectbox(key='recap_category').select('Transport').run()

    assert not at.exception
    table = at.dataframe[0].value
    assert table['Kategori'].tolist() == ['Transport']
    assert '**Total Keseluruhan: Rp40.000**' in _markdown(at)
    assert 'Food: Rp20.000' in _markdown(at)


def test_empty_month_shows_info(monkeypatch, fake_client_factory):
    _use_store(monkeypatch, fake_client_factory(rows=[]))
    at = _open('u1')

    assert not at.exception
    assert any('Belum ada pengeluaran' in element.value for element in at.info)
    assert '**Total Keseluruhan: Rp0**' in _markdown(at)
    assert not at.error


def test_failed_load_shows_error_banner(monkeypatch, fake_client_factory):
    _use_store(monkeypatch, fake_client_factory(error=ConnectionError('unreachable')))
    at = _open('u1')

    assert not at.exception
    assert 'Data tidak dapat dimuat' in at.error[0].value
    assert 'unreachable' in at.error[0].value
    assert len(at.dataframe) == 0


def test_invalid_month_shows_error_banner(monkeypatch, fake_client_factory):
    client = fake_client_factory(rows=[])
    _use_store(monkeypatch, client)
    at = _open('u1', month='2025-13')

    assert 'between 01 and 12' in at.error[0].value
    assert client.calls == []


def test_missing_configuration_stops_page(monkeypatch):
    def broken_store():
        raise ConfigurationError('Missing store settings: SUPABASE_URL.')

    monkeypatch.setattr(recap_page, 'get_store', broken_store)
    monkeypatch.setattr(recap_page, 'setup_logging', lambda level: None)
    at = _open('u1')

    assert 'SUPABASE_URL' in at.error[0].value
    assert len(at.dataframe) == 0


def test_new_session_does_not_see_previous_visitor(monkeypatch, fake_client_factory, store_rows):
    _use_store(monkeypatch, fake_client_factory(rows=store_rows))
    first = _open('alice')
    assert 'User ID: **alice**' in ' '.join(_markdown(first))

    second = _open(owner_id=None)

    assert not second.exception
    assert second.text_input(key=recap_page.OWNER_KEY).value == ''
    assert not any('alice' in value for value in _markdown(second))
    assert any('Masukkan User ID' in element.value for element in second.info)
    assert len(second.dataframe) == 0


@pytest.mark.parametrize('delta_button, expected', [('recap_prev_month', '2025-02'), ('recap_next_month', '2025-04')])
def test_month_buttons_move_the_route(monkeypatch, fake_client_factory, delta_button, expected):
    client = fake_client_factory(rows=[])
    _use_store(monkeypatch, client)
    at = _open('u1')

    at.button(key=delta_button).click().run()

    assert at.text_input(key=recap_page.MONTH_KEY).value == expected
    assert ('gte', 'tanggal', f'{expected}-01') in client.calls
