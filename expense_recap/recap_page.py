"""Monthly expense recap page.

Owner id and month come from the ``id`` and ``bulan`` query parameters
(e.g. ``?id=abc123&bulan=2025-03``) and can be changed from the sidebar.
The route lives only in the visitor's own session state.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping, Optional, Tuple

import streamlit as st

try:
    from .aggregation import aggregate, category_options
    from .config import ConfigurationError, get_log_level, load_store_config
    from .db import ExpenseStore, create_store
    from .loader import LoadStatus, RecapLoader
    from .log import setup_logging
    from .months import InvalidMonthError, current_month, shift_month
    from .recap_ui import RecapUI
except ImportError:
    from aggregation import aggregate, category_options
    from config import ConfigurationError, get_log_level, load_store_config
    from db import ExpenseStore, create_store
    from loader import LoadStatus, RecapLoader
    from log import setup_logging
    from months import InvalidMonthError, current_month, shift_month
    from recap_ui import RecapUI

logger = logging.getLogger(__name__)

OWNER_KEY = 'recap_owner_id'
MONTH_KEY = 'recap_month'
LOADER_KEY = 'recap_loader'


def initial_route(params: Mapping[str, Any], today: Optional[date] = None) -> Tuple[str, str]:
    """Pick the starting owner id and month from the query parameters.

    The owner id is empty when ``id`` is absent; the month defaults to the
    current month.
    """
    owner_id = str(params.get('id') or '').strip()
    month = str(params.get('bulan') or current_month(today)).strip()
    return owner_id, month


def _shift_selected_month(delta: int) -> None:
    month = st.session_state.get(MONTH_KEY, '')
    try:
        st.session_state[MONTH_KEY] = shift_month(month, delta)
    except InvalidMonthError as exc:
        logger.warning('Cannot move from month %r: %s', month, exc)


def render_route_sidebar() -> Tuple[str, str]:
    """Render the owner/month inputs and return the current route."""
    if OWNER_KEY not in st.session_state or MONTH_KEY not in st.session_state:
        owner_id, month = initial_route(st.query_params)
        st.session_state[OWNER_KEY] = owner_id
        st.session_state[MONTH_KEY] = month

    st.sidebar.subheader("🔎 Rekap")
    st.sidebar.text_input("User ID", key=OWNER_KEY)
    st.sidebar.text_input("Bulan (YYYY-MM)", key=MONTH_KEY)
    col1, col2 = st.sidebar.columns(2)
    with col1:
        st.button("◀ Sebelumnya", on_click=_shift_selected_month, args=(-1,), key="recap_prev_month")
    with col2:
        st.button("Berikutnya ▶", on_click=_shift_selected_month, args=(1,), key="recap_next_month")

    owner_id = st.session_state[OWNER_KEY].strip()
    month = st.session_state[MONTH_KEY].strip()
    if owner_id:
        st.query_params['id'] = owner_id
    st.query_params['bulan'] = month
    return owner_id, month


@st.cache_resource
def get_store() -> ExpenseStore:
    """Create the store once per server process.

    Raises:
        ConfigurationError: If the store settings are missing.
    """
    return create_store(load_store_config())


def get_loader(store: ExpenseStore) -> RecapLoader:
    """Return the session's loader, creating it on first use."""
    loader = st.session_state.get(LOADER_KEY)
    if loader is None or loader.store is not store:
        loader = RecapLoader(store)
        st.session_state[LOADER_KEY] = loader
    return loader


def main() -> None:
    """Render the recap page."""
    setup_logging(get_log_level())
    ui = RecapUI(configure_page=True)
    ui.render_header()

    try:
        store = get_store()
    except ConfigurationError as exc:
        logger.critical('Store is not configured: %s', exc)
        st.error(f"⚠️ {exc}")
        st.stop()

    owner_id, month = render_route_sidebar()
    if not owner_id:
        st.info("Masukkan User ID di sidebar untuk melihat rekap pengeluaran.")
        return

    loader = get_loader(store)
    reload_requested = st.sidebar.button("🔄 Muat ulang", key="recap_reload")
    if reload_requested or loader.needs_reload(owner_id, month):
        with st.spinner("Memuat data pengeluaran..."):
            loader.load(owner_id, month)
    state = loader.state

    ui.render_user_info(owner_id, month)
    if state.status is LoadStatus.FAILED:
        ui.render_load_error(state.error)
        return

    records = state.records
    if state.status is LoadStatus.EMPTY:
        st.info("Belum ada pengeluaran tercatat pada bulan ini.")

    category = ui.render_category_filter(category_options(records))
    summary = aggregate(records, category)

    ui.render_expense_table(summary.visible_records)
    col1, col2 = st.columns([1, 1])
    with col1:
        ui.render_export_button(records)
    with col2:
        ui.render_totals(summary)
    ui.render_category_chart(summary)
