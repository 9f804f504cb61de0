"""Streamlit components for the monthly expense recap page."""

from __future__ import annotations

from typing import List, Optional

import pandas as pd
import streamlit as st
from streamlit.errors import StreamlitAPIException

# Handle both relative and absolute imports
try:
    from .aggregation import ALL_CATEGORIES, RecapSummary
    from .config import EXPORT_FILENAME, XLSX_MIME
    from .export import build_recap_frame, export_workbook
    from .formatting import format_rupiah
    from .visualization import create_category_pie_chart
except ImportError:
    from aggregation import ALL_CATEGORIES, RecapSummary
    from config import EXPORT_FILENAME, XLSX_MIME
    from export import build_recap_frame, export_workbook
    from formatting import format_rupiah
    from visualization import create_category_pie_chart


class RecapUI:
    """UI building blocks for the recap page."""
    _PAGE_CONFIGURED = False

    def __init__(self, *, configure_page: bool = False):
        """Initialize the recap UI.

        Args:
            configure_page: When True, call ``setup_page_config`` immediately.
        """
        if configure_page:
            self.setup_page_config()

    def setup_page_config(self) -> None:
        """Configure Streamlit page settings."""
        if RecapUI._PAGE_CONFIGURED:
            return
        try:
            st.set_page_config(
                page_title="Rekap Pengeluaran",
                page_icon="🧾",
                layout="wide",
                initial_sidebar_state="expanded",
            )
        except StreamlitAPIException:
            # Already configured upstream
            pass
        finally:
            RecapUI._PAGE_CONFIGURED = True

    def render_header(self) -> None:
        st.markdown(
            "<h1 style='text-align: center;'>REKAP PENGELUARAN</h1>",
            unsafe_allow_html=True,
        )

    def render_user_info(self, owner_id: str, month: str) -> None:
        st.markdown(f"User ID: **{owner_id}**  \nBulan: **{month}**")

    def render_load_error(self, message: Optional[str]) -> None:
        st.error(f"❌ Data tidak dapat dimuat. {message or ''}".strip())

    def render_category_filter(self, options: List[str]) -> Optional[str]:
        """Render the category dropdown and return the selected category.

        Returns ``None`` when "Semua" (all categories) is selected.
        """
        choices = [ALL_CATEGORIES] + options
        selected = st.selectbox(
            "Filter Kategori",
            choices,
            key="recap_category",
        )
        return None if selected == ALL_CATEGORIES else selected

    def render_expense_table(self, records: pd.DataFrame) -> None:
        if records.empty:
            st.info("Tidak ada pengeluaran untuk ditampilkan.")
            return
        st.dataframe(
            build_recap_frame(records, format_amounts=True),
            hide_index=True,
            width="stretch",
        )

    def render_export_button(self, records: pd.DataFrame) -> None:
        """Offer the unfiltered month as an ``.xlsx`` download."""
        st.download_button(
            label="📥 Export to Excel",
            data=export_workbook(records),
            file_name=EXPORT_FILENAME,
            mime=XLSX_MIME,
        )

    def render_totals(self, summary: RecapSummary) -> None:
        st.markdown(f"**Total Keseluruhan: {format_rupiah(summary.total_all)}**")
        for category, total in summary.category_totals.items():
            st.markdown(f"{category}: {format_rupiah(total)}")

    def render_category_chart(self, summary: RecapSummary) -> None:
        if not summary.category_totals:
            return
        fig = create_category_pie_chart(summary.category_totals)
        st.plotly_chart(fig, width="stretch")
