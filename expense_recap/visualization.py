"""Plotly charts for the recap page.

Functions accept the figures computed in :mod:`aggregation` and return a
``plotly.graph_objects.Figure`` that Streamlit renders via
``st.plotly_chart``.
"""

from __future__ import annotations

from typing import Dict

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

try:
    from .formatting import format_rupiah
except ImportError:
    from formatting import format_rupiah


def create_category_pie_chart(category_totals: Dict[str, float], title: str | None = None) -> go.Figure:
    """Generate a pie chart of the month's spending per category.

    Parameters
    ----------
    category_totals : dict
        Mapping of category label to summed amount.
    title : str, optional
        Title for the chart.

    Returns
    -------
    plotly.graph_objects.Figure
        Pie chart; an empty figure with a placeholder title when there is
        nothing to show.
    """
    if not category_totals or sum(category_totals.values()) <= 0:
        fig = go.Figure()
        fig.update_layout(title="Tidak ada data")
        return fig
    df = pd.DataFrame({
        "Kategori": list(category_totals.keys()),
        "Jumlah": list(category_totals.values()),
    })
    df["Label"] = df["Jumlah"].map(format_rupiah)
    fig = px.pie(df, names="Kategori", values="Jumlah", custom_data=["Label"])
    fig.update_traces(hovertemplate="%{label}: %{customdata[0]}<extra></extra>")
    fig.update_layout(title=title or "Pengeluaran per Kategori")
    return fig
