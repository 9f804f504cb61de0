"""Monthly totals and the category filter.

All functions here are pure: they take a record DataFrame (see
:data:`expense_recap.db.RECORD_COLUMNS`) and never touch the store or
Streamlit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pandas as pd

ALL_CATEGORIES = 'Semua'
UNCATEGORIZED = 'Tanpa kategori'


@dataclass(frozen=True)
class RecapSummary:
    """Derived figures for one month of records."""

    total_all: float
    category_totals: Dict[str, float] = field(default_factory=dict)
    visible_records: pd.DataFrame = field(default_factory=pd.DataFrame)


def label_categories(records: pd.DataFrame) -> pd.DataFrame:
    """Copy of ``records`` with missing or blank categories set to ``UNCATEGORIZED``."""
    if records.empty:
        return records
    labelled = records.copy()
    category = labelled['category']
    missing = category.isna() | category.astype(str).str.strip().eq('')
    labelled['category'] = category.where(~missing, UNCATEGORIZED)
    return labelled


def _is_unfiltered(category: Optional[str]) -> bool:
    return category is None or category == '' or category == ALL_CATEGORIES


def calculate_category_totals(records: pd.DataFrame) -> Dict[str, float]:
    """Sum ``amount`` per category, in order of first appearance."""
    if records.empty:
        return {}
    grouped = label_categories(records).groupby('category', sort=False)['amount'].sum()
    return {category: float(total) for category, total in grouped.items()}


def filter_records(records: pd.DataFrame, category: Optional[str] = None) -> pd.DataFrame:
    """Records whose category equals ``category`` (all records when unfiltered)."""
    if _is_unfiltered(category):
        return records
    return records[records['category'] == category]


def aggregate(records: pd.DataFrame, category: Optional[str] = None) -> RecapSummary:
    """Compute the grand total, per-category totals and the visible rows.

    Totals always come from the full ``records``; the ``category`` filter
    only narrows ``visible_records``.  Records without a category are
    grouped and filtered under ``UNCATEGORIZED``.
    """
    records = label_categories(records)
    total_all = float(records['amount'].sum()) if not records.empty else 0.0
    return RecapSummary(
        total_all=total_all,
        category_totals=calculate_category_totals(records),
        visible_records=filter_records(records, category),
    )


def category_options(records: pd.DataFrame) -> List[str]:
    """Distinct categories in order of first appearance, for the filter dropdown."""
    if records.empty:
        return []
    return [str(value) for value in label_categories(records)['category'].drop_duplicates()]
