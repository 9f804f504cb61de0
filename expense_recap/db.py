"""Data access for expense records held in the hosted Supabase store.

Records come back as a pandas DataFrame with the columns listed in
:data:`RECORD_COLUMNS`.  The store's own column names are mapped by
:data:`STORE_COLUMNS`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd
from supabase import Client, create_client

try:
    from .config import StoreConfig
    from .months import MonthRange
except ImportError:
    from config import StoreConfig
    from months import MonthRange

logger = logging.getLogger(__name__)

# store column -> record column
STORE_COLUMNS: Dict[str, str] = {
    'tanggal': 'date',
    'catatan': 'note',
    'kategori': 'category',
    'jumlah': 'amount',
    'user_id': 'owner_id',
}
RECORD_COLUMNS: List[str] = ['date', 'note', 'category', 'amount', 'owner_id']

OWNER_FIELD = 'user_id'
DATE_FIELD = 'tanggal'


class FetchError(RuntimeError):
    """Raised when the store rejects a query or cannot be reached."""


def empty_records() -> pd.DataFrame:
    """An empty record frame with the standard columns."""
    frame = pd.DataFrame(columns=RECORD_COLUMNS)
    frame['amount'] = frame['amount'].astype(float)
    return frame


def _to_iso_date(value: Any) -> Optional[str]:
    if value is None or value == '':
        return None
    if hasattr(value, 'isoformat'):
        return value.isoformat()[:10]
    return str(value)[:10]


def records_from_rows(rows: Optional[Iterable[Dict[str, Any]]]) -> pd.DataFrame:
    """Normalize raw store rows into a record DataFrame.

    Row order is preserved.  Unknown store columns are kept as-is after
    the standard columns.
    """
    rows = list(rows or [])
    if not rows:
        return empty_records()

    frame = pd.DataFrame(rows).rename(columns=STORE_COLUMNS)
    for column in RECORD_COLUMNS:
        if column not in frame.columns:
            frame[column] = None

    frame['date'] = frame['date'].map(_to_iso_date)
    frame['amount'] = pd.to_numeric(frame['amount'], errors='coerce').fillna(0.0).astype(float)

    extra = [column for column in frame.columns if column not in RECORD_COLUMNS]
    return frame[RECORD_COLUMNS + extra].reset_index(drop=True)


class ExpenseStore:
    """Read-only access to the expense table."""

    def __init__(self, client: Client, table: str = 'pengeluaran'):
        self.client = client
        self.table = table

    def fetch_expenses(self, owner_id: str, month_range: MonthRange) -> pd.DataFrame:
        """Fetch every record of ``owner_id`` dated inside ``month_range``.

        Both bounds are inclusive.  No pagination is applied and the order
        is whatever the store returns.

        Raises:
            FetchError: If the query fails for any reason.
        """
        logger.debug(
            'Fetching %s for owner %s between %s and %s',
            self.table, owner_id, month_range.first_day, month_range.last_day,
        )
        try:
            response = (
                self.client.table(self.table)
                .select('*')
                .eq(OWNER_FIELD, owner_id)
                .gte(DATE_FIELD, month_range.first_day)
                .lte(DATE_FIELD, month_range.last_day)
                .execute()
            )
        except Exception as exc:
            logger.error('Failed to fetch expenses for %s (%s): %s', owner_id, month_range.month, exc)
            raise FetchError(f"Could not load expenses for {month_range.month}: {exc}") from exc

        records = records_from_rows(getattr(response, 'data', None))
        logger.info('Loaded %d expense records for %s', len(records), month_range.month)
        return records


def create_store(config: StoreConfig) -> ExpenseStore:
    """Create an :class:`ExpenseStore` backed by a new Supabase client."""
    client = create_client(config.url, config.key)
    return ExpenseStore(client, table=config.table)
