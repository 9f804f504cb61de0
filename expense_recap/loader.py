"""Load state for the recap page.

:class:`RecapLoader` keeps the records of the last completed request and
an explicit status, so the page can tell "loading", "loaded", "loaded
but empty" and "failed" apart.  Every request gets a generation number;
a result arriving for an older generation is discarded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

import pandas as pd

try:
    from .db import ExpenseStore, FetchError, empty_records
    from .months import InvalidMonthError, resolve_month_range
except ImportError:
    from db import ExpenseStore, FetchError, empty_records
    from months import InvalidMonthError, resolve_month_range

logger = logging.getLogger(__name__)


class LoadStatus(Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    LOADED = 'loaded'
    EMPTY = 'empty'
    FAILED = 'failed'


@dataclass(frozen=True)
class RecapState:
    status: LoadStatus = LoadStatus.IDLE
    owner_id: Optional[str] = None
    month: Optional[str] = None
    records: pd.DataFrame = field(default_factory=empty_records)
    error: Optional[str] = None

    @property
    def is_ready(self) -> bool:
        return self.status in (LoadStatus.LOADED, LoadStatus.EMPTY)


class RecapLoader:
    """Fetches one owner's month of records and tracks the outcome."""

    def __init__(self, store: ExpenseStore):
        self.store = store
        self.generation = 0
        self.state = RecapState()

    def begin(self, owner_id: str, month: str) -> int:
        """Start a new request and return its generation token."""
        self.generation += 1
        self.state = RecapState(
            status=LoadStatus.LOADING,
            owner_id=owner_id,
            month=month,
        )
        return self.generation

    def is_current(self, token: int) -> bool:
        return token == self.generation

    def complete(self, token: int, records: pd.DataFrame) -> bool:
        """Store ``records`` for request ``token``.

        Returns False (and changes nothing) when a newer request has been
        started since ``token`` was issued.
        """
        if not self.is_current(token):
            logger.debug('Discarding stale result for request %d (current %d)', token, self.generation)
            return False
        status = LoadStatus.EMPTY if records.empty else LoadStatus.LOADED
        self.state = replace(self.state, status=status, records=records, error=None)
        return True

    def fail(self, token: int, error: str) -> bool:
        """Mark request ``token`` as failed; stale failures are ignored."""
        if not self.is_current(token):
            logger.debug('Discarding stale failure for request %d (current %d)', token, self.generation)
            return False
        self.state = replace(self.state, status=LoadStatus.FAILED, records=empty_records(), error=error)
        return True

    def load(self, owner_id: str, month: str) -> RecapState:
        """Fetch the records for ``owner_id`` and ``month`` synchronously."""
        token = self.begin(owner_id, month)
        try:
            month_range = resolve_month_range(month)
        except InvalidMonthError as exc:
            logger.warning('Rejected month identifier %r: %s', month, exc)
            self.fail(token, str(exc))
            return self.state

        try:
            records = self.store.fetch_expenses(owner_id, month_range)
        except FetchError as exc:
            self.fail(token, str(exc))
            return self.state

        self.complete(token, records)
        return self.state

    def needs_reload(self, owner_id: str, month: str) -> bool:
        """True unless the current state already belongs to this owner and month.

        A failed load is not retried automatically; callers reload explicitly.
        """
        state = self.state
        if state.status is LoadStatus.IDLE:
            return True
        return state.owner_id != owner_id or state.month != month
