"""Calendar-month helpers.

Month identifiers are ``YYYY-MM`` strings.  :func:`resolve_month_range`
turns one into the inclusive ``[first_day, last_day]`` date range used
to query the store.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date
from typing import Optional

MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


class InvalidMonthError(ValueError):
    """Raised for month identifiers that are not ``YYYY-MM``."""


@dataclass(frozen=True)
class MonthRange:
    """Inclusive date range covering one calendar month (ISO strings)."""

    month: str
    first_day: str
    last_day: str


def parse_month(month: str) -> tuple[int, int]:
    """Split a ``YYYY-MM`` identifier into ``(year, month)``.

    Raises:
        InvalidMonthError: If the identifier is malformed or the month
            number is outside 01-12.
    """
    if not isinstance(month, str):
        raise InvalidMonthError(f"Month must be a 'YYYY-MM' string, got {month!r}")
    match = MONTH_PATTERN.match(month.strip())
    if not match:
        raise InvalidMonthError(f"Invalid month '{month}': expected format YYYY-MM (e.g. 2025-03)")
    year, month_number = int(match.group(1)), int(match.group(2))
    if not 1 <= month_number <= 12:
        raise InvalidMonthError(f"Invalid month '{month}': month must be between 01 and 12")
    if year < 1:
        raise InvalidMonthError(f"Invalid month '{month}': year must be 0001 or later")
    return year, month_number


def resolve_month_range(month: str) -> MonthRange:
    """Return the first and last calendar day of ``month``.

    Example:
        >>> resolve_month_range('2024-02')
        MonthRange(month='2024-02', first_day='2024-02-01', last_day='2024-02-29')
    """
    year, month_number = parse_month(month)
    last = calendar.monthrange(year, month_number)[1]
    return MonthRange(
        month=f"{year:04d}-{month_number:02d}",
        first_day=date(year, month_number, 1).isoformat(),
        last_day=date(year, month_number, last).isoformat(),
    )


def current_month(today: Optional[date] = None) -> str:
    """Month identifier for ``today`` (defaults to the local date)."""
    today = today or date.today()
    return f"{today.year:04d}-{today.month:02d}"


def shift_month(month: str, delta: int) -> str:
    """Move ``month`` forward (or backward, for negative ``delta``) by whole months."""
    year, month_number = parse_month(month)
    index = year * 12 + (month_number - 1) + delta
    new_year, new_month = divmod(index, 12)
    if not 1 <= new_year <= 9999:
        raise InvalidMonthError(f"Cannot shift '{month}' by {delta} months: year out of range")
    return f"{new_year:04d}-{new_month + 1:02d}"
